import logging
import pytest
from dependency_injector import errors, providers

from conftest import RIDER_ID, expected_positions
from di.container import Container
from utils.logging import POSITION_LOGGER, PositionLookupFilter


@pytest.fixture
def container(profile_store, roster_source, event_directory, ghost_source):
    return Container(
        profile_store=providers.Object(profile_store),
        roster_source=providers.Object(roster_source),
        event_directory=providers.Object(event_directory),
        ghost_source=providers.Object(ghost_source),
    )


def test_riders_share_cache_and_presence(container, status_fn):
    first = container.rider(account={}, rider_id=RIDER_ID, status_fn=status_fn)
    second = container.rider(account={}, rider_id=20102, status_fn=status_fn)

    assert first is not second
    assert first.id_set_cache is second.id_set_cache
    assert first.presence_registry is second.presence_registry


def test_missing_collaborator_is_reported(status_fn):
    with pytest.raises(errors.Error):
        Container().rider(account={}, rider_id=RIDER_ID, status_fn=status_fn)


@pytest.mark.asyncio
async def test_all_users_across_container_riders(container, status_fn):
    await container.rider(account={}, rider_id=20102, status_fn=status_fn).get_positions()
    rider = container.rider(account={}, rider_id=RIDER_ID, status_fn=status_fn)
    rider.set_filter("all:users")

    assert await rider.get_positions() == expected_positions([RIDER_ID, 20102])


def test_logging_resource_installs_lookup_filter(container):
    logger = logging.getLogger(POSITION_LOGGER)
    container.init_resources()
    try:
        assert any(isinstance(f, PositionLookupFilter) for f in logger.filters)
    finally:
        container.shutdown_resources()
    assert not any(isinstance(f, PositionLookupFilter) for f in logger.filters)
