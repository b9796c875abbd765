import pytest
from unittest.mock import AsyncMock, MagicMock

from clients.event_directory import EventDirectory
from clients.ghost_source import GhostSource
from clients.profile_store import ProfileStore
from clients.roster_source import RosterSource
from rider.rider import Rider
from services.id_set_cache import IdSetCache
from services.presence_registry import PresenceRegistry

RIDER_ID = 10101


def status_for(rider_id):
    return {"id": rider_id, "x": rider_id + 10, "y": rider_id + 20}


def expected_positions(ids):
    return [status_for(i) if isinstance(i, int) else i for i in ids]


def strip_positions(positions):
    return [{"id": p["id"], "x": p["x"], "y": p["y"]} for p in positions]


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def presence_registry(clock):
    return PresenceRegistry(ttl_seconds=600.0, clock=clock)


@pytest.fixture
def id_set_cache(clock):
    return IdSetCache(ttl_seconds=60.0, clock=clock)


@pytest.fixture
def status_fn():
    return AsyncMock(side_effect=status_for)


@pytest.fixture
def profile_store():
    store = MagicMock(spec=ProfileStore)
    store.get_profile = AsyncMock(return_value={"id": RIDER_ID, "me": True})
    store.get_followees = AsyncMock(return_value=[])
    return store


@pytest.fixture
def roster_source():
    source = MagicMock(spec=RosterSource)
    source.get = AsyncMock(return_value=[])
    return source


@pytest.fixture
def event_directory():
    directory = MagicMock(spec=EventDirectory)
    directory.find_matching_event = AsyncMock(return_value=None)
    directory.get_riders = AsyncMock(return_value=[])
    directory.set_riding_in_event = MagicMock(return_value=None)
    directory.get_riders_in_event = MagicMock(return_value=[])
    return directory


@pytest.fixture
def ghost_source():
    source = MagicMock(spec=GhostSource)
    source.get_positions = MagicMock(return_value=[])
    return source


@pytest.fixture
def make_rider(
    status_fn,
    profile_store,
    roster_source,
    event_directory,
    ghost_source,
    id_set_cache,
    presence_registry,
):
    def _make(rider_id=RIDER_ID, **overrides):
        kwargs = dict(
            account={},
            rider_id=rider_id,
            status_fn=status_fn,
            profile_store=profile_store,
            roster_source=roster_source,
            event_directory=event_directory,
            ghost_source=ghost_source,
            id_set_cache=id_set_cache,
            presence_registry=presence_registry,
        )
        kwargs.update(overrides)
        return Rider(**kwargs)

    return _make
