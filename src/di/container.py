from dependency_injector import containers, providers
from clients.event_directory import EventDirectory
from clients.ghost_source import GhostSource
from clients.profile_store import ProfileStore
from clients.roster_source import RosterSource
from rider.rider import Rider
from services.id_set_cache import IdSetCache
from services.presence_registry import PresenceRegistry
from utils.logging import setup_logging
from config.config import SETTINGS


class Container(containers.DeclarativeContainer):
    logging_setup = providers.Resource(setup_logging, level=SETTINGS.log_level)

    # Shared state
    presence_registry = providers.Singleton(
        PresenceRegistry, ttl_seconds=SETTINGS.presence_ttl_seconds
    )
    id_set_cache = providers.Singleton(
        IdSetCache, ttl_seconds=SETTINGS.id_set_cache_ttl_seconds
    )

    # Collaborators, supplied by the request handler
    profile_store = providers.Dependency(instance_of=ProfileStore)
    roster_source = providers.Dependency(instance_of=RosterSource)
    event_directory = providers.Dependency(instance_of=EventDirectory)
    ghost_source = providers.Dependency(instance_of=GhostSource)

    # Sessions: account, rider_id and status_fn are passed per call
    rider = providers.Factory(
        Rider,
        profile_store=profile_store,
        roster_source=roster_source,
        event_directory=event_directory,
        ghost_source=ghost_source,
        id_set_cache=id_set_cache,
        presence_registry=presence_registry,
    )
