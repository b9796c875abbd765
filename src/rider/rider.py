import logging
from typing import Any, List, Optional

from clients.event_directory import EventDirectory
from clients.ghost_source import GhostSource
from clients.profile_store import ProfileStore
from clients.roster_source import RosterSource
from clients.status import StatusFn
from models.models import Filter, Position, parse_filter
from services.id_set_cache import IdSetCache
from services.presence_registry import PresenceRegistry
from workflows.position_workflow import PositionWorkflow
from workflows.visibility_workflow import VisibilityWorkflow

logger = logging.getLogger(__name__)


class Rider:
    """
    A viewing session: who this rider should see on the map, and where they are.

    The visible id set is cached per (rider, filter) in the shared
    IdSetCache. Positions are looked up again on every call.
    """

    def __init__(
        self,
        account: Any,
        rider_id: int,
        status_fn: StatusFn,
        profile_store: ProfileStore,
        roster_source: RosterSource,
        event_directory: EventDirectory,
        ghost_source: GhostSource,
        id_set_cache: IdSetCache,
        presence_registry: PresenceRegistry,
    ) -> None:
        self.account = account
        self.rider_id = rider_id
        self.id_set_cache = id_set_cache
        self.presence_registry = presence_registry
        self.visibility_workflow = VisibilityWorkflow(
            profile_store=profile_store,
            roster_source=roster_source,
            event_directory=event_directory,
            presence_registry=presence_registry,
        )
        self.position_workflow = PositionWorkflow(
            status_fn=status_fn, ghost_source=ghost_source
        )
        self._filter = Filter()

    @property
    def filter(self) -> Filter:
        return self._filter

    def set_filter(self, raw: Optional[str]) -> Filter:
        self._filter = parse_filter(raw)
        logger.info(f"FILTER_SET: rider {self.rider_id} -> {self._filter.signature}")
        return self._filter

    async def get_visible_ids(self) -> List[int]:
        filter = self._filter
        return await self.id_set_cache.resolve(
            (self.rider_id, filter.signature),
            lambda: self.visibility_workflow.run(
                {"rider_id": self.rider_id, "filter": filter}
            ),
        )

    async def get_positions(self) -> List[Position]:
        self.presence_registry.touch(self.rider_id)
        ids = await self.get_visible_ids()
        return await self.position_workflow.run({"ids": ids})
