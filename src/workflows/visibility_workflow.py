import asyncio
import inspect
import logging
from typing import Any, Dict, List, Set, Tuple

from clients.event_directory import EventDirectory
from clients.profile_store import ProfileStore
from clients.roster_source import RosterSource
from models.models import (
    Event,
    EventRider,
    Filter,
    Followee,
    Profile,
    RidingEntry,
)
from services.presence_registry import PresenceRegistry
from utils.constants import FilterKind
from utils.id_utils import concat_unique, dedupe, move_to_front
from workflows.workflow import Workflow

logger = logging.getLogger(__name__)


class VisibilityWorkflow(Workflow):
    """
    Resolves which rider ids a viewing rider should see under a filter.

    The output always holds the rider's own id at most once, and first
    whenever anybody else is listed. Lists received from collaborators are
    never modified in place.
    """

    def __init__(
        self,
        profile_store: ProfileStore,
        roster_source: RosterSource,
        event_directory: EventDirectory,
        presence_registry: PresenceRegistry,
    ):
        self.profile_store = profile_store
        self.roster_source = roster_source
        self.event_directory = event_directory
        self.presence_registry = presence_registry
        self._background: Set[asyncio.Future] = set()
        self.handlers = {
            FilterKind.NONE: self._resolve_followees,
            FilterKind.NAME: self._resolve_name,
            FilterKind.EVENT_CODE: self._resolve_event_code,
            FilterKind.EVENT_NAME: self._resolve_event_name,
            FilterKind.ALL_USERS: self._resolve_all_users,
        }

    async def _get_roster(self) -> List[RidingEntry]:
        roster = await self.roster_source.get()
        return [RidingEntry.model_validate(entry) for entry in roster]

    async def _resolve_followees(self, rider_id: int, filter: Filter) -> List[int]:
        profile = Profile.model_validate(
            await self.profile_store.get_profile(rider_id)
        )
        followees, roster = await asyncio.gather(
            self.profile_store.get_followees(profile.id), self._get_roster()
        )
        visible = {rider_id}
        visible.update(
            Followee.model_validate(f).followee_profile.id for f in followees
        )
        riding = dedupe(e.player_id for e in roster if e.player_id in visible)
        if rider_id in riding:
            return move_to_front(riding, rider_id)
        return riding

    async def _resolve_name(self, rider_id: int, filter: Filter) -> List[int]:
        text = (filter.value or "").lower()
        roster = await self._get_roster()
        matches = [e.player_id for e in roster if text in e.full_name.lower()]
        return move_to_front(matches, rider_id)

    async def _resolve_official_event(self, rider_id: int, event: Event) -> List[int]:
        rosters = await asyncio.gather(
            *(self.event_directory.get_riders(sg.id) for sg in event.event_subgroups)
        )
        groups = [
            [EventRider.model_validate(r).id for r in roster] for roster in rosters
        ]
        own_idx = next(
            (idx for idx, group in enumerate(groups) if rider_id in group), None
        )
        if own_idx is None:
            return move_to_front(concat_unique(groups), rider_id)
        ordered = [move_to_front(groups[own_idx], rider_id)]
        ordered += [group for idx, group in enumerate(groups) if idx != own_idx]
        return concat_unique(ordered)

    async def _find_event(self, token: str) -> Event | None:
        found = await self.event_directory.find_matching_event(token)
        if found is None:
            logger.info(f"EVENT_NOT_FOUND: no official event for '{token}'")
            return None
        return Event.model_validate(found)

    async def _resolve_event_code(self, rider_id: int, filter: Filter) -> List[int]:
        event = await self._find_event(filter.value or "")
        if event is None:
            return [rider_id]
        return await self._resolve_official_event(rider_id, event)

    def _register_riding_in_event(self, name: str) -> None:
        result = self.event_directory.set_riding_in_event(name)
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self._background.add(task)
            task.add_done_callback(self._registration_done)

    def _registration_done(self, task: asyncio.Future) -> None:
        self._background.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning(f"EVENT_TRACKER_FAILED: could not register rider: {exc!r}")

    async def _resolve_event_name(self, rider_id: int, filter: Filter) -> List[int]:
        name = filter.value or ""
        self._register_riding_in_event(name)
        event = await self._find_event(name)
        if event is not None:
            return await self._resolve_official_event(rider_id, event)
        riders: Any = self.event_directory.get_riders_in_event(name)
        if inspect.isawaitable(riders):
            riders = await riders
        ids = [EventRider.model_validate(r).id for r in riders or []]
        return move_to_front(ids, rider_id)

    async def _resolve_all_users(self, rider_id: int, filter: Filter) -> List[int]:
        return move_to_front(
            self.presence_registry.list_active(excluding=rider_id), rider_id
        )

    def _coerce_input(self, payload: Dict) -> Tuple[int, Filter]:
        if not isinstance(payload, dict):
            raise ValueError("Input must be a dict")
        rider_id = payload.get("rider_id")
        filter = payload.get("filter") or Filter()
        if rider_id is None:
            raise ValueError("rider_id is required")
        if not isinstance(filter, Filter):
            raise ValueError("filter must be a Filter")
        return (rider_id, filter)

    async def run(self, input: Dict) -> List[int]:
        rider_id, filter = self._coerce_input(input)
        ids = await self.handlers[filter.kind](rider_id, filter)
        logger.info(f"RESOLVE: rider {rider_id} [{filter.signature}] -> {len(ids)} ids")
        return ids
