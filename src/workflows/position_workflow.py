import asyncio
import logging
from typing import Dict, List

from clients.ghost_source import GhostSource
from clients.status import StatusFn
from models.models import Position
from workflows.workflow import Workflow

logger = logging.getLogger(__name__)


class PositionWorkflow(Workflow):
    """Fetches live positions for resolved ids and appends the current ghosts."""

    def __init__(self, status_fn: StatusFn, ghost_source: GhostSource):
        self.status_fn = status_fn
        self.ghost_source = ghost_source

    def _coerce_input(self, payload: Dict) -> List[int]:
        if not isinstance(payload, dict):
            raise ValueError("Input must be a dict")
        ids = payload.get("ids")
        if ids is None:
            raise ValueError("ids is required")
        return list(ids)

    async def run(self, input: Dict) -> List[Position]:
        ids = self._coerce_input(input)
        logger.debug(f"LOOKUP: fetching {len(ids)} live positions")
        # gather keeps request order regardless of completion order
        positions = list(await asyncio.gather(*(self.status_fn(i) for i in ids)))
        ghosts = self.ghost_source.get_positions() or []
        return positions + list(ghosts)
