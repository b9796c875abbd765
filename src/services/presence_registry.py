import logging
import time
from typing import Callable, Dict, List, Optional

from models.models import PresenceRecord

logger = logging.getLogger(__name__)


class PresenceRegistry:
    """Riders that have recently asked for positions, shared by every session."""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._records: Dict[int, PresenceRecord] = {}

    def touch(self, rider_id: int) -> PresenceRecord:
        now = self.clock()
        record = self._records.get(rider_id)
        if record is None:
            record = PresenceRecord(rider_id=rider_id, last_active_at=now)
            self._records[rider_id] = record
            logger.info(f"PRESENCE: rider {rider_id} is now active")
        else:
            record.last_active_at = now
        return record

    def _prune(self) -> None:
        cutoff = self.clock() - self.ttl_seconds
        expired = [
            rider_id
            for rider_id, record in self._records.items()
            if record.last_active_at < cutoff
        ]
        for rider_id in expired:
            del self._records[rider_id]
        if expired:
            logger.info(f"PRESENCE: pruned {len(expired)} inactive riders")

    def list_active(self, excluding: Optional[int] = None) -> List[int]:
        self._prune()
        return [rider_id for rider_id in self._records if rider_id != excluding]

    def reset_all(self) -> None:
        self._records = {}

    def __len__(self) -> int:
        return len(self._records)
