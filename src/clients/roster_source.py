from abc import ABC, abstractmethod
from typing import Any, Dict, List

from models.models import RidingEntry


class RosterSource(ABC):
    """Everyone currently riding, unfiltered."""

    @abstractmethod
    async def get(self) -> List[RidingEntry | Dict[str, Any]]:
        pass
