from abc import ABC, abstractmethod
from typing import Any, Awaitable, Dict, List

from models.models import Event, EventRider


class EventDirectory(ABC):
    """
    Official event lookup plus the ad-hoc "riding in event" name tracker.

    The tracker methods are scoped to the rider that owns this directory.
    """

    @abstractmethod
    async def find_matching_event(self, token: str) -> Event | Dict[str, Any] | None:
        pass

    @abstractmethod
    async def get_riders(self, subgroup_id: int) -> List[EventRider | Dict[str, Any]]:
        pass

    @abstractmethod
    def set_riding_in_event(self, name: str) -> Any:
        pass

    @abstractmethod
    def get_riders_in_event(
        self, name: str
    ) -> List[EventRider | Dict[str, Any]] | Awaitable[List[Any]]:
        pass
