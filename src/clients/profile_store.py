from abc import ABC, abstractmethod
from typing import Any, Dict, List

from models.models import Followee, Profile


class ProfileStore(ABC):
    """Read access to rider profiles and the follow graph."""

    @abstractmethod
    async def get_profile(self, rider_id: int) -> Profile | Dict[str, Any]:
        pass

    @abstractmethod
    async def get_followees(self, rider_id: int) -> List[Followee | Dict[str, Any]]:
        pass
