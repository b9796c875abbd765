from abc import ABC, abstractmethod
from typing import List

from models.models import Position


class GhostSource(ABC):
    @abstractmethod
    def get_positions(self) -> List[Position]:
        pass
