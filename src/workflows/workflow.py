from abc import ABC, abstractmethod
from typing import Any, Dict


class Workflow(ABC):
    @abstractmethod
    async def run(self, input: Dict) -> Any:
        pass
