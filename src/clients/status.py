from typing import Awaitable, Callable

from models.models import Position

StatusFn = Callable[[int], Awaitable[Position]]
