from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable


class BackgroundRunner(ABC):
    """Fire-and-forget work started by a use case - application layer"""

    @abstractmethod
    def run(self, fn: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any) -> Any:
        """Schedule fn(*args, **kwargs) without waiting for it"""
        pass
