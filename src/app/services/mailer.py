from abc import ABC, abstractmethod
from typing import Any, Dict


class Mailer(ABC):
    """Outbound email interface - application layer"""

    @abstractmethod
    async def send(self, recipient: str, template_name: str, data: Dict[str, Any]) -> None:
        """Render a template and deliver it to one recipient"""
        pass
