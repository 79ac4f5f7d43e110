from abc import ABC, abstractmethod
from typing import Any


class IClient(ABC):
    """Interface implemented by every client exposed to a data source"""

    @abstractmethod
    def get_client(self) -> Any:
        """Return the object that actually performs requests"""
