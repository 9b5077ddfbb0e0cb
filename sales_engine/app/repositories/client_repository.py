"""Client Repository Interface

The client directory the snapshotter resolves against.
"""

from abc import ABC, abstractmethod
from typing import Optional
from sales_engine.domain.client import Client


class ClientRepository(ABC):
    """Repository interface for Client lookups"""

    @abstractmethod
    async def resolve(self, client_id: str) -> Optional[Client]:
        """
        Retrieve client by ID

        Args:
            client_id: Client ID

        Returns:
            Client if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """
        Create a new client

        Args:
            client: Client entity to persist

        Returns:
            Created Client
        """
        pass
