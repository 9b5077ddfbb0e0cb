"""Client Snapshotter

Freezes a client's fiscal identity for a document at creation time.
"""

import logging
from typing import Optional
from sales_engine.app.repositories.client_repository import ClientRepository
from sales_engine.domain.client import ClientSnapshot

logger = logging.getLogger(__name__)


class ClientSnapshotter:
    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def snapshot(
        self,
        client_id: str,
        override: Optional[ClientSnapshot] = None,
    ) -> Optional[ClientSnapshot]:
        """
        Build the snapshot stored on a new document

        Args:
            client_id: Client to resolve
            override: Caller-supplied snapshot, used as-is when given

        Returns:
            ClientSnapshot, or None if the client cannot be resolved
        """
        if override is not None:
            return override

        client = await self.client_repo.resolve(client_id)
        if client is None:
            logger.warning(f"Client {client_id} not found, document created without snapshot")
            return None

        return ClientSnapshot.from_client(client)
