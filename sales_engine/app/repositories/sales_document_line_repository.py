"""Sales Document Line Repository Interface

Defines the contract for sales document line persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from sales_engine.domain.sales_document_line import SalesDocumentLine


class SalesDocumentLineRepository(ABC):
    """
    Repository interface for SalesDocumentLine persistence

    Lines are replaced wholesale: delete_all followed by insert per line.
    """

    @abstractmethod
    async def find_by_document_id(self, document_id: str) -> List[SalesDocumentLine]:
        """
        Retrieve all lines of a document

        Args:
            document_id: Document ID

        Returns:
            Lines ordered Products first, then by line_order
        """
        pass

    @abstractmethod
    async def insert(self, line: SalesDocumentLine) -> SalesDocumentLine:
        """
        Persist a new line

        Args:
            line: SalesDocumentLine entity to persist

        Returns:
            Created SalesDocumentLine
        """
        pass

    @abstractmethod
    async def delete_all(self, document_id: str) -> bool:
        """
        Delete every line of a document

        Args:
            document_id: Document ID

        Returns:
            True if any line was deleted, False otherwise
        """
        pass
