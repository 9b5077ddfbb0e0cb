"""Sales Document Repository Interface

Defines the contract for sales document persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from sales_engine.domain.sales_document import SalesDocument, DocumentType


class SalesDocumentRepository(ABC):
    """
    Repository interface for SalesDocument persistence

    Documents are identified by their UUID, never by position.
    """

    @abstractmethod
    async def find_by_type(self, document_type: DocumentType) -> List[SalesDocument]:
        """
        Retrieve all documents of a type

        Args:
            document_type: Document type to filter by

        Returns:
            Documents ordered by date_issued, newest first
        """
        pass

    @abstractmethod
    async def find_by_id(self, document_id: str) -> Optional[SalesDocument]:
        """
        Retrieve document by ID

        Args:
            document_id: Document ID

        Returns:
            SalesDocument if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_related(self, document_id: str) -> List[SalesDocument]:
        """
        Retrieve documents converted from (or rectifying) the given document

        Args:
            document_id: Source document ID

        Returns:
            List of documents whose related_document_id or rectifies_document_id
            points at document_id
        """
        pass

    @abstractmethod
    async def find_numbers(self, document_type: DocumentType, year_code: str) -> List[str]:
        """
        Retrieve the numbers of a type issued under a two-digit year

        Args:
            document_type: Document type
            year_code: Two-digit year

        Returns:
            Document numbers starting with the type prefix and year code
        """
        pass

    @abstractmethod
    async def exists_number(self, document_type: DocumentType, document_number: str) -> bool:
        """
        Check whether a document number is already taken within its type

        Args:
            document_type: Document type
            document_number: Number to check

        Returns:
            True if taken, False otherwise
        """
        pass

    @abstractmethod
    async def insert(self, document: SalesDocument) -> SalesDocument:
        """
        Persist a new document

        Args:
            document: SalesDocument entity to persist

        Returns:
            Created SalesDocument
        """
        pass

    @abstractmethod
    async def update(self, document_id: str, patch: Dict[str, Any]) -> Optional[SalesDocument]:
        """
        Apply a partial update to a document

        Args:
            document_id: Document ID
            patch: Field values to overwrite

        Returns:
            Updated SalesDocument, None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, document_id: str) -> bool:
        """
        Delete a document together with its lines

        Args:
            document_id: Document ID

        Returns:
            True if a document was deleted, False otherwise
        """
        pass
