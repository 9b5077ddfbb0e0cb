"""Document Sequence Repository Interface

Atomic per-(type, year) counters backing document numbering, and the ledger
of issued numbers.
"""

from abc import ABC, abstractmethod
from typing import Optional
from sales_engine.domain.document_sequence import DocumentSequence
from sales_engine.domain.sales_document import DocumentType


class DocumentSequenceRepository(ABC):
    """Repository interface for DocumentSequence counters and issued numbers"""

    @abstractmethod
    async def find(self, document_type: DocumentType, year_code: str) -> Optional[DocumentSequence]:
        """
        Retrieve the counter row without locking it

        Args:
            document_type: Document type
            year_code: Two-digit year

        Returns:
            DocumentSequence if the counter was already started, None otherwise
        """
        pass

    @abstractmethod
    async def next_value(self, document_type: DocumentType, year_code: str, floor: int = 0) -> int:
        """
        Allocate the next sequence number

        The counter row is locked for the rest of the transaction. The value
        returned is max(last_value, floor) + 1 and is stored as the new last_value.

        Args:
            document_type: Document type
            year_code: Two-digit year
            floor: Highest sequence already in use for this type and year

        Returns:
            Allocated sequence number
        """
        pass

    @abstractmethod
    async def ensure_at_least(self, document_type: DocumentType, year_code: str, value: int) -> None:
        """
        Raise the counter to value if it is lower

        Used when a number is taken by reuse (conversions) instead of allocation.

        Args:
            document_type: Document type
            year_code: Two-digit year
            value: Sequence number now in use
        """
        pass

    @abstractmethod
    async def record_issued(self, document_type: DocumentType, document_number: str) -> None:
        """
        Add a number to the issued-numbers ledger

        Args:
            document_type: Document type
            document_number: Number handed out
        """
        pass

    @abstractmethod
    async def was_issued(self, document_type: DocumentType, document_number: str) -> bool:
        """
        Check whether a number was ever handed out, even if its document is gone

        Args:
            document_type: Document type
            document_number: Number to check

        Returns:
            True if the ledger holds the number, False otherwise
        """
        pass
