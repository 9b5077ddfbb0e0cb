"""Document Number Generator

Allocates {prefix}{YY}{NNNNN} numbers from a per-(type, year) counter and
records every number it hands out.
"""

import logging
from sales_engine.app.repositories.sales_document_repository import SalesDocumentRepository
from sales_engine.app.repositories.document_sequence_repository import DocumentSequenceRepository
from sales_engine.domain.numbering import (
    format_document_number,
    max_sequence,
    parse_document_number,
    year_code,
)
from sales_engine.domain.sales_document import DocumentType

logger = logging.getLogger(__name__)


class DocumentNumberGenerator:
    """
    Issues document numbers

    The next number is one above the stored counter. When a counter is first
    started, it begins above the highest suffix among existing documents of
    the same type and year, so imported numbers are never handed out twice.
    Every number issued or claimed goes into the ledger, so numbers of deleted
    documents are not recycled.
    """

    def __init__(
        self,
        document_repo: SalesDocumentRepository,
        sequence_repo: DocumentSequenceRepository,
    ):
        self.document_repo = document_repo
        self.sequence_repo = sequence_repo

    async def _starting_floor(self, document_type: DocumentType, yy: str) -> int:
        if await self.sequence_repo.find(document_type, yy) is not None:
            return 0
        numbers = await self.document_repo.find_numbers(document_type, yy)
        return max_sequence(numbers, document_type, yy)

    async def generate(self, document_type: DocumentType, year: int) -> str:
        yy = year_code(year)
        floor = await self._starting_floor(document_type, yy)

        sequence = await self.sequence_repo.next_value(document_type, yy, floor=floor)
        number = format_document_number(document_type, yy, sequence)
        await self.sequence_repo.record_issued(document_type, number)
        logger.debug(f"Allocated {number} for {document_type.value}")
        return number

    async def is_available(self, document_type: DocumentType, number: str) -> bool:
        """True if the number was never issued and no stored document carries it"""
        if await self.sequence_repo.was_issued(document_type, number):
            return False
        return not await self.document_repo.exists_number(document_type, number)

    async def claim(self, document_type: DocumentType, number: str) -> None:
        """Record a number taken by reuse so later allocations skip past it"""
        parsed = parse_document_number(number)
        if parsed is None or parsed.document_type != document_type:
            raise ValueError(f"'{number}' is not a valid {document_type.value} number")

        floor = await self._starting_floor(document_type, parsed.year_code)
        await self.sequence_repo.ensure_at_least(
            document_type, parsed.year_code, max(parsed.sequence, floor)
        )
        await self.sequence_repo.record_issued(document_type, number)
