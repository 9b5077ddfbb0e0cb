"""SQLAlchemy Document Sequence Repository Implementation

Counter rows are read with SELECT ... FOR UPDATE so that concurrent
allocations for the same (type, year) serialize on PostgreSQL. SQLite has no
row locks and relies on its single-writer database lock instead.
"""

from typing import Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from sales_engine.app.repositories.document_sequence_repository import DocumentSequenceRepository
from sales_engine.domain.document_sequence import DocumentSequence, IssuedDocumentNumber
from sales_engine.domain.sales_document import DocumentType


class SqlAlchemyDocumentSequenceRepository(DocumentSequenceRepository):
    """
    SQLAlchemy implementation of DocumentSequenceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _row_query(self, document_type: DocumentType, year_code: str):
        return (
            select(DocumentSequence)
            .where(DocumentSequence.document_type == document_type.value)
            .where(DocumentSequence.year_code == year_code)
        )

    async def _locked_row(self, document_type: DocumentType, year_code: str) -> DocumentSequence:
        result = await self.session.execute(
            self._row_query(document_type, year_code).with_for_update()
        )
        sequence = result.scalar_one_or_none()

        if sequence is None:
            sequence = DocumentSequence(
                document_type=document_type.value,
                year_code=year_code,
                last_value=0,
            )
            self.session.add(sequence)

        return sequence

    async def find(self, document_type: DocumentType, year_code: str) -> Optional[DocumentSequence]:
        result = await self.session.execute(self._row_query(document_type, year_code))
        return result.scalar_one_or_none()

    async def next_value(self, document_type: DocumentType, year_code: str, floor: int = 0) -> int:
        sequence = await self._locked_row(document_type, year_code)
        sequence.last_value = max(sequence.last_value, floor) + 1
        await self.session.flush()
        return sequence.last_value

    async def ensure_at_least(self, document_type: DocumentType, year_code: str, value: int) -> None:
        sequence = await self._locked_row(document_type, year_code)
        if sequence.last_value < value:
            sequence.last_value = value
        await self.session.flush()

    async def record_issued(self, document_type: DocumentType, document_number: str) -> None:
        self.session.add(
            IssuedDocumentNumber(document_type=document_type.value, document_number=document_number)
        )
        await self.session.flush()

    async def was_issued(self, document_type: DocumentType, document_number: str) -> bool:
        statement = (
            select(func.count())
            .select_from(IssuedDocumentNumber)
            .where(IssuedDocumentNumber.document_type == document_type.value)
            .where(IssuedDocumentNumber.document_number == document_number)
        )
        result = await self.session.execute(statement)
        return result.scalar_one() > 0
