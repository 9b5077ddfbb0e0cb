"""SQLAlchemy Sales Document Repository Implementation

Implements sales document persistence using SQLAlchemy async session.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from sqlalchemy import delete, or_
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from sales_engine.app.repositories.sales_document_repository import SalesDocumentRepository
from sales_engine.domain.numbering import DOCUMENT_PREFIXES
from sales_engine.domain.sales_document import SalesDocument, DocumentType
from sales_engine.domain.sales_document_line import SalesDocumentLine

IMMUTABLE_FIELDS = frozenset({"id", "type", "document_number", "created_at"})


class SqlAlchemySalesDocumentRepository(SalesDocumentRepository):
    """
    SQLAlchemy implementation of SalesDocumentRepository

    Uses async session for database operations. Nothing is committed here;
    the unit of work owns the transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_type(self, document_type: DocumentType) -> List[SalesDocument]:
        statement = (
            select(SalesDocument)
            .where(SalesDocument.type == document_type)
            .order_by(SalesDocument.date_issued.desc(), SalesDocument.created_at.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def find_by_id(self, document_id: str) -> Optional[SalesDocument]:
        statement = select(SalesDocument).where(SalesDocument.id == document_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def find_related(self, document_id: str) -> List[SalesDocument]:
        statement = (
            select(SalesDocument)
            .where(
                or_(
                    SalesDocument.related_document_id == document_id,
                    SalesDocument.rectifies_document_id == document_id,
                )
            )
            .order_by(SalesDocument.created_at)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def find_numbers(self, document_type: DocumentType, year_code: str) -> List[str]:
        statement = (
            select(SalesDocument.document_number)
            .where(SalesDocument.type == document_type)
            .where(SalesDocument.document_number.like(f"{DOCUMENT_PREFIXES[document_type]}{year_code}%"))
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def exists_number(self, document_type: DocumentType, document_number: str) -> bool:
        statement = (
            select(func.count())
            .select_from(SalesDocument)
            .where(SalesDocument.type == document_type)
            .where(SalesDocument.document_number == document_number)
        )
        result = await self.session.execute(statement)
        return result.scalar_one() > 0

    async def insert(self, document: SalesDocument) -> SalesDocument:
        self.session.add(document)
        await self.session.flush()
        await self.session.refresh(document)
        return document

    async def update(self, document_id: str, patch: Dict[str, Any]) -> Optional[SalesDocument]:
        document = await self.find_by_id(document_id)
        if document is None:
            return None

        for field, value in patch.items():
            if field in IMMUTABLE_FIELDS:
                raise ValueError(f"Field '{field}' cannot be changed after creation")
            setattr(document, field, value)

        document.updated_at = datetime.utcnow()
        self.session.add(document)
        await self.session.flush()
        await self.session.refresh(document)
        return document

    async def delete(self, document_id: str) -> bool:
        document = await self.find_by_id(document_id)
        if document is None:
            return False

        await self.session.execute(
            delete(SalesDocumentLine).where(SalesDocumentLine.document_id == document_id)
        )
        await self.session.delete(document)
        await self.session.flush()
        return True
