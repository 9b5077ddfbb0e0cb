"""SQLAlchemy Sales Document Line Repository Implementation

Implements line persistence using SQLAlchemy async session.
"""

from typing import List
from sqlalchemy import case, delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from sales_engine.app.repositories.sales_document_line_repository import SalesDocumentLineRepository
from sales_engine.domain.sales_document_line import SalesDocumentLine, GroupingTag


class SqlAlchemySalesDocumentLineRepository(SalesDocumentLineRepository):
    """
    SQLAlchemy implementation of SalesDocumentLineRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_document_id(self, document_id: str) -> List[SalesDocumentLine]:
        products_first = case(
            (SalesDocumentLine.grouping_tag == GroupingTag.PRODUCTS, 0),
            else_=1,
        )
        statement = (
            select(SalesDocumentLine)
            .where(SalesDocumentLine.document_id == document_id)
            .order_by(products_first, SalesDocumentLine.line_order)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def insert(self, line: SalesDocumentLine) -> SalesDocumentLine:
        self.session.add(line)
        await self.session.flush()
        await self.session.refresh(line)
        return line

    async def delete_all(self, document_id: str) -> bool:
        result = await self.session.execute(
            delete(SalesDocumentLine).where(SalesDocumentLine.document_id == document_id)
        )
        await self.session.flush()
        return (result.rowcount or 0) > 0
