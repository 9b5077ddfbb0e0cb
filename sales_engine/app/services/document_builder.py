"""Document Builder

Accumulates a document header and its lines, computes the line amounts and
document totals, and writes everything through the repositories in one go.
Callers commit the surrounding unit of work.
"""

from decimal import Decimal
from typing import List, Optional, Tuple
from sales_engine.app.repositories.sales_document_repository import SalesDocumentRepository
from sales_engine.app.repositories.sales_document_line_repository import SalesDocumentLineRepository
from sales_engine.domain.money import TotalsData, calculate_line_totals, compute_totals, to_decimal
from sales_engine.domain.sales_document import SalesDocument
from sales_engine.domain.sales_document_line import SalesDocumentLine, GroupingTag


class DocumentBuilder:
    def __init__(self, document: SalesDocument):
        self.document = document
        self.lines: List[SalesDocumentLine] = []

    def add_line(
        self,
        concept: str,
        quantity,
        unit_price,
        discount_percent=Decimal("0"),
        tax_percent=Decimal("0"),
        description: Optional[str] = None,
        item_id: Optional[str] = None,
        grouping_tag: GroupingTag = GroupingTag.PRODUCTS,
        line_order: Optional[int] = None,
    ) -> SalesDocumentLine:
        """Append a line; subtotal and total_line are always computed here"""
        amounts = calculate_line_totals(quantity, unit_price, discount_percent, tax_percent)
        line = SalesDocumentLine(
            document_id=self.document.id,
            item_id=item_id,
            concept=concept,
            description=description,
            quantity=to_decimal(quantity),
            unit_price=to_decimal(unit_price),
            discount_percent=to_decimal(discount_percent),
            tax_percent=to_decimal(tax_percent),
            subtotal=amounts.subtotal,
            total_line=amounts.total_line,
            grouping_tag=grouping_tag,
            line_order=line_order if line_order is not None else len(self.lines) + 1,
        )
        self.lines.append(line)
        return line

    def totals(self) -> TotalsData:
        return compute_totals(self.lines)

    def build(self) -> SalesDocument:
        self.document.totals_data = self.totals().to_stored()
        return self.document

    async def save(
        self,
        document_repo: SalesDocumentRepository,
        line_repo: SalesDocumentLineRepository,
    ) -> Tuple[SalesDocument, List[SalesDocumentLine]]:
        """Insert the header and every line of a new document"""
        document = await document_repo.insert(self.build())
        lines = [await line_repo.insert(line) for line in self.lines]
        return document, lines

    async def replace_lines(
        self,
        document_repo: SalesDocumentRepository,
        line_repo: SalesDocumentLineRepository,
        patch: Optional[dict] = None,
    ) -> Tuple[SalesDocument, List[SalesDocumentLine]]:
        """
        Swap an existing document's line set for the built one and store fresh totals

        Lines are returned in stored order (Products first, then line_order).
        """
        await line_repo.delete_all(self.document.id)
        for line in self.lines:
            await line_repo.insert(line)

        patch = dict(patch or {})
        patch["totals_data"] = self.totals().to_stored()
        document = await document_repo.update(self.document.id, patch)
        return document, await line_repo.find_by_document_id(self.document.id)
