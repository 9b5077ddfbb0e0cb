"""ConvertInvoiceToCreditNote Use Case

F-{YY}{N} becomes RT-{YY}{N}.
"""

from typing import Optional
from sales_engine.app.services.document_builder import DocumentBuilder
from sales_engine.domain.sales_document import SalesDocument, DocumentType
from .document_conversion import DocumentConversion
from .dtos import CreditNoteCommandDTO


class ConvertInvoiceToCreditNote(DocumentConversion):
    """
    Use Case: Rectify a paid invoice

    Business Rules:
    1. Source must be an invoice
    2. rectifies_document_id is the invoice; related_document_id is the
       invoice's own source when it has one, so the chain root is kept
    3. Without explicit lines the credit note reverses every invoice line
       (same prices, negated quantities) and nets to minus the invoice total
    4. Credit notes have no due date and start (and stay) in draft
    """

    source_types = (DocumentType.INVOICE,)
    target_type = DocumentType.CREDIT_NOTE
    error_code = "CONVERT_TO_CREDIT_NOTE_FAILED"
    sets_due_date = False

    def _notes_public(self, source: SalesDocument, command: CreditNoteCommandDTO) -> Optional[str]:
        reason = getattr(command, "reason", None)
        return reason if reason else source.notes_public

    def _related_document_id(self, source: SalesDocument) -> Optional[str]:
        return source.related_document_id or source.id

    def _rectifies_document_id(self, source: SalesDocument) -> Optional[str]:
        return source.id

    async def _add_lines(
        self,
        builder: DocumentBuilder,
        source: SalesDocument,
        command: CreditNoteCommandDTO,
    ) -> None:
        explicit = getattr(command, "lines", None)
        if explicit is not None:
            for line in explicit:
                builder.add_line(**line.model_dump())
            return

        if not command.copy_lines:
            return

        for line in await self.line_repo.find_by_document_id(source.id):
            builder.add_line(
                concept=line.concept,
                description=line.description,
                item_id=line.item_id,
                quantity=-line.quantity,
                unit_price=line.unit_price,
                discount_percent=line.discount_percent,
                tax_percent=line.tax_percent,
                grouping_tag=line.grouping_tag,
                line_order=line.line_order,
            )
