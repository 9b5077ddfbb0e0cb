"""Data Transfer Objects for Sales Document Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from sales_engine.domain.client import ClientSnapshot
from sales_engine.domain.money import TotalsData
from sales_engine.domain.sales_document import SalesDocument, DocumentType, DocumentStatus
from sales_engine.domain.sales_document_line import SalesDocumentLine, GroupingTag

EDITABLE_HEADER_FIELDS = ("project_id", "date_issued", "date_due", "notes_internal", "notes_public")
REQUIRED_HEADER_FIELDS = ("date_issued",)


class LineInputDTO(BaseModel):
    """
    Line data supplied by callers

    subtotal and total_line are not accepted; they are always computed.
    Numeric ranges are not validated.
    """

    concept: str = Field(
        ...,
        min_length=1,
        description="Line concept (required, non-empty)"
    )

    description: Optional[str] = Field(
        default=None,
        description="Detailed description"
    )

    item_id: Optional[str] = Field(
        default=None,
        description="Catalog item reference"
    )

    quantity: Decimal = Field(
        ...,
        description="Quantity (negative on credit note reversal lines)"
    )

    unit_price: Decimal = Field(
        ...,
        description="Price per unit"
    )

    discount_percent: Decimal = Field(
        default=Decimal("0"),
        description="Discount percentage"
    )

    tax_percent: Decimal = Field(
        default=Decimal("0"),
        description="VAT percentage"
    )

    grouping_tag: GroupingTag = Field(
        default=GroupingTag.PRODUCTS,
        description="Presentation group (Products, Services)"
    )

    line_order: Optional[int] = Field(
        default=None,
        description="Order within its group (defaults to input position)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "concept": "Installation",
                "quantity": "2",
                "unit_price": "100.00",
                "discount_percent": "10",
                "tax_percent": "21",
                "grouping_tag": "Services",
            }
        }


class CreateDocumentCommandDTO(BaseModel):
    """
    Command DTO for creating a quote, proforma or invoice

    Credit notes are only created by rectifying an invoice.
    """

    type: DocumentType = Field(
        ...,
        description="Document type"
    )

    client_id: str = Field(
        ...,
        min_length=1,
        description="Client identifier"
    )

    client_snapshot: Optional[ClientSnapshot] = Field(
        default=None,
        description="Explicit snapshot; overrides resolution from the client directory"
    )

    project_id: Optional[str] = Field(default=None, description="Project identifier")
    date_issued: Optional[date] = Field(default=None, description="Issue date (defaults to today)")
    date_due: Optional[date] = Field(default=None, description="Due date")
    notes_internal: Optional[str] = Field(default=None, description="Internal notes")
    notes_public: Optional[str] = Field(default=None, description="Notes printed on the document")

    lines: List[LineInputDTO] = Field(
        default_factory=list,
        description="Document lines"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "type": "quote",
                "client_id": "c2d1b7e4-8f5e-4c8a-9d3f-2a6b9e0c1d44",
                "lines": [
                    {"concept": "Installation", "quantity": "2", "unit_price": "100", "discount_percent": "10", "tax_percent": "21"},
                    {"concept": "Cable", "quantity": "1", "unit_price": "50", "tax_percent": "21"},
                ],
            }
        }


class UpdateDocumentCommandDTO(BaseModel):
    """
    Command DTO for editing a draft document

    Only fields explicitly set are applied. lines=None leaves lines untouched;
    a list (possibly empty) replaces the whole line set.
    """

    document_id: str = Field(..., description="Document identifier")
    project_id: Optional[str] = None
    date_issued: Optional[date] = None
    date_due: Optional[date] = None
    notes_internal: Optional[str] = None
    notes_public: Optional[str] = None
    lines: Optional[List[LineInputDTO]] = None

    def header_patch(self) -> dict:
        return {
            field: getattr(self, field)
            for field in EDITABLE_HEADER_FIELDS
            if field in self.model_fields_set
        }

    def cleared_required_fields(self) -> List[str]:
        """Required header fields explicitly set to None"""
        return [
            field for field in REQUIRED_HEADER_FIELDS
            if field in self.model_fields_set and getattr(self, field) is None
        ]


class ChangeStatusCommandDTO(BaseModel):
    document_id: str = Field(..., description="Document identifier")
    status: DocumentStatus = Field(..., description="Target status")


class ConvertDocumentCommandDTO(BaseModel):
    """Command DTO for converting a document into the next type of the chain"""

    document_id: str = Field(..., description="Source document identifier")
    issued_on: Optional[date] = Field(default=None, description="Issue date of the new document (defaults to today)")
    copy_lines: bool = Field(default=True, description="Copy the source lines onto the new document")


class CreditNoteCommandDTO(ConvertDocumentCommandDTO):
    """
    Command DTO for rectifying an invoice

    Without lines, the credit note reverses every invoice line (negated
    quantities). With lines, they are used as given.
    """

    lines: Optional[List[LineInputDTO]] = Field(
        default=None,
        description="Explicit rectification lines (partial rectification)"
    )

    reason: Optional[str] = Field(
        default=None,
        description="Rectification reason, printed as public notes"
    )


class SalesDocumentLineDTO(BaseModel):
    id: str
    concept: str
    description: Optional[str] = None
    item_id: Optional[str] = None
    quantity: Decimal
    unit_price: Decimal
    discount_percent: Decimal
    tax_percent: Decimal
    subtotal: Decimal
    total_line: Decimal
    grouping_tag: GroupingTag
    line_order: int

    @classmethod
    def from_entity(cls, line: SalesDocumentLine) -> "SalesDocumentLineDTO":
        return cls(
            id=line.id,
            concept=line.concept,
            description=line.description,
            item_id=line.item_id,
            quantity=line.quantity,
            unit_price=line.unit_price,
            discount_percent=line.discount_percent,
            tax_percent=line.tax_percent,
            subtotal=line.subtotal,
            total_line=line.total_line,
            grouping_tag=line.grouping_tag,
            line_order=line.line_order,
        )


class SalesDocumentResponseDTO(BaseModel):
    """
    Response DTO for a single document with its lines

    Returned by create, update, get and conversion use cases.
    """

    id: str
    type: DocumentType
    document_number: str
    status: DocumentStatus
    client_id: str
    client_snapshot: Optional[ClientSnapshot] = None
    project_id: Optional[str] = None
    date_issued: date
    date_due: Optional[date] = None
    notes_internal: Optional[str] = None
    notes_public: Optional[str] = None
    totals: TotalsData
    related_document_id: Optional[str] = None
    rectifies_document_id: Optional[str] = None
    lines: List[SalesDocumentLineDTO] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(
        cls, document: SalesDocument, lines: List[SalesDocumentLine]
    ) -> "SalesDocumentResponseDTO":
        return cls(
            id=document.id,
            type=document.type,
            document_number=document.document_number,
            status=document.status,
            client_id=document.client_id,
            client_snapshot=(
                ClientSnapshot.model_validate(document.client_snapshot)
                if document.client_snapshot
                else None
            ),
            project_id=document.project_id,
            date_issued=document.date_issued,
            date_due=document.date_due,
            notes_internal=document.notes_internal,
            notes_public=document.notes_public,
            totals=TotalsData.from_stored(document.totals_data),
            related_document_id=document.related_document_id,
            rectifies_document_id=document.rectifies_document_id,
            lines=[SalesDocumentLineDTO.from_entity(line) for line in lines],
            created_at=document.created_at,
            updated_at=document.updated_at,
        )


class DocumentSummaryDTO(BaseModel):
    """List entry for a document"""

    id: str
    type: DocumentType
    document_number: str
    status: DocumentStatus
    client_id: str
    client_name: str = Field(default="", description="Snapshot commercial/fiscal name, else live client name")
    project_id: Optional[str] = None
    date_issued: date
    date_due: Optional[date] = None
    total: Decimal
    is_converted: bool = Field(default=False, description="Another document was converted from this one")


class ListDocumentsResponseDTO(BaseModel):
    documents: List[DocumentSummaryDTO]
    total_count: int


class DeleteDocumentResponseDTO(BaseModel):
    document_id: str
    deleted: bool


class LineAmountsDTO(BaseModel):
    concept: str
    subtotal: Decimal
    total_line: Decimal


class ComputeTotalsResponseDTO(BaseModel):
    """Line amounts and totals for an unsaved line set"""

    lines: List[LineAmountsDTO]
    totals: TotalsData
