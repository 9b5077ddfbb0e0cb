from .base import BaseModel, generate_uuid
from .client import Client, ClientSnapshot, ClientAddress
from .document_sequence import DocumentSequence, IssuedDocumentNumber
from .sales_document import SalesDocument, DocumentType, DocumentStatus
from .sales_document_line import SalesDocumentLine, GroupingTag
from .money import TotalsData, VatBreakdownEntry, compute_totals, calculate_line_totals, round2

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Client",
    "ClientSnapshot",
    "ClientAddress",
    "DocumentSequence",
    "IssuedDocumentNumber",
    "SalesDocument",
    "DocumentType",
    "DocumentStatus",
    "SalesDocumentLine",
    "GroupingTag",
    "TotalsData",
    "VatBreakdownEntry",
    "compute_totals",
    "calculate_line_totals",
    "round2",
]
