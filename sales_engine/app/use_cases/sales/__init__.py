"""Sales document use cases"""
from .create_document import CreateDocument
from .update_document import UpdateDocument
from .delete_document import DeleteDocument
from .change_status import ChangeDocumentStatus
from .get_document import GetDocument
from .list_documents import ListDocuments
from .compute_totals import ComputeTotals
from .document_conversion import DocumentConversion
from .convert_quote_to_proforma import ConvertQuoteToProforma
from .convert_to_invoice import ConvertToInvoice
from .convert_invoice_to_credit_note import ConvertInvoiceToCreditNote
from .dtos import (
    LineInputDTO,
    CreateDocumentCommandDTO,
    UpdateDocumentCommandDTO,
    ChangeStatusCommandDTO,
    ConvertDocumentCommandDTO,
    CreditNoteCommandDTO,
    SalesDocumentLineDTO,
    SalesDocumentResponseDTO,
    DocumentSummaryDTO,
    ListDocumentsResponseDTO,
    DeleteDocumentResponseDTO,
    LineAmountsDTO,
    ComputeTotalsResponseDTO,
)

__all__ = [
    "CreateDocument",
    "UpdateDocument",
    "DeleteDocument",
    "ChangeDocumentStatus",
    "GetDocument",
    "ListDocuments",
    "ComputeTotals",
    "DocumentConversion",
    "ConvertQuoteToProforma",
    "ConvertToInvoice",
    "ConvertInvoiceToCreditNote",
    "LineInputDTO",
    "CreateDocumentCommandDTO",
    "UpdateDocumentCommandDTO",
    "ChangeStatusCommandDTO",
    "ConvertDocumentCommandDTO",
    "CreditNoteCommandDTO",
    "SalesDocumentLineDTO",
    "SalesDocumentResponseDTO",
    "DocumentSummaryDTO",
    "ListDocumentsResponseDTO",
    "DeleteDocumentResponseDTO",
    "LineAmountsDTO",
    "ComputeTotalsResponseDTO",
]
