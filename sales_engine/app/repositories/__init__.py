from .sales_document_repository import SalesDocumentRepository
from .sales_document_line_repository import SalesDocumentLineRepository
from .client_repository import ClientRepository
from .document_sequence_repository import DocumentSequenceRepository

__all__ = [
    "SalesDocumentRepository",
    "SalesDocumentLineRepository",
    "ClientRepository",
    "DocumentSequenceRepository",
]
