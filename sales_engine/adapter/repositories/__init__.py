from .sales_document_repository import SqlAlchemySalesDocumentRepository
from .sales_document_line_repository import SqlAlchemySalesDocumentLineRepository
from .client_repository import SqlAlchemyClientRepository
from .document_sequence_repository import SqlAlchemyDocumentSequenceRepository

__all__ = [
    "SqlAlchemySalesDocumentRepository",
    "SqlAlchemySalesDocumentLineRepository",
    "SqlAlchemyClientRepository",
    "SqlAlchemyDocumentSequenceRepository",
]
