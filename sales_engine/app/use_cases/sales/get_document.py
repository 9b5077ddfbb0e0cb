"""GetDocument Use Case"""

from sales_engine.libs.result import Result, Return, Error
from sales_engine.app.repositories.sales_document_repository import SalesDocumentRepository
from sales_engine.app.repositories.sales_document_line_repository import SalesDocumentLineRepository
from .dtos import SalesDocumentResponseDTO


class GetDocument:
    """
    Use Case: Retrieve a document with its lines

    Lines come back Products first, then by line_order.
    """

    def __init__(
        self,
        document_repo: SalesDocumentRepository,
        line_repo: SalesDocumentLineRepository,
    ):
        self.document_repo = document_repo
        self.line_repo = line_repo

    async def execute(self, document_id: str) -> Result[SalesDocumentResponseDTO]:
        try:
            document = await self.document_repo.find_by_id(document_id)

            if not document:
                return Return.err(
                    Error(
                        code="DOCUMENT_NOT_FOUND",
                        message=f"Document with ID {document_id} not found",
                        reason="Document does not exist",
                    )
                )

            lines = await self.line_repo.find_by_document_id(document_id)
            return Return.ok(SalesDocumentResponseDTO.from_entity(document, lines))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_DOCUMENT_FAILED",
                    message="Failed to retrieve document",
                    reason=str(e),
                )
            )
