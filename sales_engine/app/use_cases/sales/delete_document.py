"""DeleteDocument Use Case

Deletes a document and its lines. Its number is never handed out again.
"""

import logging
from sales_engine.libs.result import Result, Return, Error
from sales_engine.app.repositories.sales_document_repository import SalesDocumentRepository
from sales_engine.app.services.unit_of_work import UnitOfWork
from .dtos import DeleteDocumentResponseDTO

logger = logging.getLogger(__name__)


class DeleteDocument:
    """
    Use Case: Delete a sales document

    Business Rules:
    1. Document must exist
    2. A document other documents were converted from (or that a credit note
       rectifies) cannot be deleted, so conversion links never dangle
    3. Lines are deleted with the document
    """

    def __init__(self, uow: UnitOfWork, document_repo: SalesDocumentRepository):
        self.uow = uow
        self.document_repo = document_repo

    async def execute(self, document_id: str) -> Result[DeleteDocumentResponseDTO]:
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

            dependents = await self.document_repo.find_related(document_id)
            if dependents:
                numbers = ", ".join(doc.document_number for doc in dependents)
                return Return.err(
                    Error(
                        code="INVALID_STATE_TRANSITION",
                        message=f"{document.document_number} cannot be deleted, "
                                f"referenced by {numbers}",
                        reason="Document is the source of other documents",
                    )
                )

            deleted = await self.document_repo.delete(document_id)
            await self.uow.commit()

            logger.info(f"Deleted {document.type.value} {document.document_number}")
            return Return.ok(DeleteDocumentResponseDTO(document_id=document_id, deleted=deleted))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete document {document_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_DOCUMENT_FAILED",
                    message="Failed to delete document",
                    reason=str(e),
                )
            )
