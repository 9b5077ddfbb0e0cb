"""ChangeDocumentStatus Use Case

Moves a document along its type's status machine.
"""

import logging
from sales_engine.libs.result import Result, Return, Error
from sales_engine.app.repositories.sales_document_repository import SalesDocumentRepository
from sales_engine.app.repositories.sales_document_line_repository import SalesDocumentLineRepository
from sales_engine.app.services.unit_of_work import UnitOfWork
from sales_engine.domain.status import allowed_statuses, can_transition
from .dtos import ChangeStatusCommandDTO, SalesDocumentResponseDTO

logger = logging.getLogger(__name__)


class ChangeDocumentStatus:
    """
    Use Case: Change document status

    Business Rules:
    1. quote/proforma: draft -> sent -> accepted | rejected
    2. invoice: sent -> paid | overdue, overdue -> paid
    3. credit_note: no transitions
    """

    def __init__(
        self,
        uow: UnitOfWork,
        document_repo: SalesDocumentRepository,
        line_repo: SalesDocumentLineRepository,
    ):
        self.uow = uow
        self.document_repo = document_repo
        self.line_repo = line_repo

    async def execute(self, command: ChangeStatusCommandDTO) -> Result[SalesDocumentResponseDTO]:
        try:
            document = await self.document_repo.find_by_id(command.document_id)

            if not document:
                return Return.err(
                    Error(
                        code="DOCUMENT_NOT_FOUND",
                        message=f"Document with ID {command.document_id} not found",
                        reason="Document does not exist",
                    )
                )

            if not can_transition(document.type, document.status, command.status):
                if command.status not in allowed_statuses(document.type):
                    reason = f"{command.status.value} is not a {document.type.value} status"
                else:
                    reason = "Transition not allowed for this document type"
                return Return.err(
                    Error(
                        code="INVALID_STATE_TRANSITION",
                        message=f"{document.type.value} cannot move from "
                                f"{document.status.value} to {command.status.value}",
                        reason=reason,
                    )
                )

            previous = document.status
            updated = await self.document_repo.update(document.id, {"status": command.status})
            lines = await self.line_repo.find_by_document_id(document.id)
            await self.uow.commit()

            logger.info(
                f"{updated.document_number}: {previous.value} -> {updated.status.value}"
            )
            return Return.ok(SalesDocumentResponseDTO.from_entity(updated, lines))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to change status of document {command.document_id}: {e}")
            return Return.err(
                Error(
                    code="CHANGE_STATUS_FAILED",
                    message="Failed to change document status",
                    reason=str(e),
                )
            )
