"""UpdateDocument Use Case

Edits the header and/or replaces the lines of a draft quote or proforma.
"""

import logging
from sales_engine.libs.result import Result, Return, Error
from sales_engine.app.repositories.sales_document_repository import SalesDocumentRepository
from sales_engine.app.repositories.sales_document_line_repository import SalesDocumentLineRepository
from sales_engine.app.services.document_builder import DocumentBuilder
from sales_engine.app.services.unit_of_work import UnitOfWork
from sales_engine.domain.status import is_editable
from .dtos import UpdateDocumentCommandDTO, SalesDocumentResponseDTO

logger = logging.getLogger(__name__)


class UpdateDocument:
    """
    Use Case: Update a draft document

    Business Rules:
    1. Document must exist; date_issued cannot be cleared
    2. Only draft quotes and proformas are editable
    3. Type, number, client and snapshot are never changed
    4. Lines are replaced wholesale and totals recomputed in the same transaction
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

    async def execute(self, command: UpdateDocumentCommandDTO) -> Result[SalesDocumentResponseDTO]:
        cleared = command.cleared_required_fields()
        if cleared:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message=f"{', '.join(cleared)} cannot be empty",
                    reason="Required header fields cannot be set to null",
                )
            )

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

            if not is_editable(document.type, document.status):
                return Return.err(
                    Error(
                        code="INVALID_STATE_TRANSITION",
                        message=f"{document.type.value} {document.document_number} cannot be edited "
                                f"in status {document.status.value}",
                        reason="Only draft quotes and proformas are editable",
                    )
                )

            patch = command.header_patch()

            if command.lines is not None:
                builder = DocumentBuilder(document)
                for line in command.lines:
                    builder.add_line(**line.model_dump())
                updated, lines = await builder.replace_lines(
                    self.document_repo, self.line_repo, patch
                )
            else:
                updated = await self.document_repo.update(document.id, patch)
                lines = await self.line_repo.find_by_document_id(document.id)

            await self.uow.commit()

            logger.info(f"Updated {updated.type.value} {updated.document_number}")
            return Return.ok(SalesDocumentResponseDTO.from_entity(updated, lines))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update document {command.document_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_DOCUMENT_FAILED",
                    message="Failed to update document",
                    reason=str(e),
                )
            )
