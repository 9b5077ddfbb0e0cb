"""CreateDocument Use Case

Creates a quote, proforma or invoice with its lines and computed totals.
"""

import logging
from datetime import datetime
from sales_engine.libs.result import Result, Return, Error
from sales_engine.app.repositories.sales_document_repository import SalesDocumentRepository
from sales_engine.app.repositories.sales_document_line_repository import SalesDocumentLineRepository
from sales_engine.app.services.client_snapshotter import ClientSnapshotter
from sales_engine.app.services.document_builder import DocumentBuilder
from sales_engine.app.services.document_number_generator import DocumentNumberGenerator
from sales_engine.app.services.unit_of_work import UnitOfWork
from sales_engine.domain.sales_document import SalesDocument, DocumentType
from sales_engine.domain.status import INITIAL_STATUS
from .dtos import CreateDocumentCommandDTO, SalesDocumentResponseDTO

logger = logging.getLogger(__name__)


class CreateDocument:
    """
    Use Case: Create a sales document

    Business Rules:
    1. Credit notes cannot be created directly; they come from rectifying an invoice
    2. Document number is allocated per (type, year of date_issued)
    3. Status starts at the type's initial status (invoice: sent, others: draft)
    4. Client snapshot is taken once, here; an explicit snapshot wins
    5. Line amounts and document totals are computed, never taken from input

    Flow:
    1. Reject credit notes
    2. Allocate document number
    3. Snapshot client
    4. Build header and lines, compute totals
    5. Persist and commit in one unit of work
    """

    def __init__(
        self,
        uow: UnitOfWork,
        document_repo: SalesDocumentRepository,
        line_repo: SalesDocumentLineRepository,
        number_generator: DocumentNumberGenerator,
        client_snapshotter: ClientSnapshotter,
    ):
        self.uow = uow
        self.document_repo = document_repo
        self.line_repo = line_repo
        self.number_generator = number_generator
        self.client_snapshotter = client_snapshotter

    async def execute(self, command: CreateDocumentCommandDTO) -> Result[SalesDocumentResponseDTO]:
        """
        Execute document creation

        Args:
            command: CreateDocumentCommandDTO with type, client and lines

        Returns:
            Result[SalesDocumentResponseDTO]: Success with the new document or error
        """
        try:
            # Step 1: Credit notes need an invoice to rectify
            if command.type == DocumentType.CREDIT_NOTE:
                return Return.err(
                    Error(
                        code="VALIDATION_ERROR",
                        message="Credit notes can only be created by rectifying an invoice",
                        reason="rectifies_document_id is required for credit notes",
                    )
                )

            date_issued = command.date_issued or datetime.utcnow().date()

            # Step 2: Allocate number
            document_number = await self.number_generator.generate(command.type, date_issued.year)

            # Step 3: Snapshot client
            snapshot = await self.client_snapshotter.snapshot(
                command.client_id, override=command.client_snapshot
            )

            # Step 4: Build header and lines
            document = SalesDocument(
                type=command.type,
                document_number=document_number,
                client_id=command.client_id,
                client_snapshot=snapshot.model_dump(mode="json") if snapshot else None,
                project_id=command.project_id,
                date_issued=date_issued,
                date_due=command.date_due,
                status=INITIAL_STATUS[command.type],
                notes_internal=command.notes_internal,
                notes_public=command.notes_public,
            )

            builder = DocumentBuilder(document)
            for line in command.lines:
                builder.add_line(**line.model_dump())

            # Step 5: Persist and commit
            created, lines = await builder.save(self.document_repo, self.line_repo)
            await self.uow.commit()

            logger.info(
                f"Created {created.type.value} {created.document_number} "
                f"for client {created.client_id} with {len(lines)} lines"
            )
            return Return.ok(SalesDocumentResponseDTO.from_entity(created, lines))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create {command.type.value}: {e}")
            return Return.err(
                Error(
                    code="CREATE_DOCUMENT_FAILED",
                    message="Failed to create document",
                    reason=str(e),
                )
            )
