"""Document conversion base

Shared flow for quote -> proforma, quote|proforma -> invoice and
invoice -> credit note conversions.
"""

import logging
from datetime import datetime, date, timedelta
from typing import Optional, Tuple
from sales_engine.libs.result import Result, Return, Error
from sales_engine.app.repositories.sales_document_repository import SalesDocumentRepository
from sales_engine.app.repositories.sales_document_line_repository import SalesDocumentLineRepository
from sales_engine.app.services.client_snapshotter import ClientSnapshotter
from sales_engine.app.services.document_builder import DocumentBuilder
from sales_engine.app.services.document_number_generator import DocumentNumberGenerator
from sales_engine.app.services.unit_of_work import UnitOfWork
from sales_engine.domain.numbering import swap_prefix
from sales_engine.domain.sales_document import SalesDocument, DocumentType
from sales_engine.domain.status import INITIAL_STATUS, conversion_blocker
from .dtos import ConvertDocumentCommandDTO, SalesDocumentResponseDTO

logger = logging.getLogger(__name__)

DEFAULT_DUE_DAYS = 30


class DocumentConversion:
    """
    Base use case: turn a document into the next type of the chain

    Flow:
    1. Load source; it must exist and have one of source_types
    2. Check the source status allows conversion (when enforced)
    3. Derive the number by swapping the prefix, falling back to a fresh one
    4. Build the new header linked to the source
    5. Add lines (copied, or as the subclass decides)
    6. Persist header and lines, commit once
    """

    source_types: Tuple[DocumentType, ...] = ()
    target_type: DocumentType
    error_code: str = "CONVERT_DOCUMENT_FAILED"
    sets_due_date: bool = True

    def __init__(
        self,
        uow: UnitOfWork,
        document_repo: SalesDocumentRepository,
        line_repo: SalesDocumentLineRepository,
        number_generator: DocumentNumberGenerator,
        client_snapshotter: ClientSnapshotter,
        enforce_source_status: bool = True,
        due_days: int = DEFAULT_DUE_DAYS,
    ):
        self.uow = uow
        self.document_repo = document_repo
        self.line_repo = line_repo
        self.number_generator = number_generator
        self.client_snapshotter = client_snapshotter
        self.enforce_source_status = enforce_source_status
        self.due_days = due_days

    async def execute(self, command: ConvertDocumentCommandDTO) -> Result[SalesDocumentResponseDTO]:
        """
        Execute the conversion

        Args:
            command: Source document id and conversion options

        Returns:
            Result[SalesDocumentResponseDTO]: Success with the new document or error
        """
        try:
            # Step 1: Load and check source
            source = await self.document_repo.find_by_id(command.document_id)

            if not source:
                return Return.err(
                    Error(
                        code="DOCUMENT_NOT_FOUND",
                        message=f"Document with ID {command.document_id} not found",
                        reason="Document does not exist",
                    )
                )

            if source.type not in self.source_types:
                expected = " or ".join(t.value for t in self.source_types)
                return Return.err(
                    Error(
                        code="INVALID_DOCUMENT_TYPE",
                        message=f"{source.document_number} is a {source.type.value}, "
                                f"expected {expected}",
                        reason=f"Only {expected} documents can become {self.target_type.value}",
                    )
                )

            # Step 2: Status precondition
            if self.enforce_source_status:
                required = conversion_blocker(source.type, source.status)
                if required is not None:
                    return Return.err(
                        Error(
                            code="INVALID_STATE_TRANSITION",
                            message=f"{source.document_number} must be {required.value} to become "
                                    f"{self.target_type.value}. Current status: {source.status.value}",
                            reason="Source status does not allow conversion",
                        )
                    )

            date_issued = command.issued_on or datetime.utcnow().date()

            # Step 3: Number
            document_number = await self._derive_number(source, date_issued)

            # Step 4: Header
            document = await self._build_header(source, document_number, date_issued, command)

            # Step 5: Lines
            builder = DocumentBuilder(document)
            await self._add_lines(builder, source, command)

            # Step 6: Persist atomically
            created, lines = await builder.save(self.document_repo, self.line_repo)
            await self.uow.commit()

            logger.info(
                f"Converted {source.type.value} {source.document_number} into "
                f"{created.type.value} {created.document_number} ({len(lines)} lines)"
            )
            return Return.ok(SalesDocumentResponseDTO.from_entity(created, lines))

        except Exception as e:
            await self.uow.rollback()
            logger.error(
                f"Failed to convert document {command.document_id} "
                f"into {self.target_type.value}: {e}"
            )
            return Return.err(
                Error(
                    code=self.error_code,
                    message=f"Failed to convert document into {self.target_type.value}",
                    reason=str(e),
                )
            )

    async def _derive_number(self, source: SalesDocument, date_issued: date) -> str:
        number = swap_prefix(source.document_number, self.target_type, self.source_types)

        if number is None:
            logger.warning(
                f"{source.document_number} has no known prefix, allocating a fresh "
                f"{self.target_type.value} number"
            )
            return await self.number_generator.generate(self.target_type, date_issued.year)

        if not await self.number_generator.is_available(self.target_type, number):
            logger.warning(f"{number} was already issued, allocating a fresh number")
            return await self.number_generator.generate(self.target_type, date_issued.year)

        await self.number_generator.claim(self.target_type, number)
        return number

    async def _build_header(
        self,
        source: SalesDocument,
        document_number: str,
        date_issued: date,
        command: ConvertDocumentCommandDTO,
    ) -> SalesDocument:
        snapshot = source.client_snapshot
        if not snapshot:
            resolved = await self.client_snapshotter.snapshot(source.client_id)
            snapshot = resolved.model_dump(mode="json") if resolved else None

        return SalesDocument(
            type=self.target_type,
            document_number=document_number,
            client_id=source.client_id,
            client_snapshot=snapshot,
            project_id=source.project_id,
            date_issued=date_issued,
            date_due=date_issued + timedelta(days=self.due_days) if self.sets_due_date else None,
            status=INITIAL_STATUS[self.target_type],
            notes_public=self._notes_public(source, command),
            related_document_id=self._related_document_id(source),
            rectifies_document_id=self._rectifies_document_id(source),
        )

    def _notes_public(self, source: SalesDocument, command: ConvertDocumentCommandDTO) -> Optional[str]:
        return source.notes_public

    def _related_document_id(self, source: SalesDocument) -> Optional[str]:
        return source.id

    def _rectifies_document_id(self, source: SalesDocument) -> Optional[str]:
        return None

    async def _add_lines(
        self,
        builder: DocumentBuilder,
        source: SalesDocument,
        command: ConvertDocumentCommandDTO,
    ) -> None:
        if not command.copy_lines:
            return

        for line in await self.line_repo.find_by_document_id(source.id):
            builder.add_line(
                concept=line.concept,
                description=line.description,
                item_id=line.item_id,
                quantity=line.quantity,
                unit_price=line.unit_price,
                discount_percent=line.discount_percent,
                tax_percent=line.tax_percent,
                grouping_tag=line.grouping_tag,
                line_order=line.line_order,
            )
