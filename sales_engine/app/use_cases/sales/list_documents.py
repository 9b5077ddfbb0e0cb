"""ListDocuments Use Case

Lists documents of one type, newest first, with display data for list views.
"""

from typing import Optional
from sales_engine.libs.result import Result, Return, Error
from sales_engine.app.repositories.client_repository import ClientRepository
from sales_engine.app.repositories.sales_document_repository import SalesDocumentRepository
from sales_engine.domain.client import ClientSnapshot
from sales_engine.domain.money import TotalsData
from sales_engine.domain.sales_document import SalesDocument, DocumentType
from .dtos import DocumentSummaryDTO, ListDocumentsResponseDTO


class ListDocuments:
    """
    Use Case: List documents by type

    Business Rules:
    1. Sorted by date_issued, newest first
    2. client_name comes from the snapshot (commercial name, then fiscal name);
       documents without snapshot fall back to the live client record
    3. is_converted is set when another document was converted from this one
    """

    def __init__(
        self,
        document_repo: SalesDocumentRepository,
        client_repo: ClientRepository,
    ):
        self.document_repo = document_repo
        self.client_repo = client_repo

    async def _client_name(self, document: SalesDocument) -> str:
        if document.client_snapshot:
            return ClientSnapshot.model_validate(document.client_snapshot).display_name

        client = await self.client_repo.resolve(document.client_id)
        if client:
            return client.commercial_name or client.fiscal_name or ""
        return ""

    async def execute(
        self, document_type: DocumentType, client_id: Optional[str] = None
    ) -> Result[ListDocumentsResponseDTO]:
        try:
            documents = await self.document_repo.find_by_type(document_type)
            if client_id:
                documents = [doc for doc in documents if doc.client_id == client_id]

            summaries = []
            for document in documents:
                related = await self.document_repo.find_related(document.id)
                summaries.append(
                    DocumentSummaryDTO(
                        id=document.id,
                        type=document.type,
                        document_number=document.document_number,
                        status=document.status,
                        client_id=document.client_id,
                        client_name=await self._client_name(document),
                        project_id=document.project_id,
                        date_issued=document.date_issued,
                        date_due=document.date_due,
                        total=TotalsData.from_stored(document.totals_data).total,
                        is_converted=bool(related),
                    )
                )

            return Return.ok(
                ListDocumentsResponseDTO(documents=summaries, total_count=len(summaries))
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_DOCUMENTS_FAILED",
                    message=f"Failed to list {document_type.value} documents",
                    reason=str(e),
                )
            )
