"""Sales Document API Routes

FastAPI routes for quotes, proformas, invoices and credit notes.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from sales_engine.api.error import ClientError
from sales_engine.api.schemas.sales_request import (
    UpdateDocumentRequestSchema,
    ChangeStatusRequestSchema,
    ConvertRequestSchema,
    CreditNoteRequestSchema,
    ComputeTotalsRequestSchema,
)
from sales_engine.app.services.client_snapshotter import ClientSnapshotter
from sales_engine.app.services.document_number_generator import DocumentNumberGenerator
from sales_engine.app.use_cases.sales import (
    CreateDocument,
    UpdateDocument,
    DeleteDocument,
    ChangeDocumentStatus,
    GetDocument,
    ListDocuments,
    ComputeTotals,
    ConvertQuoteToProforma,
    ConvertToInvoice,
    ConvertInvoiceToCreditNote,
    CreateDocumentCommandDTO,
    UpdateDocumentCommandDTO,
    ChangeStatusCommandDTO,
    ConvertDocumentCommandDTO,
    CreditNoteCommandDTO,
    SalesDocumentResponseDTO,
    ListDocumentsResponseDTO,
    DeleteDocumentResponseDTO,
    ComputeTotalsResponseDTO,
)
from sales_engine.adapter.repositories import (
    SqlAlchemySalesDocumentRepository,
    SqlAlchemySalesDocumentLineRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyDocumentSequenceRepository,
)
from sales_engine.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from sales_engine.depends import get_session
from sales_engine.domain.sales_document import DocumentType

router = APIRouter(prefix="/sales/documents", tags=["Sales Documents"])
totals_router = APIRouter(prefix="/sales", tags=["Sales Documents"])


def _raise_on_error(result):
    if result.is_err():
        raise ClientError(result.error)
    return result.value


def _conversion(use_case_class, session: AsyncSession):
    document_repo = SqlAlchemySalesDocumentRepository(session)
    return use_case_class(
        uow=SqlAlchemyUnitOfWork(session),
        document_repo=document_repo,
        line_repo=SqlAlchemySalesDocumentLineRepository(session),
        number_generator=DocumentNumberGenerator(
            document_repo, SqlAlchemyDocumentSequenceRepository(session)
        ),
        client_snapshotter=ClientSnapshotter(SqlAlchemyClientRepository(session)),
        enforce_source_status=ApplicationConfig.ENFORCE_CONVERSION_STATUS,
        due_days=ApplicationConfig.DOCUMENT_DUE_DAYS,
    )


@router.post(
    "",
    response_model=SalesDocumentResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_document(
    request: CreateDocumentCommandDTO,
    session: AsyncSession = Depends(get_session)
):
    """
    Create a quote, proforma or invoice.

    The number is allocated automatically, the client snapshot is frozen and
    line amounts and totals are computed server-side.

    **Returns:**
    - 201: Document created
    - 400: Validation error (e.g., credit note requested directly)
    """
    document_repo = SqlAlchemySalesDocumentRepository(session)
    use_case = CreateDocument(
        uow=SqlAlchemyUnitOfWork(session),
        document_repo=document_repo,
        line_repo=SqlAlchemySalesDocumentLineRepository(session),
        number_generator=DocumentNumberGenerator(
            document_repo, SqlAlchemyDocumentSequenceRepository(session)
        ),
        client_snapshotter=ClientSnapshotter(SqlAlchemyClientRepository(session)),
    )
    return _raise_on_error(await use_case.execute(request))


@router.get(
    "",
    response_model=ListDocumentsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_documents(
    type: DocumentType = Query(..., description="Document type"),
    client_id: Optional[str] = Query(default=None, description="Filter by client"),
    session: AsyncSession = Depends(get_session)
):
    """List documents of one type, newest first."""
    use_case = ListDocuments(
        SqlAlchemySalesDocumentRepository(session),
        SqlAlchemyClientRepository(session),
    )
    return _raise_on_error(await use_case.execute(type, client_id=client_id))


@router.get(
    "/{document_id}",
    response_model=SalesDocumentResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_document(
    document_id: str,
    session: AsyncSession = Depends(get_session)
):
    """
    Retrieve a document with its lines.

    **Returns:**
    - 200: Document found
    - 404: Document not found
    """
    use_case = GetDocument(
        SqlAlchemySalesDocumentRepository(session),
        SqlAlchemySalesDocumentLineRepository(session),
    )
    return _raise_on_error(await use_case.execute(document_id))


@router.patch(
    "/{document_id}",
    response_model=SalesDocumentResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def update_document(
    document_id: str,
    request: UpdateDocumentRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Edit a draft quote or proforma.

    **Returns:**
    - 200: Document updated
    - 404: Document not found
    - 409: Document is not editable in its current status
    """
    command = UpdateDocumentCommandDTO(
        document_id=document_id,
        **request.model_dump(exclude_unset=True),
    )
    use_case = UpdateDocument(
        uow=SqlAlchemyUnitOfWork(session),
        document_repo=SqlAlchemySalesDocumentRepository(session),
        line_repo=SqlAlchemySalesDocumentLineRepository(session),
    )
    return _raise_on_error(await use_case.execute(command))


@router.delete(
    "/{document_id}",
    response_model=DeleteDocumentResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def delete_document(
    document_id: str,
    session: AsyncSession = Depends(get_session)
):
    """
    Delete a document and its lines.

    **Returns:**
    - 200: Document deleted
    - 404: Document not found
    - 409: Other documents were converted from this one
    """
    use_case = DeleteDocument(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemySalesDocumentRepository(session),
    )
    return _raise_on_error(await use_case.execute(document_id))


@router.post(
    "/{document_id}/status",
    response_model=SalesDocumentResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def change_document_status(
    document_id: str,
    request: ChangeStatusRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Move a document to another status.

    **Returns:**
    - 200: Status changed
    - 404: Document not found
    - 409: Transition not allowed for the document type
    """
    use_case = ChangeDocumentStatus(
        uow=SqlAlchemyUnitOfWork(session),
        document_repo=SqlAlchemySalesDocumentRepository(session),
        line_repo=SqlAlchemySalesDocumentLineRepository(session),
    )
    command = ChangeStatusCommandDTO(document_id=document_id, status=request.status)
    return _raise_on_error(await use_case.execute(command))


@router.post(
    "/{document_id}/convert/proforma",
    response_model=SalesDocumentResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def convert_quote_to_proforma(
    document_id: str,
    request: Optional[ConvertRequestSchema] = None,
    session: AsyncSession = Depends(get_session)
):
    """
    Turn an accepted quote into a proforma (E250007 -> FP250007).

    **Returns:**
    - 201: Proforma created
    - 400: Source is not a quote
    - 404: Source not found
    - 409: Quote is not accepted
    """
    request = request or ConvertRequestSchema()
    command = ConvertDocumentCommandDTO(document_id=document_id, **request.model_dump())
    use_case = _conversion(ConvertQuoteToProforma, session)
    return _raise_on_error(await use_case.execute(command))


@router.post(
    "/{document_id}/convert/invoice",
    response_model=SalesDocumentResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def convert_to_invoice(
    document_id: str,
    request: Optional[ConvertRequestSchema] = None,
    session: AsyncSession = Depends(get_session)
):
    """
    Invoice an accepted quote or proforma (FP250007 -> F-250007).

    **Returns:**
    - 201: Invoice created
    - 400: Source is not a quote or proforma
    - 404: Source not found
    - 409: Source is not accepted
    """
    request = request or ConvertRequestSchema()
    command = ConvertDocumentCommandDTO(document_id=document_id, **request.model_dump())
    use_case = _conversion(ConvertToInvoice, session)
    return _raise_on_error(await use_case.execute(command))


@router.post(
    "/{document_id}/convert/credit-note",
    response_model=SalesDocumentResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def convert_invoice_to_credit_note(
    document_id: str,
    request: Optional[CreditNoteRequestSchema] = None,
    session: AsyncSession = Depends(get_session)
):
    """
    Rectify a paid invoice (F-250001 -> RT-250001).

    Without "lines" every invoice line is reversed.

    **Returns:**
    - 201: Credit note created
    - 400: Source is not an invoice
    - 404: Source not found
    - 409: Invoice is not paid
    """
    request = request or CreditNoteRequestSchema()
    command = CreditNoteCommandDTO(document_id=document_id, **request.model_dump())
    use_case = _conversion(ConvertInvoiceToCreditNote, session)
    return _raise_on_error(await use_case.execute(command))


@totals_router.post(
    "/totals",
    response_model=ComputeTotalsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def compute_totals(request: ComputeTotalsRequestSchema):
    """Preview line amounts and document totals without saving anything."""
    return _raise_on_error(ComputeTotals().execute(request.lines))
