"""Unit tests for DeleteDocument use case"""

import pytest
from unittest.mock import AsyncMock

from sales_engine.app.use_cases.sales.delete_document import DeleteDocument
from sales_engine.domain.sales_document import DocumentType, DocumentStatus


@pytest.fixture
def delete_document_use_case(mock_uow, document_repo):
    return DeleteDocument(mock_uow, document_repo)


@pytest.mark.asyncio
class TestDeleteDocument:
    async def test_delete_unreferenced_document(
        self, delete_document_use_case, document_repo, mock_uow, make_document
    ):
        document, _ = make_document()
        document_repo.find_by_id = AsyncMock(return_value=document)
        document_repo.delete = AsyncMock(return_value=True)

        result = await delete_document_use_case.execute(document.id)

        assert result.is_ok()
        assert result.value.deleted is True
        assert result.value.document_id == document.id
        document_repo.delete.assert_awaited_once_with(document.id)
        mock_uow.commit.assert_awaited_once()

    async def test_converted_source_cannot_be_deleted(
        self, delete_document_use_case, document_repo, mock_uow, make_document
    ):
        """
        Given: A quote that was converted into a proforma
        When: The quote is deleted
        Then: INVALID_STATE_TRANSITION is returned and nothing is deleted
        """
        quote, _ = make_document(status=DocumentStatus.ACCEPTED)
        proforma, _ = make_document(DocumentType.PROFORMA, "FP250007", related_document_id=quote.id)
        document_repo.find_by_id = AsyncMock(return_value=quote)
        document_repo.find_related = AsyncMock(return_value=[proforma])
        document_repo.delete = AsyncMock()

        result = await delete_document_use_case.execute(quote.id)

        assert result.is_err()
        assert result.error.code == "INVALID_STATE_TRANSITION"
        assert "FP250007" in result.error.message
        document_repo.delete.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    async def test_document_not_found(self, delete_document_use_case, document_repo):
        document_repo.find_by_id = AsyncMock(return_value=None)

        result = await delete_document_use_case.execute("missing")

        assert result.is_err()
        assert result.error.code == "DOCUMENT_NOT_FOUND"

    async def test_repository_failure_rolls_back(
        self, delete_document_use_case, document_repo, mock_uow, make_document
    ):
        document, _ = make_document()
        document_repo.find_by_id = AsyncMock(return_value=document)
        document_repo.delete = AsyncMock(side_effect=Exception("Database error"))

        result = await delete_document_use_case.execute(document.id)

        assert result.is_err()
        assert result.error.code == "DELETE_DOCUMENT_FAILED"
        mock_uow.rollback.assert_awaited_once()
