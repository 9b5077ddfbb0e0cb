"""Unit tests for ListDocuments use case"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from sales_engine.app.use_cases.sales.list_documents import ListDocuments
from sales_engine.domain.client import Client
from sales_engine.domain.sales_document import DocumentType, DocumentStatus


@pytest.fixture
def client_repo():
    repo = MagicMock()
    repo.resolve = AsyncMock(
        return_value=Client(id="client_2", fiscal_name="Talleres Sur SA", vat_number="A11111111")
    )
    return repo


@pytest.mark.asyncio
class TestListDocuments:
    async def test_summaries_carry_client_name_total_and_conversion_flag(
        self, document_repo, client_repo, make_document
    ):
        """
        Given: Two quotes, one converted and one without client snapshot
        When: Quotes are listed
        Then: Names come from the snapshot or the live client and is_converted is set
        """
        # Arrange
        converted, _ = make_document(number="E250007", status=DocumentStatus.ACCEPTED)
        plain, _ = make_document(number="E2500008")
        plain.client_snapshot = None
        plain.client_id = "client_2"
        document_repo.find_by_type = AsyncMock(return_value=[converted, plain])
        document_repo.find_related = AsyncMock(
            side_effect=lambda document_id: [MagicMock()] if document_id == converted.id else []
        )

        # Act
        result = await ListDocuments(document_repo, client_repo).execute(DocumentType.QUOTE)

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.total_count == 2
        first, second = response.documents
        assert first.document_number == "E250007"
        assert first.client_name == "Norte"
        assert first.is_converted is True
        assert first.total == Decimal("278.30")
        assert second.client_name == "Talleres Sur SA"
        assert second.is_converted is False
        document_repo.find_by_type.assert_awaited_once_with(DocumentType.QUOTE)

    async def test_filter_by_client(self, document_repo, client_repo, make_document):
        mine, _ = make_document(number="E250001")
        other, _ = make_document(number="E250002")
        other.client_id = "someone_else"
        document_repo.find_by_type = AsyncMock(return_value=[mine, other])

        result = await ListDocuments(document_repo, client_repo).execute(
            DocumentType.QUOTE, client_id="client_1"
        )

        assert result.is_ok()
        assert [doc.document_number for doc in result.value.documents] == ["E250001"]

    async def test_repository_failure(self, document_repo, client_repo):
        document_repo.find_by_type = AsyncMock(side_effect=Exception("Database error"))

        result = await ListDocuments(document_repo, client_repo).execute(DocumentType.INVOICE)

        assert result.is_err()
        assert result.error.code == "LIST_DOCUMENTS_FAILED"
