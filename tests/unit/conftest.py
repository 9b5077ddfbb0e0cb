import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from sales_engine.app.services.document_builder import DocumentBuilder
from sales_engine.domain.client import ClientSnapshot
from sales_engine.domain.sales_document import SalesDocument, DocumentType, DocumentStatus


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def snapshot():
    return ClientSnapshot(
        fiscal_name="Construcciones Norte SL",
        commercial_name="Norte",
        vat_number="B12345678",
    )


@pytest.fixture
def make_document(snapshot):
    """Build a document with lines (2 x 100 -10% @21, 1 x 50 @21) and computed totals"""

    def _make(document_type=DocumentType.QUOTE, number="E250007",
              status=DocumentStatus.DRAFT, **overrides):
        document = SalesDocument(
            type=document_type,
            document_number=number,
            client_id="client_1",
            client_snapshot=snapshot.model_dump(mode="json"),
            date_issued=date(2025, 3, 1),
            status=status,
            **overrides,
        )
        builder = DocumentBuilder(document)
        builder.add_line(concept="Installation", quantity=Decimal("2"), unit_price=Decimal("100"),
                         discount_percent=Decimal("10"), tax_percent=Decimal("21"))
        builder.add_line(concept="Cable", quantity=Decimal("1"), unit_price=Decimal("50"),
                         tax_percent=Decimal("21"))
        builder.build()
        return document, builder.lines

    return _make


@pytest.fixture
def document_repo():
    """Mock sales document repository; inserts echo the entity back"""
    repo = MagicMock()
    repo.insert = AsyncMock(side_effect=lambda document: document)
    repo.exists_number = AsyncMock(return_value=False)
    repo.find_related = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def line_repo():
    """Mock line repository; inserts echo the entity back"""
    repo = MagicMock()
    repo.insert = AsyncMock(side_effect=lambda line: line)
    repo.delete_all = AsyncMock(return_value=True)
    return repo
