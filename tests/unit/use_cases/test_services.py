"""Unit tests for number allocation and client snapshots"""

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from sales_engine.app.services.client_snapshotter import ClientSnapshotter
from sales_engine.app.services.document_number_generator import DocumentNumberGenerator
from sales_engine.domain.client import Client, ClientSnapshot
from sales_engine.domain.sales_document import DocumentType


@pytest.fixture
def sequence_repo():
    repo = MagicMock()
    repo.find = AsyncMock(return_value=None)
    repo.next_value = AsyncMock(return_value=1)
    repo.ensure_at_least = AsyncMock()
    repo.record_issued = AsyncMock()
    repo.was_issued = AsyncMock(return_value=False)
    return repo


@pytest.mark.asyncio
class TestDocumentNumberGenerator:
    async def test_new_counter_starts_above_highest_existing_suffix(self, document_repo, sequence_repo):
        """
        Given: No 2025 quote counter yet, quotes E2500003 and legacy E250009 exist
        When: A new 2025 quote number is generated
        Then: The counter is advanced past 9, the number is zero padded and recorded
        """
        document_repo.find_numbers = AsyncMock(return_value=["E2500003", "E250009"])
        sequence_repo.next_value = AsyncMock(return_value=10)

        number = await DocumentNumberGenerator(document_repo, sequence_repo).generate(
            DocumentType.QUOTE, 2025
        )

        assert number == "E2500010"
        document_repo.find_numbers.assert_awaited_once_with(DocumentType.QUOTE, "25")
        sequence_repo.next_value.assert_awaited_once_with(DocumentType.QUOTE, "25", floor=9)
        sequence_repo.record_issued.assert_awaited_once_with(DocumentType.QUOTE, "E2500010")

    async def test_started_counter_skips_the_document_scan(self, document_repo, sequence_repo):
        sequence_repo.find = AsyncMock(return_value=SimpleNamespace(last_value=41))
        sequence_repo.next_value = AsyncMock(return_value=42)
        document_repo.find_numbers = AsyncMock()

        number = await DocumentNumberGenerator(document_repo, sequence_repo).generate(
            DocumentType.INVOICE, 2025
        )

        assert number == "F-2500042"
        document_repo.find_numbers.assert_not_awaited()
        sequence_repo.next_value.assert_awaited_once_with(DocumentType.INVOICE, "25", floor=0)

    async def test_first_number_of_the_year(self, document_repo, sequence_repo):
        document_repo.find_numbers = AsyncMock(return_value=[])

        number = await DocumentNumberGenerator(document_repo, sequence_repo).generate(
            DocumentType.CREDIT_NOTE, 2026
        )

        assert number == "RT-2600001"

    async def test_claim_records_reused_number(self, document_repo, sequence_repo):
        sequence_repo.find = AsyncMock(return_value=SimpleNamespace(last_value=3))

        await DocumentNumberGenerator(document_repo, sequence_repo).claim(
            DocumentType.PROFORMA, "FP250061"
        )

        sequence_repo.ensure_at_least.assert_awaited_once_with(DocumentType.PROFORMA, "25", 61)
        sequence_repo.record_issued.assert_awaited_once_with(DocumentType.PROFORMA, "FP250061")

    async def test_claim_starting_a_counter_respects_existing_numbers(self, document_repo, sequence_repo):
        document_repo.find_numbers = AsyncMock(return_value=["FP2500020"])

        await DocumentNumberGenerator(document_repo, sequence_repo).claim(
            DocumentType.PROFORMA, "FP2500005"
        )

        sequence_repo.ensure_at_least.assert_awaited_once_with(DocumentType.PROFORMA, "25", 20)

    async def test_claim_rejects_number_of_another_type(self, document_repo, sequence_repo):
        with pytest.raises(ValueError):
            await DocumentNumberGenerator(document_repo, sequence_repo).claim(
                DocumentType.PROFORMA, "E250061"
            )
        sequence_repo.record_issued.assert_not_awaited()

    async def test_issued_number_is_not_available_after_its_document_is_gone(
        self, document_repo, sequence_repo
    ):
        sequence_repo.was_issued = AsyncMock(return_value=True)
        document_repo.exists_number = AsyncMock(return_value=False)

        available = await DocumentNumberGenerator(document_repo, sequence_repo).is_available(
            DocumentType.INVOICE, "F-2500001"
        )

        assert available is False
        sequence_repo.was_issued.assert_awaited_once_with(DocumentType.INVOICE, "F-2500001")

    async def test_number_of_a_stored_document_is_not_available(self, document_repo, sequence_repo):
        document_repo.exists_number = AsyncMock(return_value=True)

        generator = DocumentNumberGenerator(document_repo, sequence_repo)

        assert await generator.is_available(DocumentType.PROFORMA, "FP2500009") is False
        document_repo.exists_number = AsyncMock(return_value=False)
        assert await generator.is_available(DocumentType.PROFORMA, "FP2500010") is True


@pytest.mark.asyncio
class TestClientSnapshotter:
    async def test_snapshot_from_client_record(self):
        client_repo = MagicMock()
        client_repo.resolve = AsyncMock(
            return_value=Client(
                id="client_1", fiscal_name="Construcciones Norte SL", vat_number="B12345678",
                city="Bilbao", country="ES",
            )
        )

        snapshot = await ClientSnapshotter(client_repo).snapshot("client_1")

        assert snapshot.fiscal_name == "Construcciones Norte SL"
        assert snapshot.address.city == "Bilbao"
        assert snapshot.display_name == "Construcciones Norte SL"

    async def test_override_wins(self):
        client_repo = MagicMock()
        client_repo.resolve = AsyncMock()
        override = ClientSnapshot(fiscal_name="Manual SL", vat_number="B00000000")

        snapshot = await ClientSnapshotter(client_repo).snapshot("client_1", override=override)

        assert snapshot is override
        client_repo.resolve.assert_not_awaited()

    async def test_unknown_client(self):
        client_repo = MagicMock()
        client_repo.resolve = AsyncMock(return_value=None)

        assert await ClientSnapshotter(client_repo).snapshot("missing") is None
