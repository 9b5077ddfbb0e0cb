"""Unit tests for document number formatting and parsing"""

import pytest

from sales_engine.domain.numbering import (
    format_document_number,
    max_sequence,
    parse_document_number,
    swap_prefix,
    year_code,
)
from sales_engine.domain.sales_document import DocumentType


class TestFormatDocumentNumber:
    @pytest.mark.parametrize(
        "document_type,expected",
        [
            (DocumentType.QUOTE, "E2500007"),
            (DocumentType.PROFORMA, "FP2500007"),
            (DocumentType.INVOICE, "F-2500007"),
            (DocumentType.CREDIT_NOTE, "RT-2500007"),
        ],
    )
    def test_prefix_year_and_padded_sequence(self, document_type, expected):
        assert format_document_number(document_type, "25", 7) == expected

    def test_year_code_is_two_digits(self):
        assert year_code(2025) == "25"
        assert year_code(2100) == "00"
        assert year_code(2009) == "09"


class TestParseDocumentNumber:
    def test_parse_legacy_four_digit_quote(self):
        parsed = parse_document_number("E250007")

        assert parsed.document_type == DocumentType.QUOTE
        assert parsed.year_code == "25"
        assert parsed.suffix == "0007"
        assert parsed.sequence == 7

    def test_parse_hyphenated_prefixes(self):
        assert parse_document_number("F-2500012").document_type == DocumentType.INVOICE
        assert parse_document_number("RT-250001").document_type == DocumentType.CREDIT_NOTE
        assert parse_document_number("FP250061").document_type == DocumentType.PROFORMA

    @pytest.mark.parametrize("number", [None, "", "X250001", "E25", "INV-2024-000001", "e250001"])
    def test_malformed_numbers(self, number):
        assert parse_document_number(number) is None


class TestSwapPrefix:
    def test_quote_to_proforma_keeps_suffix(self):
        assert swap_prefix("E250007", DocumentType.PROFORMA, (DocumentType.QUOTE,)) == "FP250007"

    def test_proforma_to_invoice(self):
        sources = (DocumentType.QUOTE, DocumentType.PROFORMA)
        assert swap_prefix("FP250007", DocumentType.INVOICE, sources) == "F-250007"
        assert swap_prefix("E2500031", DocumentType.INVOICE, sources) == "F-2500031"

    def test_invoice_to_credit_note(self):
        assert swap_prefix("F-250001", DocumentType.CREDIT_NOTE, (DocumentType.INVOICE,)) == "RT-250001"

    def test_unexpected_prefix_returns_none(self):
        assert swap_prefix("FP250007", DocumentType.PROFORMA, (DocumentType.QUOTE,)) is None
        assert swap_prefix("legacy-77", DocumentType.INVOICE, (DocumentType.PROFORMA,)) is None


class TestMaxSequence:
    def test_only_matching_type_and_year_count(self):
        numbers = ["E250007", "E2500012", "E240099", "FP250050", "garbage"]

        assert max_sequence(numbers, DocumentType.QUOTE, "25") == 12

    def test_no_numbers(self):
        assert max_sequence([], DocumentType.INVOICE, "25") == 0
