"""Unit tests for line and document amount calculations"""

from decimal import Decimal
from types import SimpleNamespace

from sales_engine.domain.money import (
    TotalsData,
    calculate_line_totals,
    compute_totals,
    round2,
    tax_key,
    to_decimal,
)


def make_line(quantity, unit_price, discount_percent="0", tax_percent="0"):
    amounts = calculate_line_totals(quantity, unit_price, discount_percent, tax_percent)
    return SimpleNamespace(
        quantity=Decimal(str(quantity)),
        unit_price=Decimal(str(unit_price)),
        discount_percent=Decimal(str(discount_percent)),
        tax_percent=Decimal(str(tax_percent)),
        subtotal=amounts.subtotal,
        total_line=amounts.total_line,
    )


class TestRound2:
    """Test cent rounding"""

    def test_round2_ties_go_up(self):
        assert round2(Decimal("0.005")) == Decimal("0.01")
        assert round2(Decimal("2.675")) == Decimal("2.68")

    def test_round2_negative_ties_go_toward_positive_infinity(self):
        assert round2(Decimal("-0.005")) == Decimal("0.00")
        assert round2(Decimal("-1.005")) == Decimal("-1.00")
        assert round2(Decimal("-1.006")) == Decimal("-1.01")

    def test_round2_float_input_uses_decimal_representation(self):
        # 1.005 is stored as 1.00499999... in binary
        assert round2(1.005) == Decimal("1.01")
        assert to_decimal(0.1) == Decimal("0.1")

    def test_round2_always_two_places(self):
        assert str(round2(5)) == "5.00"
        assert str(round2("217.8")) == "217.80"


class TestTaxKey:
    def test_tax_key_strips_trailing_zeros(self):
        assert tax_key(Decimal("21.00")) == "21"
        assert tax_key(Decimal("10.50")) == "10.5"
        assert tax_key(4) == "4"

    def test_tax_key_whole_hundreds_not_in_exponent_form(self):
        assert tax_key(Decimal("100")) == "100"

    def test_tax_key_zero(self):
        assert tax_key(Decimal("0.00")) == "0"


class TestCalculateLineTotals:
    """Test line subtotal and total_line"""

    def test_discount_then_tax(self):
        """
        Given: 2 x 100.00 with 10% discount and 21% VAT
        When: Line totals are calculated
        Then: subtotal is 180.00 and total_line is 217.80
        """
        # Act
        amounts = calculate_line_totals(Decimal("2"), Decimal("100"), Decimal("10"), Decimal("21"))

        # Assert
        assert amounts.subtotal == Decimal("180.00")
        assert amounts.total_line == Decimal("217.80")

    def test_total_line_rounds_from_rounded_subtotal(self):
        # 3 x 0.3333 = 0.9999 -> 1.00, then 1.00 * 1.21 = 1.21
        amounts = calculate_line_totals(Decimal("3"), Decimal("0.3333"), 0, Decimal("21"))

        assert amounts.subtotal == Decimal("1.00")
        assert amounts.total_line == Decimal("1.21")

    def test_negative_quantity_gives_negative_amounts(self):
        amounts = calculate_line_totals(Decimal("-2"), Decimal("100"), Decimal("10"), Decimal("21"))

        assert amounts.subtotal == Decimal("-180.00")
        assert amounts.total_line == Decimal("-217.80")


class TestComputeTotals:
    """Test document totals aggregation"""

    def test_single_rate_document(self):
        """
        Given: Two lines at 21% VAT (180.00 after discount and 50.00)
        When: Totals are computed
        Then: Base, VAT, total, discount and the breakdown match
        """
        # Arrange
        lines = [
            make_line("2", "100", "10", "21"),
            make_line("1", "50", "0", "21"),
        ]

        # Act
        totals = compute_totals(lines)

        # Assert
        assert totals.base_imponible == Decimal("230.00")
        assert totals.total_vat == Decimal("48.30")
        assert totals.total == Decimal("278.30")
        assert totals.total_discount == Decimal("20.00")
        assert list(totals.vat_breakdown.keys()) == ["21"]
        assert totals.vat_breakdown["21"].base == Decimal("230.00")
        assert totals.vat_breakdown["21"].vat == Decimal("48.30")
        assert totals.vat_breakdown["21"].total == Decimal("278.30")

    def test_multiple_rates_have_their_own_breakdown_entries(self):
        lines = [
            make_line("1", "100", "0", "21"),
            make_line("1", "100", "0", "10"),
            make_line("1", "33.33", "0", "4"),
        ]

        totals = compute_totals(lines)

        assert set(totals.vat_breakdown.keys()) == {"21", "10", "4"}
        assert totals.vat_breakdown["10"].vat == Decimal("10.00")
        assert totals.vat_breakdown["4"].base == Decimal("33.33")
        assert totals.vat_breakdown["4"].vat == Decimal("1.33")
        assert totals.vat_breakdown["4"].total == Decimal("34.66")
        assert totals.base_imponible == Decimal("233.33")
        assert totals.total_vat == Decimal("32.33")
        assert totals.total == Decimal("265.66")

    def test_equal_rates_written_differently_share_one_entry(self):
        lines = [
            make_line("1", "10", "0", "21.00"),
            make_line("1", "20", "0", "21"),
        ]

        totals = compute_totals(lines)

        assert list(totals.vat_breakdown.keys()) == ["21"]
        assert totals.vat_breakdown["21"].base == Decimal("30.00")

    def test_totals_consistent_within_a_cent(self):
        lines = [make_line("1", "0.3333", "0", "21") for _ in range(7)]

        totals = compute_totals(lines)

        assert abs(totals.base_imponible + totals.total_vat - totals.total) <= Decimal("0.01")
        for entry in totals.vat_breakdown.values():
            assert abs(entry.base + entry.vat - entry.total) <= Decimal("0.01")

    def test_empty_document_has_zero_totals(self):
        totals = compute_totals([])

        assert totals.base_imponible == Decimal("0")
        assert totals.total_vat == Decimal("0")
        assert totals.total == Decimal("0")
        assert totals.total_discount == Decimal("0")
        assert totals.vat_breakdown == {}

    def test_reversed_lines_negate_the_totals(self):
        invoiced = compute_totals([make_line("2", "100", "10", "21"), make_line("1", "50", "0", "21")])
        reversed_totals = compute_totals([make_line("-2", "100", "10", "21"), make_line("-1", "50", "0", "21")])

        assert reversed_totals.total == -invoiced.total
        assert reversed_totals.base_imponible == -invoiced.base_imponible
        assert reversed_totals.total_vat == -invoiced.total_vat


class TestTotalsDataStorage:
    def test_stored_form_is_json_friendly(self):
        totals = compute_totals([make_line("2", "100", "10", "21")])

        stored = totals.to_stored()

        assert stored["total"] == "217.80"
        assert stored["vat_breakdown"]["21"]["vat"] == "37.80"
        assert TotalsData.from_stored(stored) == totals

    def test_missing_stored_totals_read_as_zero(self):
        assert TotalsData.from_stored(None).total == Decimal("0")
