"""Line and document amount calculations

All monetary rounding goes through round2 so that line values and the
aggregated totals derived from them agree to the cent.
"""

from decimal import Decimal, ROUND_FLOOR
from typing import Dict, Iterable, NamedTuple, Union
from pydantic import BaseModel, Field

Number = Union[Decimal, int, float, str]

CENT = Decimal("0.01")
HUNDRED = Decimal("100")
ZERO = Decimal("0.00")


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # repr-based conversion keeps 0.1 as 0.1 instead of its binary expansion
        return Decimal(repr(value))
    return Decimal(value)


def round2(value: Number) -> Decimal:
    """Round to the cent, ties toward positive infinity (0.005 -> 0.01, -0.005 -> 0.00)"""
    value = to_decimal(value)
    cents = (value * HUNDRED + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR)
    return (cents / HUNDRED).quantize(CENT)


def tax_key(tax_percent: Number) -> str:
    """Stringified tax rate used as vat_breakdown key: 21.00 -> '21', 10.50 -> '10.5'"""
    normalized = to_decimal(tax_percent).normalize()
    if normalized == 0:
        return "0"
    return format(normalized, "f")


class LineTotals(NamedTuple):
    subtotal: Decimal
    total_line: Decimal


def calculate_line_totals(
    quantity: Number,
    unit_price: Number,
    discount_percent: Number,
    tax_percent: Number,
) -> LineTotals:
    """
    Compute a line's subtotal and tax-inclusive total

    subtotal   = round2(quantity * unit_price * (1 - discount_percent/100))
    total_line = round2(subtotal * (1 + tax_percent/100))
    """
    gross = to_decimal(quantity) * to_decimal(unit_price)
    subtotal = round2(gross * (1 - to_decimal(discount_percent) / HUNDRED))
    total_line = round2(subtotal * (1 + to_decimal(tax_percent) / HUNDRED))
    return LineTotals(subtotal=subtotal, total_line=total_line)


class VatBreakdownEntry(BaseModel):
    base: Decimal = Field(default=ZERO, description="Tax base for this rate")
    vat: Decimal = Field(default=ZERO, description="VAT amount for this rate")
    total: Decimal = Field(default=ZERO, description="Base plus VAT for this rate")


class TotalsData(BaseModel):
    """Aggregated document totals as stored in sales_documents.totals_data"""

    base_imponible: Decimal = Field(default=ZERO, description="Tax base")
    total_vat: Decimal = Field(default=ZERO, description="Total VAT")
    total: Decimal = Field(default=ZERO, description="Grand total")
    vat_breakdown: Dict[str, VatBreakdownEntry] = Field(
        default_factory=dict,
        description="Per tax rate breakdown keyed by stringified rate"
    )
    total_discount: Decimal = Field(default=ZERO, description="Total discount granted")

    def to_stored(self) -> dict:
        return self.model_dump(mode="json")

    @classmethod
    def from_stored(cls, data) -> "TotalsData":
        if not data:
            return cls()
        return cls.model_validate(data)


def compute_totals(lines: Iterable) -> TotalsData:
    """
    Roll line values up into document totals

    Lines are grouped by tax rate. Each group's base, vat and total are rounded
    on their own; document totals are the rounded sums of the rounded group
    values, so they may drift a cent from a direct sum over all lines.
    total_discount is summed unrounded and rounded once at the end.
    """
    groups: Dict[str, Dict[str, Decimal]] = {}
    discount = Decimal("0")

    for line in lines:
        key = tax_key(line.tax_percent)
        group = groups.setdefault(
            key, {"base": Decimal("0"), "vat": Decimal("0"), "total": Decimal("0")}
        )

        subtotal = to_decimal(line.subtotal)
        total_line = to_decimal(line.total_line)
        group["base"] += subtotal
        group["vat"] += total_line - subtotal
        group["total"] += total_line

        discount += (
            to_decimal(line.quantity)
            * to_decimal(line.unit_price)
            * to_decimal(line.discount_percent)
            / HUNDRED
        )

    breakdown = {
        key: VatBreakdownEntry(
            base=round2(group["base"]),
            vat=round2(group["vat"]),
            total=round2(group["total"]),
        )
        for key, group in groups.items()
    }

    return TotalsData(
        base_imponible=round2(sum((entry.base for entry in breakdown.values()), Decimal("0"))),
        total_vat=round2(sum((entry.vat for entry in breakdown.values()), Decimal("0"))),
        total=round2(sum((entry.total for entry in breakdown.values()), Decimal("0"))),
        vat_breakdown=breakdown,
        total_discount=round2(discount),
    )
