"""ComputeTotals Use Case

Previews line amounts and document totals for unsaved line data.
"""

from decimal import Decimal
from typing import List, NamedTuple
from sales_engine.libs.result import Result, Return, Error
from sales_engine.domain.money import calculate_line_totals, compute_totals
from .dtos import LineInputDTO, LineAmountsDTO, ComputeTotalsResponseDTO


class _PricedLine(NamedTuple):
    quantity: Decimal
    unit_price: Decimal
    discount_percent: Decimal
    tax_percent: Decimal
    subtotal: Decimal
    total_line: Decimal


class ComputeTotals:
    """Use Case: compute totals for a set of lines without persisting anything"""

    def execute(self, lines: List[LineInputDTO]) -> Result[ComputeTotalsResponseDTO]:
        try:
            priced = []
            for line in lines:
                amounts = calculate_line_totals(
                    line.quantity, line.unit_price, line.discount_percent, line.tax_percent
                )
                priced.append(
                    _PricedLine(
                        quantity=line.quantity,
                        unit_price=line.unit_price,
                        discount_percent=line.discount_percent,
                        tax_percent=line.tax_percent,
                        subtotal=amounts.subtotal,
                        total_line=amounts.total_line,
                    )
                )

            return Return.ok(
                ComputeTotalsResponseDTO(
                    lines=[
                        LineAmountsDTO(
                            concept=line.concept,
                            subtotal=p.subtotal,
                            total_line=p.total_line,
                        )
                        for line, p in zip(lines, priced)
                    ],
                    totals=compute_totals(priced),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="COMPUTE_TOTALS_FAILED",
                    message="Failed to compute totals",
                    reason=str(e),
                )
            )
