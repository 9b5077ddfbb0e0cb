"""Document number format

Numbers look like {prefix}{YY}{NNNNN}: E2500007, FP2500007, F-2500007, RT-2500007.
The sequence is scoped per document type and two-digit year. Converted
documents keep the source's digits untouched, so legacy four-digit numbers
such as E250061 become FP250061.
"""

import re
from typing import NamedTuple, Optional
from sales_engine.domain.sales_document import DocumentType

DOCUMENT_PREFIXES = {
    DocumentType.QUOTE: "E",
    DocumentType.PROFORMA: "FP",
    DocumentType.INVOICE: "F-",
    DocumentType.CREDIT_NOTE: "RT-",
}

SEQUENCE_DIGITS = 5

_NUMBER_PATTERN = re.compile(r"^(RT-|FP|F-|E)(\d{2})(\d+)$")
_TYPE_BY_PREFIX = {prefix: doc_type for doc_type, prefix in DOCUMENT_PREFIXES.items()}


class ParsedNumber(NamedTuple):
    document_type: DocumentType
    year_code: str
    suffix: str

    @property
    def sequence(self) -> int:
        return int(self.suffix)


def year_code(year: int) -> str:
    return f"{year % 100:02d}"


def format_document_number(document_type: DocumentType, yy: str, sequence: int) -> str:
    return f"{DOCUMENT_PREFIXES[document_type]}{yy}{sequence:0{SEQUENCE_DIGITS}d}"


def parse_document_number(number: Optional[str]) -> Optional[ParsedNumber]:
    """Split a document number into type, year code and numeric suffix; None if malformed"""
    match = _NUMBER_PATTERN.match(number or "")
    if not match:
        return None
    prefix, yy, suffix = match.groups()
    return ParsedNumber(_TYPE_BY_PREFIX[prefix], yy, suffix)


def swap_prefix(number: str, target_type: DocumentType, source_types: tuple) -> Optional[str]:
    """
    Reuse the year and numeric suffix of a source number under the target prefix

    Returns None when the number does not carry one of the accepted source prefixes.
    """
    parsed = parse_document_number(number)
    if parsed is None or parsed.document_type not in source_types:
        return None
    return f"{DOCUMENT_PREFIXES[target_type]}{parsed.year_code}{parsed.suffix}"


def max_sequence(numbers, document_type: DocumentType, yy: str) -> int:
    """Highest sequence among numbers of the given type and year, 0 if none"""
    highest = 0
    for number in numbers:
        parsed = parse_document_number(number)
        if parsed and parsed.document_type == document_type and parsed.year_code == yy:
            highest = max(highest, parsed.sequence)
    return highest
