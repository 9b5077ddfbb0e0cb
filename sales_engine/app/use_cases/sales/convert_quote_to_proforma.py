"""ConvertQuoteToProforma Use Case

E{YY}{N} becomes FP{YY}{N}.
"""

from sales_engine.domain.sales_document import DocumentType
from .document_conversion import DocumentConversion


class ConvertQuoteToProforma(DocumentConversion):
    """
    Use Case: Turn an accepted quote into a draft proforma

    The proforma keeps the quote's numeric suffix, client snapshot and lines,
    is due DEFAULT_DUE_DAYS after issue and points back at the quote.
    """

    source_types = (DocumentType.QUOTE,)
    target_type = DocumentType.PROFORMA
    error_code = "CONVERT_TO_PROFORMA_FAILED"
