"""ConvertToInvoice Use Case

E{YY}{N} or FP{YY}{N} becomes F-{YY}{N}.
"""

from sales_engine.domain.sales_document import DocumentType
from .document_conversion import DocumentConversion


class ConvertToInvoice(DocumentConversion):
    """
    Use Case: Invoice an accepted quote or proforma

    The invoice is created already sent. Sources whose number carries neither
    the quote nor the proforma prefix get a freshly allocated invoice number.
    """

    source_types = (DocumentType.QUOTE, DocumentType.PROFORMA)
    target_type = DocumentType.INVOICE
    error_code = "CONVERT_TO_INVOICE_FAILED"
