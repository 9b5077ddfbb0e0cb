"""Per-type document status rules"""

from typing import Dict, FrozenSet, Optional
from sales_engine.domain.sales_document import DocumentStatus, DocumentType

S = DocumentStatus

INITIAL_STATUS: Dict[DocumentType, DocumentStatus] = {
    DocumentType.QUOTE: S.DRAFT,
    DocumentType.PROFORMA: S.DRAFT,
    DocumentType.INVOICE: S.SENT,
    DocumentType.CREDIT_NOTE: S.DRAFT,
}

_OFFER_TRANSITIONS = {
    S.DRAFT: frozenset({S.SENT}),
    S.SENT: frozenset({S.ACCEPTED, S.REJECTED}),
}

TRANSITIONS: Dict[DocumentType, Dict[DocumentStatus, FrozenSet[DocumentStatus]]] = {
    DocumentType.QUOTE: _OFFER_TRANSITIONS,
    DocumentType.PROFORMA: _OFFER_TRANSITIONS,
    DocumentType.INVOICE: {
        S.SENT: frozenset({S.PAID, S.OVERDUE}),
        S.OVERDUE: frozenset({S.PAID}),
    },
    DocumentType.CREDIT_NOTE: {},
}

# Status a source must be in before it may be converted or rectified
CONVERSION_SOURCE_STATUS: Dict[DocumentType, DocumentStatus] = {
    DocumentType.QUOTE: S.ACCEPTED,
    DocumentType.PROFORMA: S.ACCEPTED,
    DocumentType.INVOICE: S.PAID,
}

EDITABLE_TYPES = frozenset({DocumentType.QUOTE, DocumentType.PROFORMA})


def allowed_statuses(document_type: DocumentType) -> FrozenSet[DocumentStatus]:
    statuses = {INITIAL_STATUS[document_type]}
    for source, targets in TRANSITIONS[document_type].items():
        statuses.add(source)
        statuses.update(targets)
    return frozenset(statuses)


def can_transition(
    document_type: DocumentType, current: DocumentStatus, target: DocumentStatus
) -> bool:
    return target in TRANSITIONS[document_type].get(current, frozenset())


def is_editable(document_type: DocumentType, status: DocumentStatus) -> bool:
    """Only draft quotes and proformas accept header or line changes"""
    return document_type in EDITABLE_TYPES and status == S.DRAFT


def conversion_blocker(
    document_type: DocumentType, status: DocumentStatus
) -> Optional[DocumentStatus]:
    """Required status when the source cannot be converted yet, None when it can"""
    required = CONVERSION_SOURCE_STATUS.get(document_type)
    if required is None or status == required:
        return None
    return required
