"""Sales Document Domain Entity

Quotes, proformas, invoices and credit notes share one table and differ by type.
"""

from datetime import datetime, date
from enum import Enum
from typing import Optional, Dict, Any
from sqlmodel import Field, Column, Index
from sqlalchemy import JSON, String, Text, Date, ForeignKey
from sales_engine.domain.base import BaseModel, generate_uuid


class DocumentType(str, Enum):
    """Sales document types, in conversion-chain order"""
    QUOTE = "quote"
    PROFORMA = "proforma"
    INVOICE = "invoice"
    CREDIT_NOTE = "credit_note"


class DocumentStatus(str, Enum):
    """Document status (valid values depend on the document type)"""
    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    PAID = "paid"
    OVERDUE = "overdue"


class SalesDocument(BaseModel, table=True):
    """
    Sales Document - commercial document issued to a client

    Domain Rules:
    - type and document_number are immutable after creation
    - document_number is unique within its type
    - client_snapshot is frozen at creation and never refreshed
    - totals_data is derived from the lines, never edited by hand
    - credit notes always carry rectifies_document_id and related_document_id
    """

    __tablename__ = "sales_documents"
    __table_args__ = (
        Index('ix_sales_documents_type', 'type'),
        Index('ix_sales_documents_client_id', 'client_id'),
        Index('ix_sales_documents_related_document_id', 'related_document_id'),
        Index('ix_sales_documents_type_number', 'type', 'document_number', unique=True),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique document identifier (UUID)"
    )

    type: DocumentType = Field(
        description="Document type (quote, proforma, invoice, credit_note)"
    )

    document_number: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Document number (e.g., E250061, FP250061, F-250061, RT-250061)"
    )

    client_id: str = Field(
        sa_column=Column(String(36), nullable=False),
        description="Client identifier"
    )

    client_snapshot: Optional[Dict[str, Any]] = Field(
        default=None,
        sa_column=Column(JSON, nullable=True),
        description="Client fiscal data frozen at issuance"
    )

    project_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), nullable=True),
        description="Optional project identifier"
    )

    date_issued: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Issue date"
    )

    date_due: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Due date"
    )

    status: DocumentStatus = Field(
        description="Document status"
    )

    notes_internal: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Internal notes (not printed)"
    )

    notes_public: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Public notes printed on the document"
    )

    totals_data: Optional[Dict[str, Any]] = Field(
        default=None,
        sa_column=Column(JSON, nullable=True),
        description="Computed totals (base_imponible, total_vat, total, vat_breakdown, total_discount)"
    )

    related_document_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), ForeignKey("sales_documents.id", ondelete="SET NULL"), nullable=True),
        description="Document this one was converted from"
    )

    rectifies_document_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), ForeignKey("sales_documents.id", ondelete="SET NULL"), nullable=True),
        description="Invoice corrected by this credit note"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Document creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "0f6c1c2e-0d5b-4a43-9d1f-6f0f3c7f2b11",
                "type": "invoice",
                "document_number": "F-250007",
                "client_id": "c2d1b7e4-8f5e-4c8a-9d3f-2a6b9e0c1d44",
                "client_snapshot": {
                    "fiscal_name": "Construcciones Norte SL",
                    "vat_number": "B12345678",
                },
                "date_issued": "2025-03-01",
                "date_due": "2025-03-31",
                "status": "sent",
                "totals_data": {
                    "base_imponible": "230.00",
                    "total_vat": "48.30",
                    "total": "278.30",
                    "vat_breakdown": {"21": {"base": "230.00", "vat": "48.30", "total": "278.30"}},
                    "total_discount": "20.00",
                },
                "related_document_id": "5b0e4d2a-6c1f-4b7e-8a9d-3e2f1c0b9a88",
                "rectifies_document_id": None,
            }
        }
