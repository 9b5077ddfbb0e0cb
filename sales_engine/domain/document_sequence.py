"""Document Sequence Domain Entities

Monotonic numbering counter per document type and two-digit year, plus the
ledger of every number ever issued.
"""

from datetime import datetime
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, Integer, String
from sales_engine.domain.base import BaseModel


class DocumentSequence(BaseModel, table=True):
    """
    Document Sequence - last sequence number handed out for (type, year)

    Domain Rules:
    - One row per (document_type, year_code)
    - last_value only grows, so numbers are never reused after deletion
    """

    __tablename__ = "document_sequences"
    __table_args__ = (
        Index('ix_document_sequences_type_year', 'document_type', 'year_code', unique=True),
    )

    id: int = Field(
        default=None,
        sa_column=Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
        description="Unique sequence identifier (auto-increment)"
    )

    document_type: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Document type value"
    )

    year_code: str = Field(
        sa_column=Column(String(2), nullable=False),
        description="Two-digit year (e.g., '25')"
    )

    last_value: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Last sequence number allocated"
    )


class IssuedDocumentNumber(BaseModel, table=True):
    """
    Issued Document Number - append-only record of a number handed out

    Domain Rules:
    - Rows are never deleted, not even when the document is
    - A number recorded here is never given to another document
    """

    __tablename__ = "document_numbers"
    __table_args__ = (
        Index('ix_document_numbers_type_number', 'document_type', 'document_number', unique=True),
    )

    id: int = Field(
        default=None,
        sa_column=Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
        description="Unique record identifier (auto-increment)"
    )

    document_type: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Document type value"
    )

    document_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Issued number (e.g., 'F-2500007')"
    )

    issued_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="When the number was handed out"
    )
