"""Sales Document Line Domain Entity

Tracks individual line items within a sales document.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String, Text
from sales_engine.domain.base import BaseModel, generate_uuid


class GroupingTag(str, Enum):
    """Presentation group of a line"""
    PRODUCTS = "Products"
    SERVICES = "Services"


class SalesDocumentLine(BaseModel, table=True):
    """
    Sales Document Line - Individual line item within a sales document

    Domain Rules:
    - Each line belongs to exactly one document and is deleted with it
    - subtotal = round2(quantity * unit_price * (1 - discount_percent/100))
    - total_line = round2(subtotal * (1 + tax_percent/100))
    - quantity is negative on credit note reversal lines
    """

    __tablename__ = "sales_document_lines"
    __table_args__ = (
        Index('ix_sales_document_lines_document_id', 'document_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique line identifier (UUID)"
    )

    document_id: str = Field(
        sa_column=Column(String(36), ForeignKey("sales_documents.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to SalesDocument"
    )

    item_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), nullable=True),
        description="Optional catalog item reference"
    )

    concept: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Line concept"
    )

    description: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Detailed description"
    )

    quantity: Decimal = Field(
        sa_column=Column(Numeric(14, 4), nullable=False),
        description="Quantity (signed)"
    )

    unit_price: Decimal = Field(
        sa_column=Column(Numeric(14, 4), nullable=False),
        description="Price per unit"
    )

    discount_percent: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(7, 2), nullable=False),
        description="Discount percentage"
    )

    tax_percent: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(7, 2), nullable=False),
        description="VAT percentage"
    )

    subtotal: Decimal = Field(
        sa_column=Column(Numeric(14, 2), nullable=False),
        description="Line amount before tax"
    )

    total_line: Decimal = Field(
        sa_column=Column(Numeric(14, 2), nullable=False),
        description="Line amount including tax"
    )

    grouping_tag: GroupingTag = Field(
        default=GroupingTag.PRODUCTS,
        description="Presentation group (Products, Services)"
    )

    line_order: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Order within its group"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Line creation timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "9a1e2f3c-4b5d-6e7f-8091-a2b3c4d5e6f7",
                "document_id": "0f6c1c2e-0d5b-4a43-9d1f-6f0f3c7f2b11",
                "concept": "Installation",
                "quantity": "2.0000",
                "unit_price": "100.0000",
                "discount_percent": "10.00",
                "tax_percent": "21.00",
                "subtotal": "180.00",
                "total_line": "217.80",
                "grouping_tag": "Services",
                "line_order": 1,
            }
        }
