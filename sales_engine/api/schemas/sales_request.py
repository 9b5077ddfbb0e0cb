"""Request schemas for Sales Document API

Pydantic models for validating incoming HTTP requests. The document id comes
from the path, so these mirror the use case commands without it.
"""

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field
from sales_engine.app.use_cases.sales.dtos import LineInputDTO
from sales_engine.domain.sales_document import DocumentStatus


class UpdateDocumentRequestSchema(BaseModel):
    """
    Request schema for editing a draft document

    Used for PATCH /sales/documents/{document_id}. Omitted fields are left as
    they are; "lines" replaces the whole line set when present.
    """

    project_id: Optional[str] = None
    date_issued: Optional[date] = None
    date_due: Optional[date] = None
    notes_internal: Optional[str] = None
    notes_public: Optional[str] = None
    lines: Optional[List[LineInputDTO]] = None


class ChangeStatusRequestSchema(BaseModel):
    status: DocumentStatus = Field(..., description="Target status")


class ConvertRequestSchema(BaseModel):
    issued_on: Optional[date] = Field(default=None, description="Issue date (defaults to today)")
    copy_lines: bool = Field(default=True, description="Copy source lines")


class CreditNoteRequestSchema(ConvertRequestSchema):
    lines: Optional[List[LineInputDTO]] = Field(
        default=None,
        description="Explicit rectification lines; omitted for a full reversal"
    )
    reason: Optional[str] = Field(default=None, description="Rectification reason")


class ComputeTotalsRequestSchema(BaseModel):
    lines: List[LineInputDTO] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "lines": [
                    {"concept": "Installation", "quantity": "2", "unit_price": "100", "discount_percent": "10", "tax_percent": "21"},
                    {"concept": "Cable", "quantity": "1", "unit_price": "50", "tax_percent": "21"},
                ]
            }
        }
