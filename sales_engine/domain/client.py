"""Client Domain Entity

Live client record. Documents copy its fiscal identity into a snapshot at
issuance, so later edits here never reach issued documents.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel as PydanticModel
from sqlmodel import Field, Column
from sqlalchemy import String
from sales_engine.domain.base import BaseModel, generate_uuid


class Client(BaseModel, table=True):
    """
    Client - Customer fiscal identity and contact data
    """

    __tablename__ = "clients"

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique client identifier (UUID)"
    )

    fiscal_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Legal name"
    )

    commercial_name: Optional[str] = Field(default=None, description="Trade name")
    vat_number: str = Field(
        sa_column=Column(String(32), nullable=False),
        description="Tax identification number"
    )

    street: Optional[str] = Field(default=None)
    city: Optional[str] = Field(default=None)
    zip: Optional[str] = Field(default=None)
    province: Optional[str] = Field(default=None)
    country: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class ClientAddress(PydanticModel):
    street: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None

    class Config:
        frozen = True


class ClientSnapshot(PydanticModel):
    """
    Client fiscal identity frozen onto a document at issuance

    Stored as JSON on sales_documents.client_snapshot. Never refreshed from
    the live Client record.
    """

    fiscal_name: str
    commercial_name: Optional[str] = None
    vat_number: str
    address: Optional[ClientAddress] = None
    phone: Optional[str] = None
    email: Optional[str] = None

    class Config:
        frozen = True

    @classmethod
    def from_client(cls, client: Client) -> "ClientSnapshot":
        return cls(
            fiscal_name=client.fiscal_name,
            commercial_name=client.commercial_name,
            vat_number=client.vat_number,
            address=ClientAddress(
                street=client.street,
                city=client.city,
                zip=client.zip,
                province=client.province,
                country=client.country,
            ),
            phone=client.phone,
            email=client.email,
        )

    @property
    def display_name(self) -> str:
        return self.commercial_name or self.fiscal_name
