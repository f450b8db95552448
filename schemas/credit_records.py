"""Schemas for the non-account sections of a credit report."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InquiryType(str, Enum):
    HARD = "hard"
    SOFT = "soft"


class PublicRecordType(str, Enum):
    BANKRUPTCY = "bankruptcy"
    TAX_LIEN = "tax_lien"
    CIVIL_JUDGMENT = "civil_judgment"
    FORECLOSURE = "foreclosure"
    OTHER = "other"


class PublicRecordStatus(str, Enum):
    ACTIVE = "active"
    SATISFIED = "satisfied"
    DISMISSED = "dismissed"
    FILED = "filed"


class CollectionStatus(str, Enum):
    OPEN = "OPEN"
    PAID = "PAID"
    SETTLED = "SETTLED"
    DISPUTED = "DISPUTED"
    CLOSED = "CLOSED"


class CreditInquiry(BaseModel):
    model_config = ConfigDict(frozen=True)

    inquiry_date: Optional[date] = None
    creditor_name: str = "Unknown Creditor"
    inquiry_type: InquiryType = InquiryType.HARD


class PublicRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    record_type: PublicRecordType = PublicRecordType.OTHER
    status: PublicRecordStatus = PublicRecordStatus.ACTIVE
    filing_date: Optional[date] = None
    amount: Optional[float] = Field(default=None, description="Only set when positive")
    court: Optional[str] = None
    case_number: Optional[str] = None
    description: str = ""


class CollectionItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    creditor_name: str = "Unknown Creditor"
    account_number: str = "N/A"
    amount: float = 0.0
    currency: str = "USD"
    status: CollectionStatus = CollectionStatus.OPEN
    reported_date: Optional[date] = None
    provider: Optional[str] = None
