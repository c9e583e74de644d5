from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from app.core.config import settings
from app.models.base import OwnedRecord, Tags, _utcnow
from app.utils.validation import RecordValidationError, decode_file_data


class DocumentType(str, Enum):
    AADHAAR = "Aadhaar Card"
    PAN = "PAN Card"
    PASSPORT = "Passport"
    DRIVING_LICENSE = "Driving License"
    VOTER_ID = "Voter ID"
    OTHER = "Other"


class DocumentBase(BaseModel):
    """Base document schema."""
    document_type: DocumentType
    custom_type: Optional[str] = None
    additional_info: Optional[str] = None
    file_name: str = Field(..., min_length=1, max_length=255)
    file_data: str  # base64, opaque to the store
    tags: Tags = []


class DocumentCreate(DocumentBase):
    """Document creation / replacement schema."""

    @model_validator(mode="after")
    def check_document(self):
        if self.document_type == DocumentType.OTHER:
            if not (self.custom_type and self.custom_type.strip()):
                raise RecordValidationError("Custom type is required for Other documents")
        else:
            self.custom_type = None
        decode_file_data(self.file_data, settings.MAX_FILE_SIZE)
        return self


class DocumentInDB(OwnedRecord, DocumentBase):
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
