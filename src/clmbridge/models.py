"""Value objects exchanged with the host and returned to callers.

All models are created per call and discarded once the operation that
produced them completes. Envelopes carry CRM values as strings only.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clmbridge.host.base import Record

SLIDE_ARCHIVE_SUFFIX = ".zip"


def normalize_slide_name(slide: str) -> str:
    """Append the archive suffix unless the name already ends with it.

    Idempotent: normalize_slide_name(normalize_slide_name(x)) == normalize_slide_name(x)
    """
    return slide if slide.endswith(SLIDE_ARCHIVE_SUFFIX) else f"{slide}{SLIDE_ARCHIVE_SUFFIX}"


def as_text(value: Any) -> str:
    """Coerce a CRM field value to a string, mapping None to ''."""
    return "" if value is None else str(value)


# =============================================================================
# Queries
# =============================================================================


class QueryRequest(BaseModel):
    """Structured query against one CRM collection.

    The filter is forwarded verbatim; callers own its well-formedness.
    """

    collection: str = Field(..., min_length=1)
    fields: List[str] = Field(default_factory=list)
    filter: str = Field(..., min_length=1)
    sort: List[str] = Field(default_factory=list)
    limit: str = "1"

    @field_validator("limit", mode="before")
    @classmethod
    def limit_as_string(cls, v: Union[str, int]) -> str:
        """Host APIs take the row limit as text."""
        return str(v)


class QueryStatus(str, Enum):
    """How a query completed."""

    ROWS = "rows"
    EMPTY = "empty"
    ERROR = "error"


class QueryOutcome(BaseModel):
    """Result of a query, keeping "no rows" and "query failed" apart."""

    status: QueryStatus
    rows: List[Record] = Field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def from_rows(cls, rows: Optional[List[Record]]) -> "QueryOutcome":
        rows = list(rows or [])
        return cls(status=QueryStatus.ROWS if rows else QueryStatus.EMPTY, rows=rows)

    @classmethod
    def failed(cls, message: str) -> "QueryOutcome":
        return cls(status=QueryStatus.ERROR, error=message)

    @property
    def ok(self) -> bool:
        return self.status != QueryStatus.ERROR


# =============================================================================
# Navigation
# =============================================================================


class NavigationTarget(BaseModel):
    """A concrete slide to navigate to.

    presentation None means the current presentation.
    """

    slide: str = Field(..., min_length=1)
    presentation: Optional[str] = None

    @field_validator("slide")
    @classmethod
    def normalize_slide(cls, v: str) -> str:
        return normalize_slide_name(v)

    @field_validator("presentation")
    @classmethod
    def blank_presentation_is_current(cls, v: Optional[str]) -> Optional[str]:
        return v or None


# =============================================================================
# Clickstream
# =============================================================================


class TrackingObject(BaseModel):
    """Caller-supplied description of an interaction."""

    id: str
    type: str = ""
    description: str = ""

    @field_validator("id", "type", "description", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return as_text(v)


class ClickstreamEvent(BaseModel):
    """Call clickstream record submitted to the CRM."""

    element_id: str = Field(..., alias="Track_Element_Id_vod__c")
    element_type: str = Field(..., alias="Track_Element_Type_vod__c")
    element_description: str = Field("", alias="Track_Element_Description_vod__c")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_tracking(cls, tracking: TrackingObject) -> "ClickstreamEvent":
        return cls(
            element_id=tracking.id,
            element_type=tracking.type,
            element_description=tracking.description,
        )

    def to_payload(self) -> Dict[str, str]:
        """Serialize with CRM field names."""
        return self.model_dump(by_alias=True)


# =============================================================================
# Result envelopes
# =============================================================================


class BrandInfo(BaseModel):
    """Envelope returned by get_brand().

    On failure every domain field is '' and message explains why.
    """

    success: bool
    message: str
    product: str = ""
    product_id: str = Field("", alias="productId")
    record_id: str = Field("", alias="recordId")
    key_messages: str = Field("", alias="keyMessages")
    key_message_codes: str = Field("", alias="keyMessageCodes")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def failure(cls, message: str) -> "BrandInfo":
        return cls(success=False, message=message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase shape consumed by the presentation layer."""
        return self.model_dump(by_alias=True)


class KeyMessageData(BaseModel):
    """Envelope returned by get_key_message_data()."""

    success: bool
    message: str
    record_id: str = Field("", alias="Id")
    type: str = Field("", alias="Type__c")
    value: str = Field("", alias="Value__c")
    external_id: str = Field("", alias="External_Id__c")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def failure(cls, message: str) -> "KeyMessageData":
        return cls(success=False, message=message)

    @classmethod
    def from_record(cls, record: Record) -> "KeyMessageData":
        return cls(
            success=True,
            message="Success",
            record_id=as_text(record.get("Id")),
            type=as_text(record.get("Type__c")),
            value=as_text(record.get("Value__c")),
            external_id=as_text(record.get("External_Id__c")),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat dict keyed by CRM field names."""
        return self.model_dump(by_alias=True)
