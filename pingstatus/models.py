from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Status(str, Enum):
    """
    Availability of a monitored service.
    """

    UP = "up"
    DOWN = "down"
    UNKNOWN = "unknown"


class ServiceDescriptor(BaseModel):
    """
    A service to check, as listed in the services file.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: Optional[str] = Field(None, description="Display name of the service")
    url: str = Field(..., min_length=1, description="The monitored URL")
    timeout_ms: int = Field(
        10000, alias="timeout", gt=0, description="Request timeout in milliseconds"
    )
    keep_history: int = Field(
        100, alias="keepHistory", gt=0, description="Number of samples to retain"
    )


class ProbeOutcome(BaseModel):
    """
    Result of a single request against a monitored URL.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    status: Status
    status_code: Optional[int] = Field(None, alias="statusCode")
    response_time_ms: Optional[int] = Field(None, alias="responseTimeMs")


class Sample(BaseModel):
    """
    Sample stands for a timestamped probe outcome kept in the history.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    ts: str = Field(..., description="ISO-8601 timestamp of the check")
    status: Status
    status_code: Optional[int] = Field(
        None, alias="statusCode", description="HTTP status code returned by upstream"
    )
    response_time_ms: Optional[int] = Field(
        None, alias="responseTimeMs", description="Round trip time in milliseconds"
    )


class ServiceRecord(BaseModel):
    """
    Persisted state of one service: the latest result mirrored at the top level
    and the retained history, newest sample first.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    url: str = Field(..., min_length=1, description="The monitored URL")
    status: Status = Status.UNKNOWN
    status_code: Optional[int] = Field(None, alias="statusCode")
    response_time_ms: Optional[int] = Field(None, alias="responseTimeMs")
    last_checked: Optional[str] = Field(None, alias="lastChecked")
    history: List[Sample] = Field(default_factory=list)
    uptime_percent: int = Field(0, alias="uptimePercent", ge=0, le=100)

    @field_validator("history", mode="before")
    @classmethod
    def _missing_history(cls, value):
        # Older documents may carry `"history": null`.
        return [] if value is None else value


class StatusDocument(BaseModel):
    """
    The status file read by the dashboard, rewritten on every run.
    """

    model_config = ConfigDict(populate_by_name=True)

    updated_at: Optional[str] = Field(None, alias="updatedAt")
    services: List[ServiceRecord] = Field(default_factory=list)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
