"""Launch registry (SpaceX-API v4) response schemas."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field

from launchsync.domain.model import DatePrecision  # noqa: TC001

type DocumentId = str


class SpaceXBaseModel(BaseModel):
    # Registry documents carry many fields this tool never reads.
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LaunchDocument(SpaceXBaseModel):
    id: DocumentId
    name: str
    flight_number: int
    upcoming: bool
    auto_update: bool = False
    date_utc: datetime | None = None
    date_precision: DatePrecision | None = None
    launchpad: DocumentId | None = None
    tbd: bool | None = None


class LaunchQueryResponse(SpaceXBaseModel):
    docs: list[LaunchDocument] = Field(default_factory=list["LaunchDocument"])
    total_docs: int | None = Field(default=None, alias="totalDocs")


class LaunchpadDocument(SpaceXBaseModel):
    id: DocumentId
    name: str
    timezone: str
    full_name: str | None = None


class LaunchPatch(BaseModel):
    """Body of ``PATCH /launches/{id}``."""

    model_config = ConfigDict(extra="forbid")

    flight_number: int
    date_unix: int
    date_utc: str
    date_local: str
    date_precision: DatePrecision
    launchpad: DocumentId
    tbd: bool
