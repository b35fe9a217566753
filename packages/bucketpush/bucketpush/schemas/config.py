"""Publisher configuration schema."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PublisherConfig(BaseModel):
    """The three fields a push is configured with. Immutable once bound."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    source: str = Field(description="Path to the local artifact, relative to the source directory")
    name: str = Field(description="Object key to create in the bucket")
    bucket: str = Field(description="Destination bucket")
