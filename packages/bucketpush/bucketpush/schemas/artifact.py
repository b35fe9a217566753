"""Artifact schema — the record a successful push produces."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Artifact(BaseModel):
    """Reference to a published object, passed on to later pipeline stages."""

    model_config = ConfigDict(frozen=True)

    source_url: str = Field(description="Canonical object URL without query parameters")
