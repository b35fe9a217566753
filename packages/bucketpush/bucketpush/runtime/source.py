"""Source location — the build output directory a push reads from."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class SourceLocation(BaseModel):
    """Base directory of the build output, supplied by the host pipeline."""

    path: str = Field(default=".", description="Directory the artifact path is resolved against")

    def resolve(self, relative: str) -> Path:
        """Join ``relative`` onto the base directory.

        A leading slash on ``relative`` does not escape the base directory.
        """
        return Path(self.path) / relative.lstrip("/")
