"""Publisher substrate — the capability interface a host pipeline depends on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from bucketpush.runtime.inputs import PushInputs
from bucketpush.schemas.docs import Documentation


class BasePublisher(ABC):
    """Abstract base class for publish steps.

    A host binds configuration once with ``config_set``, may ask for
    ``documentation``, and then calls ``push`` with the inputs of each run.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name identifying this publisher."""

    @property
    @abstractmethod
    def version(self) -> str:
        """Semantic version of this publisher."""

    @property
    @abstractmethod
    def config_schema(self) -> type[BaseModel]:
        """Pydantic model class of the configuration."""

    @property
    @abstractmethod
    def output_schema(self) -> type[BaseModel]:
        """Pydantic model class of the value ``push`` returns."""

    @abstractmethod
    def config_set(self, raw: BaseModel | dict[str, Any]) -> BaseModel:
        """Validate and bind configuration. Returns the bound config."""

    @abstractmethod
    def documentation(self) -> Documentation:
        """Describe the publisher for the host's docs and help output."""

    @abstractmethod
    def push(self, inputs: PushInputs) -> BaseModel:
        """Publish the configured artifact. Returns an output_schema instance."""
