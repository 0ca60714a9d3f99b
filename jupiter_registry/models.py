"""Pydantic v2 models for service descriptors.

``SourceConfig`` mirrors the ``source.yml`` file as written by service
owners. ``ServiceDescriptor`` is the reduced, immutable view handed to the
dispatcher and the provisioner.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from jupiter_registry.utils import print_summary_table


class Metadata(BaseModel):
    """The ``metadata`` block of a descriptor."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    programming_language: str = Field(default="", description="e.g. 'golang' or 'nodejs'")
    framework: str = Field(default="")
    module: str = Field(default="")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Treat an explicit YAML ``null`` like a missing key."""
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class SourceConfig(BaseModel):
    """A parsed ``source.yml`` file."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    source_id: str = Field(default="", description="Registry identifier, not used downstream")
    name: str = Field(default="")
    members: list[str] = Field(default_factory=list)
    metadata: Metadata = Field(default_factory=Metadata)

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class ServiceDescriptor(BaseModel):
    """Identifier-free view of a service definition."""

    model_config = ConfigDict(frozen=True)

    app_name: str
    programming_language: str
    framework: str
    module: str
    members: tuple[str, ...] = ()


def to_descriptor(config: SourceConfig) -> ServiceDescriptor:
    """Project a ``SourceConfig`` onto a ``ServiceDescriptor``, dropping ``source_id``."""
    return ServiceDescriptor(
        app_name=config.name,
        programming_language=config.metadata.programming_language,
        framework=config.metadata.framework,
        module=config.metadata.module,
        members=tuple(config.members),
    )


def print_descriptor(descriptor: ServiceDescriptor) -> None:
    """Print a summary table of *descriptor*."""
    print_summary_table(
        {
            "AppName": descriptor.app_name,
            "ProgrammingLanguage": descriptor.programming_language,
            "Framework": descriptor.framework,
            "Module": descriptor.module,
            "Members": ", ".join(descriptor.members) or "-",
        },
        title="Generator Source DTO",
    )
