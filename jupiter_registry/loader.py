"""Load and validate a service's ``source.yml`` descriptor."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from jupiter_registry.errors import FileReadError, NotExpectedFilenameError, ParseError
from jupiter_registry.models import SourceConfig

DESCRIPTOR_FILENAME = "source.yml"


def descriptor_path(service_path: str | Path, filename: str = DESCRIPTOR_FILENAME) -> Path:
    """Path of the descriptor file inside a service directory."""
    return Path(service_path) / filename


def load_source_config(
    service_path: str | Path,
    filename: str = DESCRIPTOR_FILENAME,
) -> SourceConfig:
    """Read and parse the descriptor in *service_path*.

    Args:
        service_path: Directory expected to contain the descriptor.
        filename: Expected descriptor file name.

    Returns:
        The parsed ``SourceConfig``. Unknown keys are ignored; missing keys
        fall back to empty values.

    Raises:
        NotExpectedFilenameError: The joined path does not end in *filename*.
        FileReadError: The file is missing or unreadable.
        ParseError: The content is not YAML or does not match the schema.
    """
    source_file = descriptor_path(service_path, filename)
    if source_file.name != filename:
        raise NotExpectedFilenameError(filename, source_file.name)

    try:
        raw = source_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Error parsing YAML in {source_file}: not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise FileReadError(f"Error reading file {source_file}: {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ParseError(f"Error parsing YAML in {source_file}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParseError(
            f"Error parsing YAML in {source_file}: expected a mapping at the top level, "
            f"got {type(data).__name__}"
        )

    try:
        return SourceConfig.model_validate(data)
    except ValidationError as exc:
        raise ParseError(f"Invalid descriptor {source_file}: {exc}") from exc
