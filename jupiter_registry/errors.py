"""Exception hierarchy for the service generator.

Every failure raised by the loader, the dispatcher or the provisioner derives
from :class:`GeneratorError` and carries the name of the step that failed so
the CLI can report it and exit non-zero.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generator failures."""

    step = "generate-source"

    def __init__(self, message: str) -> None:
        self.detail = message
        super().__init__(f"{self.step}: {message}")


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class NotExpectedFilenameError(GeneratorError):
    """The descriptor path does not end with the expected file name."""

    step = "load"

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"File must be named '{expected}', got: {actual}")


class FileReadError(GeneratorError):
    """The descriptor file could not be read."""

    step = "load"


class ParseError(GeneratorError):
    """The descriptor file is not valid YAML or does not match the schema."""

    step = "load"


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


class UnsupportedLanguageError(GeneratorError):
    """The descriptor declares a language with no processing pipeline."""

    step = "dispatch"

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"unsupported programming language: {language}")


# ---------------------------------------------------------------------------
# Provisioning
# ---------------------------------------------------------------------------


class BinaryUnavailableError(GeneratorError):
    """Neither a local generator binary nor the install fallback worked."""

    step = "resolve"


class GenerationFailedError(GeneratorError):
    """The generator binary failed to scaffold the service."""

    step = "generate"


class GeneratedFolderMissingError(GeneratorError):
    """Generation reported success but the output directory does not exist."""

    step = "push"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"generated folder not found: {path}")


class PushFailedError(GeneratorError):
    """A git command in the push sequence failed."""

    step = "push"

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        super().__init__(f"command '{command}' failed: {reason}")
