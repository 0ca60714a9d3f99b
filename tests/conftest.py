"""Shared pytest fixtures for the jupiter-registry test suite.

Provides reusable fixtures for:
- Service directories containing a ``source.yml``
- A ``Config`` rooted in a temporary work directory
- Mock subprocess helpers that record every command instead of running it
"""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from jupiter_registry.config import Config


SAMPLE_SOURCE_YML = textwrap.dedent(
    """\
    source_id: 7f1c2a9e-0001
    name: sample-svc
    members:
      - alice
      - bob
      - carol
    metadata:
      programming_language: golang
      framework: gin
      module: payments
    """
)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Directory services are generated into."""
    directory = tmp_path / "work"
    directory.mkdir()
    return directory


@pytest.fixture
def make_service_dir(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing *content* to ``<tmp>/services/<name>/source.yml``."""

    def factory(content: str = SAMPLE_SOURCE_YML, name: str = "sample") -> Path:
        service_dir = tmp_path / "services" / name
        service_dir.mkdir(parents=True, exist_ok=True)
        (service_dir / "source.yml").write_text(content, encoding="utf-8")
        return service_dir

    return factory


@pytest.fixture
def service_dir(make_service_dir) -> Path:
    """Service directory holding the sample ``golang`` descriptor."""
    return make_service_dir()


@pytest.fixture
def config(work_dir: Path) -> Config:
    """Config rooted in the temporary work directory, without a token."""
    return Config(work_dir=work_dir)


# ---------------------------------------------------------------------------
# Mock subprocess helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


class FakeExec:
    """Stand-in for ``asyncio.create_subprocess_exec`` that records commands.

    Every command succeeds unless it matches a prefix registered with
    :meth:`fail` or its program was registered with :meth:`missing`.
    ``on_call`` hooks run before the mock process is returned, which lets a
    test simulate side effects such as the generator creating its output.
    """

    def __init__(self, proc_factory: Callable[..., Any]) -> None:
        self._proc_factory = proc_factory
        self.calls: list[tuple[list[str], str | None]] = []
        self._failures: list[tuple[tuple[str, ...], int]] = []
        self._missing: set[str] = set()
        self.on_call: list[Callable[[list[str], str | None], None]] = []

    def fail(self, *prefix: str, returncode: int = 1) -> None:
        self._failures.append((prefix, returncode))

    def missing(self, program: str) -> None:
        self._missing.add(program)

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _ in self.calls]

    def commands_for(self, program: str) -> list[list[str]]:
        return [cmd for cmd in self.commands if cmd[0] == program]

    async def __call__(self, *cmd: str, **kwargs: Any) -> Any:
        command = list(cmd)
        cwd = kwargs.get("cwd")
        self.calls.append((command, cwd))
        if command[0] in self._missing:
            raise FileNotFoundError(2, "No such file or directory", command[0])
        for hook in self.on_call:
            hook(command, cwd)

        returncode = 0
        for prefix, code in self._failures:
            if tuple(command[: len(prefix)]) == prefix:
                returncode = code
        return self._proc_factory(returncode=returncode)


@pytest.fixture
def fake_exec(mock_subprocess):
    """Patch ``asyncio.create_subprocess_exec`` with a recording :class:`FakeExec`."""
    fake = FakeExec(mock_subprocess)
    with patch("asyncio.create_subprocess_exec", new=fake):
        yield fake


@pytest.fixture
def generator_creates_output():
    """Hook for :class:`FakeExec` that mimics ``<bin> generate app --name X``.

    Creates ``<cwd>/<name>`` the way the real generator does.
    """

    def hook(command: list[str], cwd: str | None) -> None:
        if command[1:3] == ["generate", "app"]:
            name = command[command.index("--name") + 1]
            Path(cwd or ".", name).mkdir(parents=True, exist_ok=True)

    return hook


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep Rich from wrapping long messages so assertions can match them."""
    from jupiter_registry.utils import console

    monkeypatch.setattr(console, "width", 200)
