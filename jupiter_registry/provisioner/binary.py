"""Locate the generator binary for the current platform.

Prebuilt binaries are shipped as ``<tool>-<os>-<arch>`` (Go's GOOS/GOARCH
naming) in the dist directory. When none matches the running platform the
tool is installed with ``go install`` and expected on ``PATH`` afterwards.
"""

from __future__ import annotations

import platform
import sys

from rich.markup import escape

from jupiter_registry.config import Config
from jupiter_registry.errors import BinaryUnavailableError
from jupiter_registry.utils import console, format_command, print_warning, run_command

_OS_NAMES: dict[str, str] = {
    "linux": "linux",
    "darwin": "darwin",
    "win32": "windows",
    "cygwin": "windows",
    "freebsd": "freebsd",
}

_ARCH_NAMES: dict[str, str] = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "armv7l": "arm",
    "armv6l": "arm",
}


def go_os(system: str | None = None) -> str:
    """Return the GOOS name for *system* (defaults to ``sys.platform``)."""
    system = (system or sys.platform).lower()
    for prefix, name in _OS_NAMES.items():
        if system.startswith(prefix):
            return name
    return system


def go_arch(machine: str | None = None) -> str:
    """Return the GOARCH name for *machine* (defaults to ``platform.machine()``)."""
    machine = (machine or platform.machine()).lower()
    return _ARCH_NAMES.get(machine, machine)


def binary_name(tool: str, os_name: str | None = None, arch: str | None = None) -> str:
    """Expected prebuilt binary name, e.g. ``uranus-linux-amd64``."""
    return f"{tool}-{os_name or go_os()}-{arch or go_arch()}"


async def resolve_generator_binary(
    config: Config,
    os_name: str | None = None,
    arch: str | None = None,
) -> str:
    """Return the command used to invoke the generator.

    Args:
        config: Run configuration (tool name, dist directory, install target).
        os_name: GOOS override, detected when omitted.
        arch: GOARCH override, detected when omitted.

    Returns:
        The path of the local binary, or the bare tool name after a
        successful ``go install``.

    Raises:
        BinaryUnavailableError: The local binary cannot be made executable or
            the install fallback failed.
    """
    os_name = os_name or go_os()
    arch = arch or go_arch()
    binary_path = config.dist_path / binary_name(config.tool_name, os_name, arch)

    if binary_path.is_file():
        try:
            binary_path.chmod(0o755)
        except OSError as exc:
            raise BinaryUnavailableError(f"failed to chmod binary {binary_path}: {exc}") from exc
        console.print(f"  Found local binary: [bold]{escape(str(binary_path))}[/bold]")
        return str(binary_path.resolve())

    print_warning(f"Local binary not found for {os_name}-{arch}, using go install...")
    cmd = ["go", "install", config.install_package]
    try:
        returncode, _, _ = await run_command(cmd)
    except OSError as exc:
        raise BinaryUnavailableError(
            f"failed to install {config.tool_name} CLI: {format_command(cmd)}: {exc}"
        ) from exc
    if returncode != 0:
        raise BinaryUnavailableError(
            f"failed to install {config.tool_name} CLI: "
            f"'{format_command(cmd)}' exited with status {returncode}"
        )

    return config.tool_name

