"""Service provisioning for generated services.

Key pieces:
    resolve_generator_binary - local prebuilt binary or ``go install`` fallback
    create_remote_repository - ``gh repo create`` (failure tolerated)
    push_to_repository       - git init/commit/force-push of generated output
    GolangProvisioner        - Resolve -> Generate -> CreateRepo -> Push chain
"""

from .binary import binary_name, go_arch, go_os, resolve_generator_binary
from .golang import GolangProvisioner, ProvisionStep
from .repository import (
    GitStep,
    build_push_steps,
    build_remote_url,
    create_remote_repository,
    push_to_repository,
)

__all__ = [
    # Binary resolution
    "binary_name",
    "go_arch",
    "go_os",
    "resolve_generator_binary",
    # Repository
    "GitStep",
    "build_push_steps",
    "build_remote_url",
    "create_remote_repository",
    "push_to_repository",
    # Pipelines
    "GolangProvisioner",
    "ProvisionStep",
]
