"""Go service provisioning: resolve, generate, create repo, push."""

from __future__ import annotations

from enum import Enum

from jupiter_registry.config import Config
from jupiter_registry.errors import GenerationFailedError
from jupiter_registry.models import ServiceDescriptor
from jupiter_registry.provisioner.binary import resolve_generator_binary
from jupiter_registry.provisioner.repository import create_remote_repository, push_to_repository
from jupiter_registry.utils import console, format_command, print_step, run_command


class ProvisionStep(str, Enum):
    """States of the provisioning chain, in execution order."""

    RESOLVE = "resolve"
    GENERATE = "generate"
    CREATE_REPO = "create-repo"
    PUSH = "push"


class GolangProvisioner:
    """Scaffold a Go service with the generator and publish it.

    Steps run strictly in order. Any failure except repository creation
    raises and stops the chain; partially generated output is left in place.

    Attributes:
        config: Run configuration, including the push token.
        completed: Steps that finished, in order.
        repository_created: Whether ``gh repo create`` succeeded.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self.completed: list[ProvisionStep] = []
        self.repository_created: bool | None = None

    def generate_command(self, binary: str, app_name: str) -> list[str]:
        """Arguments for ``<binary> generate app`` scaffolding *app_name*."""
        return [
            binary,
            "generate",
            "app",
            "--name",
            app_name,
            "--module",
            self.config.module_path(app_name),
            "--skip_init=true",
        ]

    async def provision(self, descriptor: ServiceDescriptor) -> None:
        """Run Resolve -> Generate -> CreateRepo -> Push for *descriptor*."""
        app_name = descriptor.app_name
        console.print()
        print_step("Processing Golang service...")

        print_step("Finding generator CLI...")
        binary = await resolve_generator_binary(self.config)
        self.completed.append(ProvisionStep.RESOLVE)

        print_step(f"Generating app: {app_name}")
        await self._generate(binary, app_name)
        self.completed.append(ProvisionStep.GENERATE)

        print_step(f"Creating GitHub repository: {self.config.repository_slug(app_name)}")
        self.repository_created = await create_remote_repository(app_name, self.config)
        self.completed.append(ProvisionStep.CREATE_REPO)

        print_step("Pushing code to repository...")
        await push_to_repository(app_name, self.config)
        self.completed.append(ProvisionStep.PUSH)

    async def _generate(self, binary: str, app_name: str) -> None:
        cmd = self.generate_command(binary, app_name)
        try:
            returncode, _, _ = await run_command(cmd, cwd=self.config.work_dir)
        except OSError as exc:
            raise GenerationFailedError(
                f"failed to generate app: could not start '{format_command(cmd)}': {exc}"
            ) from exc
        if returncode != 0:
            raise GenerationFailedError(
                f"failed to generate app: '{format_command(cmd)}' exited with status {returncode}"
            )
