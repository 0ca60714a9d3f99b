"""Remote repository creation and the initial push of generated code."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jupiter_registry.config import Config
from jupiter_registry.errors import GeneratedFolderMissingError, PushFailedError
from jupiter_registry.utils import format_command, print_warning, run_command


@dataclass(frozen=True)
class GitStep:
    """One git invocation in the push sequence."""

    args: tuple[str, ...]
    program: str = "git"

    @property
    def command(self) -> list[str]:
        return [self.program, *self.args]


async def create_remote_repository(app_name: str, config: Config) -> bool:
    """Create a private repository for *app_name* with the ``gh`` CLI.

    Failure is not fatal: the repository usually exists already from an
    earlier run. A warning that keeps the underlying reason is printed and
    ``False`` returned so the caller can carry on with the push.
    """
    cmd = ["gh", "repo", "create", config.repository_slug(app_name), "--private", "--confirm"]
    try:
        returncode, _, _ = await run_command(cmd)
    except OSError as exc:
        print_warning(
            f"  Note: could not run '{format_command(cmd)}': {exc} "
            "(repository not created, push may fail)"
        )
        return False

    if returncode != 0:
        print_warning(
            f"  Note: '{format_command(cmd)}' exited with status {returncode} "
            "(repo might already exist)"
        )
        return False
    return True


def build_remote_url(app_name: str, config: Config) -> str:
    """HTTPS remote for *app_name*, authenticated when a token is configured."""
    repo = f"{config.git_host}/{config.repository_slug(app_name)}.git"
    if config.token is not None and config.token.get_secret_value():
        return f"https://x-access-token:{config.token.get_secret_value()}@{repo}"
    return f"https://{repo}"


def build_push_steps(remote_url: str, config: Config) -> list[GitStep]:
    """Ordered git commands that publish a freshly generated directory."""
    branch = config.default_branch
    return [
        GitStep(("init",)),
        GitStep(("config", "user.email", config.bot_email)),
        GitStep(("config", "user.name", config.bot_name)),
        GitStep(("remote", "add", "origin", remote_url)),
        GitStep(("add", "-A")),
        GitStep(("commit", "-m", config.commit_message)),
        GitStep(("branch", "-M", branch)),
        GitStep(("push", "-u", "origin", branch, "--force")),
    ]


async def run_steps(steps: list[GitStep], cwd: Path) -> None:
    """Run *steps* in order inside *cwd*, stopping at the first failure.

    Raises:
        PushFailedError: Naming the failing command (credentials masked).
    """
    for step in steps:
        cmd = step.command
        try:
            returncode, _, _ = await run_command(cmd, cwd=cwd)
        except OSError as exc:
            raise PushFailedError(format_command(cmd), str(exc)) from exc
        if returncode != 0:
            raise PushFailedError(format_command(cmd), f"exit status {returncode}")


async def push_to_repository(app_name: str, config: Config) -> None:
    """Initialise a repository in the generated directory and force-push it.

    Raises:
        GeneratedFolderMissingError: The generator did not create ``<work_dir>/<app_name>``.
        PushFailedError: A git command failed.
    """
    repo_dir = config.output_path(app_name)
    if not repo_dir.is_dir():
        raise GeneratedFolderMissingError(str(repo_dir))

    steps = build_push_steps(build_remote_url(app_name, config), config)
    await run_steps(steps, repo_dir)
