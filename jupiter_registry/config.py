"""Generator configuration.

Typed settings for a generator run. Values that used to be read from the
process environment ad hoc (the push token in particular) are resolved once
by :meth:`Config.from_env` and passed explicitly into the provisioner.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, SecretStr

# Push token variables, in precedence order.
TOKEN_ENV_VARS: tuple[str, ...] = ("GH_TOKEN", "GITHUB_TOKEN")


class Config(BaseModel):
    """Settings for one generator run."""

    org: str = Field(default="tqhuy-dev", min_length=1, description="Owner of generated repositories")
    git_host: str = Field(default="github.com")
    tool_name: str = Field(default="uranus", min_length=1, description="Generator binary base name")
    install_package: str = Field(
        default="github.com/tqhuy-dev/xgen-uranus@latest",
        description="Target of the `go install` fallback",
    )
    dist_dir: str = Field(default="dist", description="Directory holding prebuilt generator binaries")
    work_dir: Path = Field(default=Path("."))
    descriptor_filename: str = Field(default="source.yml")

    bot_name: str = Field(default="github-actions[bot]")
    bot_email: str = Field(default="github-actions[bot]@users.noreply.github.com")
    commit_message: str = Field(default="Initial commit from jupiter-registry")
    default_branch: str = Field(default="main")

    token: SecretStr | None = Field(default=None, description="Token used to authenticate the push")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def dist_path(self) -> Path:
        """Directory searched for a prebuilt generator binary."""
        return self.work_dir / self.dist_dir

    def module_path(self, app_name: str) -> str:
        """Go module path for a generated service, e.g. ``github.com/org/app``."""
        return f"{self.git_host}/{self.org}/{app_name}"

    def repository_slug(self, app_name: str) -> str:
        """``<owner>/<repo>`` name passed to the repository-hosting CLI."""
        return f"{self.org}/{app_name}"

    def output_path(self, app_name: str) -> Path:
        """Directory the generator writes the service into."""
        return self.work_dir / app_name

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GH_TOKEN, GITHUB_TOKEN (first non-empty one wins),
            JUPITER_ORG, JUPITER_DIST_DIR, JUPITER_WORK_DIR.

        Keyword *overrides* that are not ``None`` take precedence over the
        environment.
        """
        env = os.environ if environ is None else environ

        kwargs: dict = {}
        token = resolve_token(env)
        if token:
            kwargs["token"] = SecretStr(token)
        if env.get("JUPITER_ORG"):
            kwargs["org"] = env["JUPITER_ORG"]
        if env.get("JUPITER_DIST_DIR"):
            kwargs["dist_dir"] = env["JUPITER_DIST_DIR"]
        if env.get("JUPITER_WORK_DIR"):
            kwargs["work_dir"] = Path(env["JUPITER_WORK_DIR"])

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**kwargs)


def resolve_token(environ: Mapping[str, str]) -> str | None:
    """Return the first non-empty token from :data:`TOKEN_ENV_VARS`."""
    for name in TOKEN_ENV_VARS:
        value = environ.get(name)
        if value:
            return value
    return None
