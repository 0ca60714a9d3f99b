"""Route a service descriptor to the pipeline for its language."""

from __future__ import annotations

from jupiter_registry.config import Config
from jupiter_registry.errors import UnsupportedLanguageError
from jupiter_registry.models import ServiceDescriptor
from jupiter_registry.provisioner import GolangProvisioner
from jupiter_registry.utils import print_warning

GOLANG = "golang"
NODEJS = "nodejs"


async def process_nodejs(descriptor: ServiceDescriptor) -> None:
    # TODO: scaffold NestJS / Express services once a Node generator exists.
    print_warning(f"NodeJS processing not implemented yet, skipping {descriptor.app_name}")


async def process_service(descriptor: ServiceDescriptor, config: Config) -> None:
    """Run the pipeline matching ``descriptor.programming_language``.

    The match is exact and case-sensitive.

    Raises:
        UnsupportedLanguageError: For any language other than ``golang`` or ``nodejs``.
    """
    language = descriptor.programming_language
    if language == GOLANG:
        await GolangProvisioner(config).provision(descriptor)
    elif language == NODEJS:
        await process_nodejs(descriptor)
    else:
        raise UnsupportedLanguageError(language)
