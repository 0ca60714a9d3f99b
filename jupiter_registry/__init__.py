"""jupiter-registry service generator.

Reads a service's ``source.yml``, scaffolds the service with the generator
binary for its language and publishes it to a new repository.

Quick usage::

    from jupiter_registry import Config, run

    await run("services/sample", Config.from_env())
"""

from jupiter_registry.config import Config
from jupiter_registry.errors import GeneratorError
from jupiter_registry.models import ServiceDescriptor, SourceConfig, to_descriptor
from jupiter_registry.pipeline import run

__all__ = [
    "Config",
    "GeneratorError",
    "ServiceDescriptor",
    "SourceConfig",
    "run",
    "to_descriptor",
]
