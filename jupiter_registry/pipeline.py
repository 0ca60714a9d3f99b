"""Service generator entry point.

Loads ``<service-dir>/source.yml``, derives the service descriptor and hands
it to the pipeline for its programming language:

    Load -> Map -> Dispatch -> Provision

Usage::

    jupiter-generate services/sample
    python -m jupiter_registry services/sample --org my-org
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from jupiter_registry.config import Config
from jupiter_registry.dispatcher import process_service
from jupiter_registry.errors import GeneratorError
from jupiter_registry.loader import load_source_config
from jupiter_registry.models import ServiceDescriptor, print_descriptor, to_descriptor
from jupiter_registry.utils import console, print_error, print_success

USAGE = "Usage: jupiter-generate <path-to-service-folder>"
EXAMPLE = "Example: jupiter-generate sources-service/sample"


async def run(service_path: str | Path, config: Config) -> ServiceDescriptor:
    """Generate and publish the service described in *service_path*.

    Returns:
        The descriptor that was processed.

    Raises:
        GeneratorError: Any load, dispatch or provisioning failure.
    """
    source = load_source_config(service_path, config.descriptor_filename)
    descriptor = to_descriptor(source)
    print_descriptor(descriptor)
    await process_service(descriptor, config)
    return descriptor


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``jupiter-generate``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="jupiter-generate",
        description="Generate a service from its source.yml and push it to a new repository",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Environment:\n"
            "  GH_TOKEN / GITHUB_TOKEN   token used to push (GH_TOKEN wins)\n"
            "  JUPITER_ORG               repository owner (default: tqhuy-dev)\n"
        ),
    )
    parser.add_argument(
        "service_path",
        nargs="?",
        help="Directory containing the service's source.yml",
    )
    parser.add_argument("--org", default=None, help="Owner of the generated repository")
    parser.add_argument(
        "--dist-dir",
        default=None,
        help="Directory holding prebuilt generator binaries (default: dist)",
    )
    parser.add_argument(
        "--work-dir",
        type=Path,
        default=None,
        help="Directory the service is generated into (default: current directory)",
    )

    args = parser.parse_args(argv)

    if args.service_path is None:
        console.print(USAGE)
        console.print(EXAMPLE)
        sys.exit(1)

    config = Config.from_env(org=args.org, dist_dir=args.dist_dir, work_dir=args.work_dir)

    try:
        asyncio.run(run(args.service_path, config))
    except GeneratorError as exc:
        print_error(f"Error processing service: {exc}")
        sys.exit(1)

    print_success("Service generated and pushed successfully!")


if __name__ == "__main__":
    main()
