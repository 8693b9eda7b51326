"""Entry point: python -m clientgen SPEC_FILE [-o client.py]

Reads an OpenAPI description (JSON or YAML), writes a Python client module.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .codegen import generate_client, write_client
from .config import DEFAULT_BACKOFF_UNIT, DEFAULT_MAX_ATTEMPTS, GeneratorConfig, configure_logging
from .errors import GenerationError, SpecLoadError
from .loader import load_document

EXIT_SUCCESS = 0
EXIT_FILE_NOT_FOUND = 1
EXIT_INVALID_SPEC = 2
EXIT_GENERATION_ERROR = 3


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="clientgen",
        description="Generate an async Python client from an OpenAPI description",
    )
    parser.add_argument("spec_file", type=Path, metavar="SPEC_FILE", help="OpenAPI description (JSON or YAML)")
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("client_gen.py"),
        help="Output file (default: %(default)s)",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help="Attempts per request in the generated client (default: %(default)s)",
    )
    parser.add_argument(
        "--backoff",
        type=float,
        default=DEFAULT_BACKOFF_UNIT,
        help="Linear backoff unit in seconds (default: %(default)s)",
    )
    parser.add_argument("--client-class", default="Client", help="Name of the generated class (default: %(default)s)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when two operations produce the same method name",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")

    if not args.spec_file.exists():
        print(f"Error: API description not found: {args.spec_file}", file=sys.stderr)
        return EXIT_FILE_NOT_FOUND

    try:
        config = GeneratorConfig(
            max_attempts=args.max_attempts,
            backoff_unit=args.backoff,
            client_class=args.client_class,
            strict_names=args.strict,
        )
        document = load_document(args.spec_file)
    except (SpecLoadError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INVALID_SPEC

    try:
        code = generate_client(document, config)
    except GenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_GENERATION_ERROR

    output_path = write_client(code, args.output)
    operation_count = sum(len(item.operations) for item in document.paths)
    print(f"Generated {output_path} ({len(document.schemas)} schemas, {operation_count} operations)")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
