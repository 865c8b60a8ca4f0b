# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Command line entry point: quote a JSON request from a file or stdin.

Usage:
    python -m quotation_core request.json
    cat request.json | quotation-core --request-id batch-42
"""

import argparse
import json
import logging
import sys
import uuid
from collections.abc import Sequence

from .api.handlers import handle_create_quote
from .core.logging_utils import configure_logging

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quotation-core",
        description="Compute an insurance premium quote from a JSON request",
    )
    parser.add_argument(
        "request",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Path to the JSON request (default: stdin)",
    )
    parser.add_argument(
        "--request-id",
        default=None,
        help="Identifier echoed in the response and logs (default: random UUID)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--indent", type=int, default=2, help="JSON indentation of the output"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code."""
    args = build_parser().parse_args(argv)
    configure_logging()
    if args.log_level:
        logging.getLogger().setLevel(args.log_level)

    with args.request as stream:
        raw_body = stream.read()

    response = handle_create_quote(raw_body, request_id=args.request_id or str(uuid.uuid4()))
    print(json.dumps(response.body, indent=args.indent))

    if response.is_success:
        return EXIT_OK
    if response.status_code < 500:
        return EXIT_REJECTED
    return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
