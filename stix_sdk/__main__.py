"""Command line checking and formatting STIX 2.1 JSON documents.

Usage:
    python -m stix_sdk check FILE
    python -m stix_sdk format FILE
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from stix_sdk.codec import StixCodec
from stix_sdk.exceptions import ConfigError, StixDecodeError
from stix_sdk.models import Bundle
from stix_sdk.settings import StixSdkSettings, configure_logging

logger = logging.getLogger(__name__)


def _check(codec: StixCodec, text: str) -> str:
    obj = codec.loads(text)
    count = 1
    if isinstance(obj, Bundle):
        count = len(codec.decode_bundle_objects(obj))
    return f"OK: {obj.id} ({count} object(s))"


def _format(codec: StixCodec, text: str) -> str:
    return codec.dumps(codec.loads(text))


def main(argv: list[str] | None = None) -> int:
    """Run the command line, return the exit status."""
    parser = argparse.ArgumentParser(
        prog="stix_sdk", description="Check or format STIX 2.1 JSON documents."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    check_parser = subparsers.add_parser(
        "check", help="Decode a document, bundle objects included."
    )
    check_parser.add_argument("file", type=Path)
    format_parser = subparsers.add_parser(
        "format", help="Re-encode a document with the configured printer options."
    )
    format_parser.add_argument("file", type=Path)
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    try:
        settings = StixSdkSettings()
    except ConfigError as err:
        print(f"error: {err}", file=sys.stderr)
        return 2
    configure_logging(settings.log_level)

    codec = StixCodec(settings)
    command = _check if args.command == "check" else _format
    try:
        print(command(codec, args.file.read_text(encoding="utf-8")))
    except (OSError, json.JSONDecodeError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 2
    except StixDecodeError as err:
        logger.debug("Decoding %s failed.", args.file, exc_info=True)
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
