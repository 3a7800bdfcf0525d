import argparse
import logging
import sys
import tomllib
from typing import List, Optional

from rootanchors.constants import DEFAULT_FORMAT
from rootanchors.decoder import decode_file
from rootanchors.embedded import embedded_document
from rootanchors.exceptions import RootAnchorsError
from rootanchors.projector import project
from rootanchors.render import RENDERERS, render
from rootanchors.utils import parse_timestamp

logger = logging.getLogger(__name__)


def timestamp(value: str):
    try:
        return parse_timestamp(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def load_config(filename: Optional[str], section: str) -> dict:
    if not filename:
        return {}
    with open(filename, "rb") as fp:
        config = tomllib.load(fp)
    return config.get(section, {})


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="DNSSEC Root Trust Anchors")
    parser.add_argument("--config-file", dest="config_file", type=str)
    parser.add_argument(
        "--config-section", dest="config_section", type=str, default="default"
    )
    parser.add_argument(
        "--input",
        metavar="filename",
        help="Trust anchor XML document (default embedded copy)",
    )
    parser.add_argument(
        "--valid",
        action="store_true",
        default=None,
        help="Only include currently valid trust anchors",
    )
    parser.add_argument(
        "--at",
        metavar="datetime",
        type=timestamp,
        help="Evaluate validity at this time instead of now",
    )
    parser.add_argument(
        "--format",
        choices=sorted(RENDERERS),
        help=f"Output format (default {DEFAULT_FORMAT})",
    )
    parser.add_argument("--output", metavar="filename", help="Output filename")
    parser.add_argument("--debug", action="store_true", help="Enable debugging")
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        config = load_config(args.config_file, args.config_section)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 1

    input_filename = args.input or config.get("input")
    valid = args.valid if args.valid is not None else config.get("valid", False)
    fmt = args.format or config.get("format", DEFAULT_FORMAT)
    output = args.output or config.get("output")

    instant = args.at
    if instant is None and (at := config.get("at")):
        try:
            instant = timestamp(at) if isinstance(at, str) else at
        except argparse.ArgumentTypeError as exc:
            logger.error("Invalid configuration value for at: %s", exc)
            return 1

    try:
        if input_filename:
            logger.debug("Reading trust anchors from %s", input_filename)
            document = decode_file(input_filename)
        else:
            logger.debug("Using embedded trust anchors")
            document = embedded_document()
        records = project(document, instant=instant, filter_to_valid=valid)
        result = render(records, fmt)
    except (RootAnchorsError, OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    logger.info(
        "Extracted %d of %d trust anchors for zone %s",
        len(records),
        len(document.digests),
        document.zone,
    )

    if output:
        try:
            with open(output, "wt") as fp:
                fp.write(result)
        except OSError as exc:
            logger.error("%s", exc)
            return 1
        logger.info("Saved trust anchors to %s", output)
    else:
        sys.stdout.write(result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
