"""
Command-line entry point.

Usage:
  magickscript script.txt --output out.png
  cat script.txt | magickscript --width 32 --height 32
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from magickscript import script
from magickscript.config import CompositeSettings
from magickscript.driver import compose
from magickscript.exceptions import MagickScriptError

logger = logging.getLogger(__name__)

EXIT_FAILURE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="magickscript",
        description="Composite an image over a background at every coordinate of a script.",
    )
    parser.add_argument(
        "script", nargs="?", help="Script file to run (standard input when omitted or '-')"
    )
    parser.add_argument("-o", "--output", help="Output image path (default: output.png)")
    parser.add_argument("--width", type=int, help="Foreground width (default: 60)")
    parser.add_argument("--height", type=int, help="Foreground height (default: 60)")
    parser.add_argument(
        "--foreground", help="Name of the image placed at each coordinate (default: picture)"
    )
    parser.add_argument(
        "--background",
        help="Name of the starting image when the script has no miff (default: background)",
    )
    parser.add_argument(
        "--output-type", help="Intermediate image format (default: miff)"
    )
    parser.add_argument("--magick", help="ImageMagick executable (default: magick)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every tool invocation"
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> CompositeSettings:
    """Build settings from parsed arguments, leaving unset options at their defaults."""
    options = {
        name: getattr(args, name)
        for name in (
            "output",
            "width",
            "height",
            "foreground",
            "background",
            "output_type",
            "magick",
        )
        if getattr(args, name) is not None
    }
    return CompositeSettings(**options)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.captureWarnings(True)

    try:
        settings = settings_from_args(args)
        if args.script is None or args.script == "-":
            context = script.from_stdin()
        else:
            context = script.from_file(args.script)
        compose(context, settings)
    except (MagickScriptError, ValidationError, OSError) as e:
        print(f"magickscript: {e}", file=sys.stderr)
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())
