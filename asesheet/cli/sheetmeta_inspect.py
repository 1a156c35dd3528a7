"""Print the structure of an Aseprite sprite-sheet export.

Usage:
    asesheet-inspect boonga.json
    asesheet-inspect boonga.json --canonical > boonga.canonical.json
"""
import logging
import os

import ubelt as ub

from asesheet.errors import SheetDecodeError
from asesheet.settings import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOGLEVEL_ENV
from asesheet.sheetmeta import SpritesheetData, decode, encode


def summarize(sheet: SpritesheetData) -> dict:
    """Reduce a sheet to the nested dict printed by the CLI."""
    meta = sheet.meta
    return {
        "image": meta.image,
        "size": (meta.size.w, meta.size.h),
        "scale": meta.scale,
        "frames": [
            (frame.filename, tuple(frame.data.frame.to_mapping().values()), frame.data.duration)
            for frame in sheet.frames
        ],
        "tags": {
            tag.name: {
                "range": (tag.from_, tag.to),
                "direction": tag.direction.value,
                # tags are not range checked against the frame list
                "duration": sheet.tag_duration(tag.name) if tag.to < len(sheet.frames) else None,
            }
            for tag in meta.frame_tags
        },
        "layers": [
            layer.name + ("/" if layer.is_group else "")
            for layer in meta.layers
        ],
        "slices": {slice_.name: len(slice_.keys) for slice_ in meta.slices},
    }


def _configure_logging(ns):
    # Determine level: flag > -v > env > default INFO
    if ns.log_level:
        level_name = ns.log_level
    elif ns.verbose >= 2:
        level_name = "DEBUG"
    elif ns.verbose == 1:
        level_name = "INFO"
    else:
        level_name = os.environ.get(LOGLEVEL_ENV, DEFAULT_LOG_LEVEL).upper()

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )
    logging.debug("Resolved log level: %s", level_name)


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(
        prog="asesheet-inspect",
        description="Decode an Aseprite JSON export and print what it contains."
    )
    parser.add_argument("path", help="Path to the exported metadata file (.json).")
    parser.add_argument(
        "--canonical",
        action="store_true",
        help="Print the canonical re-encoded JSON instead of a summary."
    )
    parser.add_argument(
        "-l", "--log-level",
        dest="log_level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"],
        help="Logging level (overrides LOGLEVEL env)."
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v=INFO, -vv=DEBUG). Ignored if --log-level is provided."
    )
    ns = parser.parse_args(argv)

    _configure_logging(ns)

    path = ub.Path(ns.path).expand()
    if not path.exists():
        logging.error("Metadata path does not exist: %s", path)
        return 2

    logging.info("Loading metadata: %s", path)
    try:
        sheet = decode(path.read_text(encoding="utf-8"))
    except SheetDecodeError as ex:
        logging.error("Invalid sprite sheet metadata: %s", ex)
        return 1
    except ValueError as ex:
        logging.error("Not a JSON document: %s", ex)
        return 1

    if ns.canonical:
        print(encode(sheet))
    else:
        print(ub.urepr(summarize(sheet), nl=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
