from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator


DEFAULT_SOURCE_DIR = "./outputs"
LOGGER_NAME = "list_outputs"

logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class ImageRef:
    stem: str
    relative: str

    def to_markdown(self) -> str:
        return f"![{self.stem}]({self.relative})"


def extension_of(path: str) -> str:
    """Everything from the last '.' of the basename on, or '' if there is none.

    Unlike os.path.splitext, a leading dot counts: ".gitignore" is all extension.
    """
    base = os.path.basename(path)
    dot = base.rfind(".")
    if dot < 0:
        return ""
    return base[dot:]


def stem_of(path: str) -> str:
    base = os.path.basename(path)
    ext = extension_of(path)
    return base[: len(base) - len(ext)]


def relative_path(path: str) -> str:
    # only a single leading "./" is dropped
    if path.startswith("./"):
        return path[2:]
    return path


def to_image_ref(path: str) -> ImageRef:
    return ImageRef(stem=stem_of(path), relative=relative_path(path))


def format_entry(path: str) -> str:
    return to_image_ref(path).to_markdown()


def iter_entries(source_dir: str) -> Iterator[str]:
    # Read the whole listing up front so a bad directory fails before any output.
    # Joining as strings keeps "./outputs" verbatim; Path() would drop the "./".
    names = sorted(p.name for p in Path(source_dir).iterdir())
    logger.debug("listing %s: %d entries", source_dir, len(names))
    for name in names:
        yield os.path.join(source_dir, name)


def list_outputs(source_dir: str = DEFAULT_SOURCE_DIR) -> Iterator[str]:
    for path in iter_entries(source_dir):
        yield format_entry(path)


def setup_logger(verbose: bool = False) -> logging.Logger:
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
    return logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print a Markdown image reference for every file in an outputs directory."
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=DEFAULT_SOURCE_DIR,
        help=f"directory to list (default: {DEFAULT_SOURCE_DIR})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug details to stderr")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logger(args.verbose)

    try:
        lines = list_outputs(args.directory)
        for line in lines:
            print(line)
    except OSError as e:
        logger.error("cannot list %s: %s", args.directory, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
