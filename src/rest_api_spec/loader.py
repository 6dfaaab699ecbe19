"""Loads REST API descriptor files from disk.

``parse_file`` reads a single JSON or YAML api file; ``load_rest_spec``
reads every api file of one or more directories into a RestSpec.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rest_api_spec.exceptions import ApiDirectoryError, TokenStreamError
from rest_api_spec.parser.api import ApiSpecParser
from rest_api_spec.parser.base import RestApiSpec, RestSpec
from rest_api_spec.parser.yaml_cursor import YamlTokenCursor

logger = logging.getLogger(__name__)

API_SUFFIXES = (".json", ".yaml", ".yml")


def parse_file(file_path: Path) -> RestApiSpec:
    """Parse a single api file, using its path as the api location."""
    location = str(file_path)
    try:
        f = file_path.open(encoding="utf-8")
    except OSError as e:
        raise TokenStreamError(location, e) from e

    with f:
        cursor = YamlTokenCursor(f, source=location)
        return ApiSpecParser().parse(location, cursor)


def load_rest_spec(*directories: Path, suffixes: tuple[str, ...] = API_SUFFIXES) -> RestSpec:
    """Parse every api file found in ``directories`` into one RestSpec.

    Files are read in name order. Files whose name starts with ``_`` hold
    shared fragments rather than an api and are skipped.
    """
    rest_spec = RestSpec()
    for directory in directories:
        if not directory.is_dir():
            raise ApiDirectoryError(str(directory))

        for file_path in sorted(directory.iterdir()):
            if not file_path.is_file() or file_path.suffix not in suffixes:
                continue
            if file_path.name.startswith("_"):
                logger.debug("Skipping shared api file %s", file_path)
                continue
            logger.debug("Parsing api file %s", file_path)
            rest_spec.add_api(parse_file(file_path))

    logger.info("Loaded %d apis from %d directories", len(rest_spec.apis), len(directories))
    return rest_spec
