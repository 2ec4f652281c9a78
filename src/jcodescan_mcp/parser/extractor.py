"""Per-file structural extraction using heuristic pattern matching."""

import logging
import os
from typing import Optional

from .endpoints import detect_endpoints
from .enums import extract_enums
from .languages import LANGUAGE_REGISTRY
from .methods import extract_methods
from .scanner import scan
from .symbols import FileExtraction, SourceUnit

logger = logging.getLogger(__name__)


def parse_file(content: str, filename: str, language: str = "java") -> Optional[FileExtraction]:
    """Extract a unit, its endpoints and its enums from one file's text.

    No state is shared between calls, so files can be parsed in any order
    or in parallel.

    Args:
        content: Raw source code
        filename: File path; its base name minus extension names the unit
        language: Language name (must be in LANGUAGE_REGISTRY)

    Returns:
        FileExtraction, or None for an unsupported language
    """
    if language not in LANGUAGE_REGISTRY:
        return None

    spec = LANGUAGE_REGISTRY[language]
    name = unit_name(filename)
    scanned = scan(content, name, spec)

    unit = SourceUnit(
        name=name,
        package=scanned.package,
        file=filename,
        superclass=scanned.superclass,
        interfaces=scanned.interfaces,
        methods=extract_methods(content, spec),
        is_interface=scanned.is_interface,
        is_abstract=scanned.is_abstract,
        is_rest_resource=scanned.is_rest_resource,
    )

    endpoints = detect_endpoints(content, unit, spec)
    enums = extract_enums(content, unit.package, spec)

    logger.debug(
        "Parsed %s: %d methods, %d endpoints, %d enums",
        unit.qualified_name, len(unit.methods), len(endpoints), len(enums),
    )

    return FileExtraction(unit=unit, endpoints=endpoints, enums=enums)


def unit_name(filename: str) -> str:
    """File base name without extension.

    Example: src/com/acme/UserResource.java -> UserResource
    """
    return os.path.splitext(os.path.basename(filename))[0]
