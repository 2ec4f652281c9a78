"""Unit-level scanning: package, supertypes and kind flags."""

import re
from typing import Optional

from .languages import LanguageSpec, JAVA_SPEC
from .symbols import ScanResult, DEFAULT_PACKAGE
from .text import mask_comments


def scan(content: str, name: str, spec: LanguageSpec = JAVA_SPEC) -> ScanResult:
    """Recover unit-level facts from raw source text.

    Only local textual patterns are used. Nothing here raises: a pattern
    that does not match leaves the field at its zero value.

    Args:
        content: Raw source text of the unit
        name: Simple name of the unit (file name minus extension)
        spec: Language patterns to use

    Returns:
        ScanResult for the unit
    """
    masked = mask_comments(content)

    return ScanResult(
        package=extract_package(masked, spec),
        superclass=extract_superclass(masked, spec),
        interfaces=extract_interfaces(masked, spec),
        is_interface=_declares(masked, rf"\binterface\s+{re.escape(name)}\b"),
        is_abstract=_declares(masked, rf"\babstract\s+class\s+{re.escape(name)}\b"),
        is_rest_resource=has_rest_markers(masked, spec),
    )


def extract_package(content: str, spec: LanguageSpec = JAVA_SPEC) -> str:
    """First package declaration, or DEFAULT_PACKAGE."""
    match = spec.package_pattern.search(content)
    return match.group(1) if match else DEFAULT_PACKAGE


def extract_superclass(content: str, spec: LanguageSpec = JAVA_SPEC) -> Optional[str]:
    """First `class X extends Y` reference. Single inheritance only."""
    match = spec.superclass_pattern.search(content)
    return match.group(1) if match else None


def extract_interfaces(content: str, spec: LanguageSpec = JAVA_SPEC) -> list[str]:
    """Names listed in the first `implements|extends ... {` region.

    The region never spans a second keyword, so for
    `class A extends B implements C, D {` only `C, D` is captured.
    """
    match = spec.interface_pattern.search(content)
    if not match:
        return []

    interfaces = []
    for part in match.group(2).split(","):
        part = part.strip()
        if part:
            interfaces.append(part)
    return interfaces


def has_rest_markers(content: str, spec: LanguageSpec = JAVA_SPEC) -> bool:
    """Check for any REST marker token in the text."""
    return any(marker in content for marker in spec.rest_markers)


def _declares(content: str, pattern: str) -> bool:
    return re.search(pattern, content) is not None
