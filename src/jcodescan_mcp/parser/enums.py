"""Enum declaration extraction."""

import re

from .languages import LanguageSpec, JAVA_SPEC
from .symbols import make_qualified_name
from .text import mask_comments, split_top_level

_LEADING_NAME = re.compile(r"^(?:@[\w.]+(?:\([^)]*\))?\s*)*(\w+)")


def extract_enums(content: str, package: str, spec: LanguageSpec = JAVA_SPEC) -> dict[str, list[str]]:
    """Map each enum in the text to its constant names.

    Only non-nested bodies are understood: the body ends at the first `}`,
    so an enum whose constants have class bodies is cut short.

    Example: `enum Color { RED, GREEN, BLUE }` in package `p`
    -> {"p.Color": ["RED", "GREEN", "BLUE"]}
    """
    enums = {}
    for match in spec.enum_pattern.finditer(mask_comments(content)):
        enums[make_qualified_name(package, match.group(1))] = enum_values(match.group(2))
    return enums


def enum_values(body: str) -> list[str]:
    """Constant names from an enum body.

    The constant list ends at the first top-level `;`. Constructor
    arguments are dropped: `RED("r", 1)` -> `RED`.
    """
    constants = split_top_level(body, ";")[0]

    values = []
    for part in split_top_level(constants, ","):
        part = part.strip()
        if not part:
            continue
        match = _LEADING_NAME.match(part)
        if match:
            values.append(match.group(1))
    return values
