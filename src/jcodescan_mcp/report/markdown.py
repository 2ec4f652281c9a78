"""Markdown reports rendered from a resolved analysis."""

import logging
import re
from pathlib import Path
from typing import Optional

from ..parser.context import AnalysisContext
from ..parser.hierarchy import build_class_tree, flatten_tree
from ..parser.symbols import Endpoint, SourceUnit, simplify_class_name

logger = logging.getLogger(__name__)


API_SUMMARY_FILE = "api-summary.md"
CLASS_HIERARCHY_FILE = "class-hierarchy.md"
ENUM_SUMMARY_FILE = "enum-summary.md"
METHOD_DETAILS_DIR = "method-details"

# Implicit superclass, not worth printing
OBJECT_CLASS = "java.lang.Object"

_ENDPOINT_TABLE_HEADER = [
    "| Method | Path | HTTP Method | Consumes | Produces |",
    "|--------|------|------------|----------|----------|",
]


def render_api_summary(context: AnalysisContext) -> str:
    """Endpoint tables grouped by package, then class."""
    lines = ["# API Endpoints Summary", ""]

    by_package: dict[str, dict[str, list[Endpoint]]] = {}
    for endpoint in context.endpoints:
        by_package.setdefault(endpoint.package, {}).setdefault(endpoint.class_name, []).append(endpoint)

    for package in sorted(by_package):
        lines.extend([f"## Package: {package}", ""])
        classes = by_package[package]
        for class_name in sorted(classes):
            lines.extend([f"### Class: {class_name}", ""])
            lines.extend(_endpoint_table(classes[class_name]))
            lines.append("")

    return "\n".join(lines) + "\n"


def render_class_hierarchy(context: AnalysisContext) -> str:
    """Package summary followed by the inheritance tree."""
    lines = ["# Class Hierarchy", "", "## Package Summary", ""]

    for package in sorted(context.packages):
        lines.extend([f"### {package}", ""])
        for class_name in sorted(context.packages[package]):
            unit = context.get_unit(f"{package}.{class_name}")
            if unit is None:
                continue

            entry = f"- {type_indicator(unit)}{unit.name}"
            if unit.superclass and unit.superclass != OBJECT_CLASS:
                entry += f" extends {simplify_class_name(unit.superclass)}"
            entry += _implements_suffix(unit)
            lines.append(entry)
        lines.append("")

    lines.extend(["## Inheritance Tree", ""])
    for unit, depth in flatten_tree(build_class_tree(context)):
        lines.append(f"{'  ' * depth}- {type_indicator(unit)}{unit.name}{_implements_suffix(unit)}")

    return "\n".join(lines) + "\n"


def render_enum_summary(context: AnalysisContext) -> Optional[str]:
    """One section per enum with its values; None when there are no enums."""
    if not context.enums:
        return None

    lines = ["# Enum Summary", ""]
    for enum_name in sorted(context.enums):
        package, _, short_name = enum_name.rpartition(".")
        lines.extend([
            f"## {short_name}",
            "",
            f"Package: `{package}`",
            "",
            "Values:",
            "",
        ])
        lines.extend(f"- `{value}`" for value in context.enums[enum_name])
        lines.append("")

    return "\n".join(lines) + "\n"


def render_method_details(unit: SourceUnit, context: AnalysisContext) -> str:
    """Per-class page: supertypes, REST endpoints and method details."""
    lines = [f"# Methods for {unit.name}", "", f"Package: `{unit.package}`", ""]

    if unit.superclass and unit.superclass != OBJECT_CLASS:
        lines.extend([f"Extends: `{unit.superclass}`", ""])

    if unit.interfaces:
        lines.extend(["Implements: " + ", ".join(f"`{i}`" for i in unit.interfaces), ""])

    if unit.is_rest_resource:
        lines.extend(["**This is a REST Resource**", ""])
        endpoints = context.endpoints_for(unit)
        if endpoints:
            lines.extend(["## REST Endpoints", ""])
            lines.extend(_endpoint_table(endpoints))
            lines.append("")

    lines.extend(["## Method Details", ""])
    for method in unit.methods:
        lines.extend([f"### `{method.signature}`", ""])

        if method.summary:
            lines.extend([f"_{method.summary}_", ""])

        if method.javadoc:
            lines.extend(["**Documentation:**", "", format_javadoc(method.javadoc), ""])

        if method.annotations:
            lines.extend(["**Annotations:**", ""])
            lines.extend(f"- `{a.text}`" for a in method.annotations)
            lines.append("")

    return "\n".join(lines) + "\n"


def method_details_filename(unit: SourceUnit) -> str:
    """Example: com.acme.User -> com_acme_User.md"""
    return f"{unit.package.replace('.', '_')}_{unit.name}.md"


def format_javadoc(javadoc: str) -> str:
    """Turn javadoc interior text into Markdown."""
    text = "\n".join(line.strip().lstrip("*").strip() for line in javadoc.strip().split("\n"))
    text = re.sub(r"\s*@param\s+(\S+)\s+", r"\n\n**Parameter `\1`**: ", text)
    text = re.sub(r"\s*@return\s+", "\n\n**Returns**: ", text)
    text = re.sub(r"\s*@throws\s+(\S+)\s+", r"\n\n**Throws `\1`**: ", text)
    return text.strip()


def type_indicator(unit: SourceUnit) -> str:
    if unit.is_interface:
        return "[Interface] "
    if unit.is_abstract:
        return "[Abstract] "
    if unit.is_rest_resource:
        return "[REST] "
    return ""


def write_reports(context: AnalysisContext, output_dir: str) -> list[Path]:
    """Render every report into `output_dir`.

    Creates the directory and its method-details subdirectory. The enum
    summary is written only when the model has enums.

    Returns:
        Paths of the files written
    """
    root = Path(output_dir)
    details_dir = root / METHOD_DETAILS_DIR
    details_dir.mkdir(parents=True, exist_ok=True)

    written = [
        _write(root / API_SUMMARY_FILE, render_api_summary(context)),
        _write(root / CLASS_HIERARCHY_FILE, render_class_hierarchy(context)),
    ]

    enum_summary = render_enum_summary(context)
    if enum_summary is not None:
        written.append(_write(root / ENUM_SUMMARY_FILE, enum_summary))

    for unit in context.units.values():
        written.append(_write(details_dir / method_details_filename(unit), render_method_details(unit, context)))

    logger.info("Wrote %d report files to %s", len(written), root)
    return written


def _write(path: Path, content: str) -> Path:
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path


def _endpoint_table(endpoints: list[Endpoint]) -> list[str]:
    rows = list(_ENDPOINT_TABLE_HEADER)
    for e in endpoints:
        rows.append(
            f"| {e.method_name} | {e.path} | {e.http_method} | "
            f"{e.consumes or ''} | {e.produces or ''} |"
        )
    return rows


def _implements_suffix(unit: SourceUnit) -> str:
    if not unit.interfaces:
        return ""
    return " implements " + ", ".join(simplify_class_name(i) for i in unit.interfaces)
