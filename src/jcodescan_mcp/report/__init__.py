"""Report package for rendering an analysis as Markdown."""

from .markdown import (
    render_api_summary,
    render_class_hierarchy,
    render_enum_summary,
    render_method_details,
    method_details_filename,
    format_javadoc,
    write_reports,
)

__all__ = [
    "render_api_summary",
    "render_class_hierarchy",
    "render_enum_summary",
    "render_method_details",
    "method_details_filename",
    "format_javadoc",
    "write_reports",
]
