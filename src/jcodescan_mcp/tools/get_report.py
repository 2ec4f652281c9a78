"""Render one Markdown report for an analyzed folder."""

from typing import Optional

from ..report import (
    render_api_summary,
    render_class_hierarchy,
    render_enum_summary,
    render_method_details,
)
from ..storage import AnalysisStore


REPORT_KINDS = ["api", "hierarchy", "enums", "methods"]


def get_report(
    repo: str,
    report: str,
    class_name: Optional[str] = None,
    storage_path: Optional[str] = None
) -> dict:
    """Render a report as Markdown text.

    Args:
        repo: Analysis identifier (owner/name or just name)
        report: One of REPORT_KINDS
        class_name: Class for the "methods" report (qualified or simple)
        storage_path: Custom storage path

    Returns:
        Dict with the Markdown text
    """
    if report not in REPORT_KINDS:
        return {"error": f"Unknown report: {report}. Expected one of {', '.join(REPORT_KINDS)}"}

    store = AnalysisStore(base_path=storage_path)
    resolved = store.resolve_repo(repo)
    if not resolved:
        return {"error": f"Analysis not found: {repo}"}
    owner, name = resolved

    index = store.load_index(owner, name)
    if not index:
        return {"error": f"Folder not analyzed: {owner}/{name}"}

    context = index.context()

    if report == "api":
        markdown = render_api_summary(context)
    elif report == "hierarchy":
        markdown = render_class_hierarchy(context)
    elif report == "enums":
        markdown = render_enum_summary(context) or "# Enum Summary\n\nNo enums found.\n"
    else:
        if not class_name:
            return {"error": "class_name is required for the methods report"}
        matches = context.find_units(class_name)
        if len(matches) != 1:
            return {
                "error": f"Class not found or ambiguous: {class_name}",
                "candidates": sorted(u.qualified_name for u in matches),
            }
        markdown = render_method_details(matches[0], context)

    return {
        "repo": f"{owner}/{name}",
        "report": report,
        "markdown": markdown
    }
