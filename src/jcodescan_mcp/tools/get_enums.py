"""Get enum declarations of an analyzed folder."""

from typing import Optional

from ..storage import AnalysisStore


def get_enums(
    repo: str,
    query: str = "",
    storage_path: Optional[str] = None
) -> dict:
    """List enums and their values, optionally filtered by name.

    Args:
        repo: Analysis identifier (owner/name or just name)
        query: Case-insensitive substring of the qualified enum name
        storage_path: Custom storage path

    Returns:
        Dict with enums sorted by qualified name
    """
    store = AnalysisStore(base_path=storage_path)
    resolved = store.resolve_repo(repo)
    if not resolved:
        return {"error": f"Analysis not found: {repo}"}
    owner, name = resolved

    index = store.load_index(owner, name)
    if not index:
        return {"error": f"Folder not analyzed: {owner}/{name}"}

    enums = index.context().enums
    query_lower = query.lower()

    results = [
        {"name": enum_name, "values": enums[enum_name]}
        for enum_name in sorted(enums)
        if query_lower in enum_name.lower()
    ]

    return {
        "repo": f"{owner}/{name}",
        "count": len(results),
        "enums": results
    }
