"""List stored analyses."""

from typing import Optional

from ..storage import AnalysisStore


def list_analyses(storage_path: Optional[str] = None) -> dict:
    """List all stored analyses.

    Returns:
        Dict with count and list of analyses
    """
    store = AnalysisStore(base_path=storage_path)
    analyses = store.list_analyses()

    return {
        "count": len(analyses),
        "analyses": analyses
    }
