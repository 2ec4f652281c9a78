"""Get class outline - supertypes, methods and endpoints of one class."""

from dataclasses import asdict
from typing import Optional

from ..parser.symbols import Method
from ..storage import AnalysisStore


def get_class_outline(
    repo: str,
    class_name: str,
    storage_path: Optional[str] = None
) -> dict:
    """Get a class's structure.

    Args:
        repo: Analysis identifier (owner/name or just name)
        class_name: Qualified or simple class name
        storage_path: Custom storage path

    Returns:
        Dict with class details, methods and endpoints
    """
    store = AnalysisStore(base_path=storage_path)
    resolved = store.resolve_repo(repo)
    if not resolved:
        return {"error": f"Analysis not found: {repo}"}
    owner, name = resolved

    index = store.load_index(owner, name)
    if not index:
        return {"error": f"Folder not analyzed: {owner}/{name}"}

    context = index.context()
    matches = context.find_units(class_name)

    if not matches:
        return {"error": f"Class not found: {class_name}"}

    if len(matches) > 1:
        return {
            "error": f"Class name is ambiguous: {class_name}",
            "candidates": sorted(u.qualified_name for u in matches),
        }

    unit = matches[0]

    return {
        "repo": f"{owner}/{name}",
        "name": unit.qualified_name,
        "file": unit.file,
        "superclass": unit.superclass,
        "superclass_known": unit.superclass in context.units if unit.superclass else False,
        "interfaces": unit.interfaces,
        "subclasses": unit.subclasses,
        "is_interface": unit.is_interface,
        "is_abstract": unit.is_abstract,
        "is_rest_resource": unit.is_rest_resource,
        "methods": [_method_to_dict(m) for m in unit.methods],
        "endpoints": [asdict(e) for e in context.endpoints_for(unit)],
    }


def _method_to_dict(method: Method) -> dict:
    """Convert Method to output dict."""
    return {
        "name": method.name,
        "signature": method.signature,
        "summary": method.summary,
        "annotations": [a.text for a in method.annotations],
    }
