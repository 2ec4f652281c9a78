"""Get the inheritance forest of an analyzed folder."""

from typing import Optional

from ..parser import ClassNode, build_class_tree
from ..storage import AnalysisStore


def get_class_hierarchy(
    repo: str,
    package: Optional[str] = None,
    storage_path: Optional[str] = None
) -> dict:
    """Get classes arranged by inheritance.

    Args:
        repo: Analysis identifier (owner/name or just name)
        package: Only keep trees whose root is in this package (or below it)
        storage_path: Custom storage path

    Returns:
        Dict with the inheritance tree
    """
    store = AnalysisStore(base_path=storage_path)
    resolved = store.resolve_repo(repo)
    if not resolved:
        return {"error": f"Analysis not found: {repo}"}
    owner, name = resolved

    index = store.load_index(owner, name)
    if not index:
        return {"error": f"Folder not analyzed: {owner}/{name}"}

    tree = build_class_tree(index.context())
    if package:
        tree = [
            n for n in tree
            if n.unit.package == package or n.unit.package.startswith(f"{package}.")
        ]

    return {
        "repo": f"{owner}/{name}",
        "package": package,
        "root_count": len(tree),
        "tree": [_node_to_dict(n) for n in tree],
    }


def _node_to_dict(node: ClassNode) -> dict:
    """Convert ClassNode to output dict."""
    unit = node.unit
    result = {
        "name": unit.qualified_name,
        "kind": _kind(unit),
        "superclass": unit.superclass,
        "interfaces": unit.interfaces,
    }

    if node.children:
        result["children"] = [_node_to_dict(c) for c in node.children]

    return result


def _kind(unit) -> str:
    if unit.is_interface:
        return "interface"
    if unit.is_abstract:
        return "abstract"
    return "class"
