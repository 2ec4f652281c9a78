"""Search REST endpoints across an analyzed folder."""

from typing import Optional

from ..parser.symbols import Endpoint
from ..storage import AnalysisStore


def search_endpoints(
    repo: str,
    query: str = "",
    http_method: Optional[str] = None,
    max_results: int = 50,
    storage_path: Optional[str] = None
) -> dict:
    """Search for endpoints matching a query.

    Args:
        repo: Analysis identifier (owner/name or just name)
        query: Matched against path, method, class and package names
        http_method: Optional filter by HTTP verb
        max_results: Maximum results to return
        storage_path: Custom storage path

    Returns:
        Dict with search results, best matches first
    """
    store = AnalysisStore(base_path=storage_path)
    resolved = store.resolve_repo(repo)
    if not resolved:
        return {"error": f"Analysis not found: {repo}"}
    owner, name = resolved

    index = store.load_index(owner, name)
    if not index:
        return {"error": f"Folder not analyzed: {owner}/{name}"}

    query_lower = query.lower().strip()
    query_words = set(query_lower.split())
    verb = http_method.upper() if http_method else None

    scored = []
    for position, endpoint in enumerate(index.context().endpoints):
        if verb and endpoint.http_method != verb:
            continue

        score = _calculate_score(endpoint, query_lower, query_words) if query_lower else 1
        if score > 0:
            scored.append((score, position, endpoint))

    # Best score first, source order within a score
    scored.sort(key=lambda x: (-x[0], x[1]))

    results = []
    for score, _, endpoint in scored[:max_results]:
        results.append({
            "http_method": endpoint.http_method,
            "path": endpoint.path,
            "class": endpoint.qualified_class,
            "method": endpoint.method_name,
            "consumes": endpoint.consumes,
            "produces": endpoint.produces,
            "score": score,
        })

    return {
        "repo": f"{owner}/{name}",
        "query": query,
        "result_count": len(results),
        "results": results
    }


def _calculate_score(endpoint: Endpoint, query_lower: str, query_words: set) -> int:
    """Calculate search score for an endpoint."""
    score = 0

    # 1. Path match (highest weight)
    path_lower = endpoint.path.lower()
    if query_lower == path_lower:
        score += 20
    elif query_lower in path_lower:
        score += 10
    for word in query_words:
        if word in path_lower:
            score += 5

    # 2. Method name match
    method_lower = endpoint.method_name.lower()
    if query_lower == method_lower:
        score += 15
    elif query_lower in method_lower:
        score += 8
    for word in query_words:
        if word in method_lower:
            score += 3

    # 3. Class and package match
    class_lower = endpoint.qualified_class.lower()
    for word in query_words:
        if word in class_lower:
            score += 2

    # 4. Media types
    media = f"{endpoint.consumes or ''} {endpoint.produces or ''}".lower()
    for word in query_words:
        if word in media:
            score += 1

    return score
