"""Analysis storage: save and load resolved models as JSON."""

import json
import logging
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..parser.context import AnalysisContext
from ..parser.symbols import Annotation, Endpoint, Method, SourceUnit

logger = logging.getLogger(__name__)


@dataclass
class AnalysisIndex:
    """A stored analysis of one source tree."""
    repo: str                    # "owner/name"
    owner: str
    name: str
    analyzed_at: str             # ISO timestamp
    source_root: str             # Folder that was analyzed
    source_files: list[str]      # Files that produced a unit
    stats: dict[str, int]        # AnalysisContext.stats()
    model: dict                  # Serialized AnalysisContext

    def context(self) -> AnalysisContext:
        """Rebuild the resolved context."""
        return context_from_dict(self.model)


class AnalysisStore:
    """Storage for analyses, one JSON file per analyzed tree."""

    def __init__(self, base_path: Optional[str] = None):
        """Initialize store.

        Args:
            base_path: Base directory for storage. Defaults to ~/.code-analysis/
        """
        if base_path:
            self.base_path = Path(base_path)
        else:
            self.base_path = Path.home() / ".code-analysis"

        self.base_path.mkdir(parents=True, exist_ok=True)

    def _index_path(self, owner: str, name: str) -> Path:
        """Path to index JSON file."""
        return self.base_path / f"{owner}-{name}.json"

    def save_analysis(
        self,
        owner: str,
        name: str,
        context: AnalysisContext,
        source_root: str,
        source_files: list[str],
    ) -> AnalysisIndex:
        """Save a resolved context.

        Args:
            owner: Analysis owner ("local" for folders)
            name: Analysis name (folder name)
            context: Resolved analysis context
            source_root: Folder that was analyzed
            source_files: Files that produced a unit

        Returns:
            AnalysisIndex object
        """
        index = AnalysisIndex(
            repo=f"{owner}/{name}",
            owner=owner,
            name=name,
            analyzed_at=datetime.now().isoformat(),
            source_root=source_root,
            source_files=source_files,
            stats=context.stats(),
            model=context_to_dict(context),
        )

        with open(self._index_path(owner, name), "w", encoding="utf-8") as f:
            json.dump(asdict(index), f, indent=2)

        return index

    def load_index(self, owner: str, name: str) -> Optional[AnalysisIndex]:
        """Load a stored analysis, or None if there is none."""
        index_path = self._index_path(owner, name)

        if not index_path.exists():
            return None

        with open(index_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return AnalysisIndex(
            repo=data["repo"],
            owner=data["owner"],
            name=data["name"],
            analyzed_at=data["analyzed_at"],
            source_root=data["source_root"],
            source_files=data["source_files"],
            stats=data["stats"],
            model=data["model"],
        )

    def resolve_repo(self, repo: str) -> Optional[tuple[str, str]]:
        """Split "owner/name", or find the owner for a bare name."""
        if "/" in repo:
            owner, name = repo.split("/", 1)
            return owner, name

        for entry in self.list_analyses():
            if entry["repo"].endswith(f"/{repo}"):
                owner, name = entry["repo"].split("/", 1)
                return owner, name
        return None

    def list_analyses(self) -> list[dict]:
        """List all stored analyses."""
        analyses = []

        for index_file in sorted(self.base_path.glob("*.json")):
            try:
                with open(index_file, "r", encoding="utf-8") as f:
                    data = json.load(f)

                analyses.append({
                    "repo": data["repo"],
                    "analyzed_at": data["analyzed_at"],
                    "source_root": data["source_root"],
                    "file_count": len(data["source_files"]),
                    **data["stats"],
                })
            except (OSError, ValueError, KeyError) as e:
                logger.warning("Skipping unreadable analysis %s: %s", index_file, e)
                continue

        return analyses

    def delete_analysis(self, owner: str, name: str) -> bool:
        """Delete a stored analysis."""
        index_path = self._index_path(owner, name)

        if not index_path.exists():
            return False

        index_path.unlink()
        return True


def context_to_dict(context: AnalysisContext) -> dict:
    """Serialize a context to JSON-compatible data."""
    return {
        "units": [_unit_to_dict(u) for u in context.units.values()],
        "endpoints": [asdict(e) for e in context.endpoints],
        "enums": context.enums,
        "warnings": context.warnings,
        "ambiguous_references": context.ambiguous_references,
        "resolved": context.resolved,
    }


def context_from_dict(data: dict) -> AnalysisContext:
    """Rebuild a context serialized by context_to_dict.

    Package index and unit order are restored from the unit list.
    """
    context = AnalysisContext()

    for d in data.get("units", []):
        unit = _dict_to_unit(d)
        context.units[unit.qualified_name] = unit
        context.packages.setdefault(unit.package, []).append(unit.name)

    context.endpoints = [Endpoint(**e) for e in data.get("endpoints", [])]
    context.enums = {k: list(v) for k, v in data.get("enums", {}).items()}
    context.warnings = list(data.get("warnings", []))
    context.ambiguous_references = {k: list(v) for k, v in data.get("ambiguous_references", {}).items()}
    context.resolved = data.get("resolved", False)
    return context


def _unit_to_dict(unit: SourceUnit) -> dict:
    """Convert SourceUnit to dict."""
    return {
        "name": unit.name,
        "package": unit.package,
        "file": unit.file,
        "superclass": unit.superclass,
        "interfaces": unit.interfaces,
        "methods": [
            {
                "name": m.name,
                "signature": m.signature,
                "javadoc": m.javadoc,
                "annotations": [{"name": a.name, "arguments": a.arguments} for a in m.annotations],
                "summary": m.summary,
            }
            for m in unit.methods
        ],
        "is_interface": unit.is_interface,
        "is_abstract": unit.is_abstract,
        "is_rest_resource": unit.is_rest_resource,
        "subclasses": unit.subclasses,
    }


def _dict_to_unit(d: dict) -> SourceUnit:
    """Convert dict back to SourceUnit."""
    return SourceUnit(
        name=d["name"],
        package=d["package"],
        file=d["file"],
        superclass=d.get("superclass"),
        interfaces=list(d.get("interfaces", [])),
        methods=[
            Method(
                name=m["name"],
                signature=m["signature"],
                javadoc=m.get("javadoc", ""),
                annotations=[Annotation(a["name"], a.get("arguments")) for a in m.get("annotations", [])],
                summary=m.get("summary", ""),
            )
            for m in d.get("methods", [])
        ],
        is_interface=d.get("is_interface", False),
        is_abstract=d.get("is_abstract", False),
        is_rest_resource=d.get("is_rest_resource", False),
        subclasses=list(d.get("subclasses", [])),
    )
