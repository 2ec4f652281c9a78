"""Analysis context: the model shared by extraction, resolution and reporting."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .symbols import Endpoint, FileExtraction, SourceUnit

logger = logging.getLogger(__name__)


@dataclass
class AnalysisContext:
    """All records produced by one analysis run.

    Built by merging per-file extractions, then resolved once. Units own
    their methods; endpoints and enums refer to units by qualified name.
    """
    units: dict[str, SourceUnit] = field(default_factory=dict)        # Qualified name -> unit
    packages: dict[str, list[str]] = field(default_factory=dict)      # Package -> simple class names
    endpoints: list[Endpoint] = field(default_factory=list)
    enums: dict[str, list[str]] = field(default_factory=dict)         # Qualified enum name -> values
    warnings: list[str] = field(default_factory=list)
    ambiguous_references: dict[str, list[str]] = field(default_factory=dict)  # Unit -> candidates
    resolved: bool = False

    def add(self, extraction: FileExtraction) -> bool:
        """Merge one file's extraction.

        Returns False, and records a warning, when a unit with the same
        qualified name is already present; the first one is kept.
        """
        if self.resolved:
            raise RuntimeError("Cannot add units after relationships are resolved")

        unit = extraction.unit
        key = unit.qualified_name

        if key in self.units:
            message = (
                f"Duplicate class {key} in {unit.file}; "
                f"keeping {self.units[key].file}"
            )
            logger.warning(message)
            self.warnings.append(message)
            return False

        self.units[key] = unit
        self.packages.setdefault(unit.package, []).append(unit.name)
        self.endpoints.extend(extraction.endpoints)
        self.enums.update(extraction.enums)
        return True

    def get_unit(self, qualified_name: str) -> Optional[SourceUnit]:
        return self.units.get(qualified_name)

    def find_units(self, class_name: str) -> list[SourceUnit]:
        """Units matching a qualified name or, failing that, a simple name."""
        if class_name in self.units:
            return [self.units[class_name]]
        return [u for u in self.units.values() if u.name == class_name]

    def is_root(self, unit: SourceUnit) -> bool:
        """True when the unit has no superclass inside the model."""
        return unit.superclass is None or unit.superclass not in self.units

    def root_units(self) -> list[SourceUnit]:
        return [u for u in self.units.values() if self.is_root(u)]

    def endpoints_for(self, unit: SourceUnit) -> list[Endpoint]:
        return [
            e for e in self.endpoints
            if e.class_name == unit.name and e.package == unit.package
        ]

    def stats(self) -> dict:
        """Counts describing the model."""
        return {
            "package_count": len(self.packages),
            "class_count": len(self.units),
            "method_count": sum(len(u.methods) for u in self.units.values()),
            "endpoint_count": len(self.endpoints),
            "enum_count": len(self.enums),
        }
