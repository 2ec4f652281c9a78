"""Resolve superclass references and build the inheritance forest."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .context import AnalysisContext
from .symbols import SourceUnit, make_qualified_name

logger = logging.getLogger(__name__)


@dataclass
class ClassNode:
    """A node in the inheritance tree with its subclasses."""
    unit: SourceUnit
    children: list["ClassNode"] = field(default_factory=list)


def resolve_relationships(context: AnalysisContext) -> None:
    """Qualify superclass references and link subclasses, once per context.

    Must run after every unit has been merged. Each superclass field is
    rewritten with its resolved name; references to types outside the
    model are left as written.
    """
    if context.resolved:
        raise RuntimeError("Relationships already resolved for this context")

    for unit in context.units.values():
        if unit.superclass is None:
            continue

        resolved = resolve_class_name(unit.superclass, unit.package, context, owner=unit)
        unit.superclass = resolved

        parent = context.units.get(resolved)
        if parent is None or parent is unit:
            continue
        if unit.qualified_name not in parent.subclasses:
            parent.subclasses.append(unit.qualified_name)

    context.resolved = True
    logger.info(
        "Resolved relationships for %d classes (%d roots, %d ambiguous)",
        len(context.units), len(context.root_units()), len(context.ambiguous_references),
    )


def resolve_class_name(
    class_name: str,
    current_package: str,
    context: AnalysisContext,
    owner: Optional[SourceUnit] = None,
) -> str:
    """Resolve a type reference to a qualified name known to the model.

    1. Dotted names are taken as already qualified.
    2. The referring unit's own package is tried next.
    3. Otherwise every package is searched in lexicographic order; when more
       than one holds the name the first wins and the candidates are
       recorded on the context under the owner's qualified name.
    4. Failing all that, the reference is returned unchanged.
    """
    if "." in class_name:
        return class_name

    same_package = make_qualified_name(current_package, class_name)
    if same_package in context.units:
        return same_package

    candidates = [
        make_qualified_name(pkg, class_name)
        for pkg in sorted(context.packages)
        if class_name in context.packages[pkg]
    ]

    if not candidates:
        return class_name

    if len(candidates) > 1 and owner is not None:
        context.ambiguous_references[owner.qualified_name] = candidates
        message = (
            f"Ambiguous superclass {class_name} for {owner.qualified_name}: "
            f"{', '.join(candidates)}; using {candidates[0]}"
        )
        logger.warning(message)
        context.warnings.append(message)

    return candidates[0]


def build_class_tree(context: AnalysisContext) -> list[ClassNode]:
    """Build the inheritance forest.

    Roots are units whose superclass is absent or outside the model. Roots
    and children are ordered by qualified name. Units caught in an
    inheritance cycle are never reached from a root and are left out.
    """
    def build(unit: SourceUnit, seen: set) -> ClassNode:
        node = ClassNode(unit=unit)
        for child_name in sorted(unit.subclasses):
            child = context.units.get(child_name)
            if child is None or child_name in seen:
                continue
            node.children.append(build(child, seen | {child_name}))
        return node

    roots = sorted(context.root_units(), key=lambda u: u.qualified_name)
    return [build(u, {u.qualified_name}) for u in roots]


def flatten_tree(nodes: list[ClassNode], depth: int = 0) -> list[tuple[SourceUnit, int]]:
    """Flatten class tree with depth information.

    Returns list of (unit, depth) tuples for indentation.
    """
    result = []
    for node in nodes:
        result.append((node.unit, depth))
        result.extend(flatten_tree(node.children, depth + 1))
    return result
