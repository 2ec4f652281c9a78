"""REST endpoint detection from class and method annotations."""

import re
from typing import Optional

from .languages import LanguageSpec, JAVA_SPEC
from .methods import extract_annotations
from .scanner import has_rest_markers
from .symbols import Annotation, Endpoint, SourceUnit
from .text import mask_comments, mask_literals, declaration_start, first_string_literal


def detect_endpoints(content: str, unit: SourceUnit, spec: LanguageSpec = JAVA_SPEC) -> list[Endpoint]:
    """Derive endpoints for a unit whose methods are already extracted.

    A method yields an endpoint only when it carries an HTTP verb
    annotation. The first verb, path, consumes and produces annotation on a
    method wins; class-level consumes/produces apply when the method has
    none. Endpoints come out in method order.

    Args:
        content: Raw source text of the unit
        unit: The unit's record, with methods populated
        spec: Language patterns to use

    Returns:
        List of Endpoint records (empty when the text has no REST markers)
    """
    if not has_rest_markers(mask_comments(content), spec):
        return []

    class_annotations = extract_annotations(class_preamble(content, unit.name, spec), spec)
    class_path = _first_value(class_annotations, spec.path_annotation) or ""
    class_consumes = _first_value(class_annotations, spec.consumes_annotation)
    class_produces = _first_value(class_annotations, spec.produces_annotation)

    endpoints = []
    for method in unit.methods:
        http_method = None
        method_path = None
        consumes = None
        produces = None

        for annotation in method.annotations:
            simple = annotation.simple_name
            if simple in spec.http_method_annotations:
                if http_method is None:
                    http_method = spec.http_method_annotations[simple]
            elif simple == spec.path_annotation:
                if method_path is None:
                    method_path = annotation_value(annotation)
            elif simple == spec.consumes_annotation:
                if consumes is None:
                    consumes = annotation_value(annotation)
            elif simple == spec.produces_annotation:
                if produces is None:
                    produces = annotation_value(annotation)

        if http_method is None:
            continue

        endpoints.append(Endpoint(
            http_method=http_method,
            path=join_paths(class_path, method_path or ""),
            method_name=method.name,
            class_name=unit.name,
            package=unit.package,
            consumes=consumes or class_consumes,
            produces=produces or class_produces,
        ))

    return endpoints


def class_preamble(content: str, name: str, spec: LanguageSpec = JAVA_SPEC) -> str:
    """Annotations and modifiers written before the unit's type declaration.

    Falls back to the first class or interface declaration in the text when
    none is named after the unit. Returns "" when no declaration is found.
    """
    masked = mask_comments(content)
    match = re.search(spec.type_decl_template.format(name=re.escape(name)), masked)
    if not match:
        match = re.search(spec.type_decl_template.format(name=r"\w+"), masked)
    if not match:
        return ""

    start = declaration_start(mask_literals(masked), match.start())
    return masked[start:match.start()]


def annotation_value(annotation: Annotation) -> Optional[str]:
    """Value of a single-argument annotation.

    Uses the first string literal when there is one, otherwise the raw
    argument text without braces (e.g. `MediaType.APPLICATION_JSON`).
    """
    if annotation.arguments is None:
        return None

    literal = first_string_literal(annotation.arguments)
    if literal is not None:
        return literal

    raw = annotation.arguments.strip().strip("{}").strip()
    return raw or None


def join_paths(class_path: str, method_path: str) -> str:
    """Combine class and method paths, collapsing repeated slashes.

    Example: join_paths("/users", "/{id}") -> "/users/{id}"
    """
    path = class_path + ("/" + method_path if method_path else "")
    return re.sub(r"/{2,}", "/", path)


def _first_value(annotations: list[Annotation], simple_name: str) -> Optional[str]:
    for annotation in annotations:
        if annotation.simple_name == simple_name:
            return annotation_value(annotation)
    return None
