"""Language registry with LanguageSpec definitions for supported languages."""

import re
from dataclasses import dataclass, field


@dataclass
class LanguageSpec:
    """Patterns and constants for heuristic extraction from one language."""
    # Language name
    name: str

    # `package com.acme.users;`
    package_pattern: re.Pattern

    # `class Name extends Base` -> group 1 is the base reference
    superclass_pattern: re.Pattern

    # First `implements|extends a, b {` region -> group 2 is the list
    interface_pattern: re.Pattern

    # Method-like declaration shape -> group 1 is the name
    method_pattern: re.Pattern

    # `@Name` or `@Name(args)` -> group 1 name, group 2 arguments
    annotation_pattern: re.Pattern

    # `/** ... */` -> group 1 is the interior
    doc_comment_pattern: re.Pattern

    # `enum Name { body }` -> group 1 name, group 2 body
    enum_pattern: re.Pattern

    # Format string locating a unit's own type declaration; {name} is escaped
    type_decl_template: str

    # Characters of text before a declaration searched for docs and annotations
    lookbehind: int = 100

    # Substrings that mark a unit as a REST resource
    rest_markers: tuple[str, ...] = ()

    # Annotation simple name -> HTTP verb
    http_method_annotations: dict[str, str] = field(default_factory=dict)

    path_annotation: str = "Path"
    consumes_annotation: str = "Consumes"
    produces_annotation: str = "Produces"

    # Identifiers the method pattern can capture that are never methods
    non_method_names: frozenset[str] = frozenset()

    # A match whose name follows one of these is an instance creation
    non_method_prefixes: frozenset[str] = frozenset()


# File extension to language mapping
LANGUAGE_EXTENSIONS = {
    ".java": "java",
}


# Java specification
JAVA_SPEC = LanguageSpec(
    name="java",
    package_pattern=re.compile(r"\bpackage\s+([\w.]+)\s*;"),
    superclass_pattern=re.compile(
        r"\bclass\s+\w+(?:\s*<[^{]*?>)?\s+extends\s+([\w.]+)"
    ),
    interface_pattern=re.compile(
        r"\b(implements|extends)\s+((?:(?!\b(?:implements|extends)\b)[\w.,\s])+)\{"
    ),
    method_pattern=re.compile(
        r"(?:public|protected|private|static|\s) +(?:[\w<>\[\],?.]+[ \t]+){1,10}(\w+) *"
        r"\((?:[^()]|\([^()]*\))*\) *(?:throws [\w.,\s]+)?\{"
    ),
    annotation_pattern=re.compile(r"@([\w.]+)(?:\(([^)]*)\))?"),
    doc_comment_pattern=re.compile(r"/\*\*(?!/)(.*?)\*/", re.DOTALL),
    enum_pattern=re.compile(
        r"\benum\s+(\w+)(?:\s+implements\s+[\w.,\s<>]+)?\s*\{([^}]*)\}"
    ),
    type_decl_template=r"\b(?:class|interface|enum)\s+{name}\b",
    lookbehind=100,
    rest_markers=("@Path", "@Consumes", "@Produces"),
    http_method_annotations={
        "GET": "GET",
        "POST": "POST",
        "PUT": "PUT",
        "DELETE": "DELETE",
    },
    path_annotation="Path",
    consumes_annotation="Consumes",
    produces_annotation="Produces",
    non_method_names=frozenset({
        "if", "for", "while", "switch", "catch", "synchronized",
        "return", "new", "else", "do", "try",
    }),
    non_method_prefixes=frozenset({"new"}),
)


# Language registry
LANGUAGE_REGISTRY = {
    "java": JAVA_SPEC,
}
