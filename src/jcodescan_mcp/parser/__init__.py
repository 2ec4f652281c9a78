"""Parser package for extracting structure from source code."""

from .symbols import (
    Annotation,
    Method,
    SourceUnit,
    Endpoint,
    ScanResult,
    FileExtraction,
    DEFAULT_PACKAGE,
    make_qualified_name,
    simplify_class_name,
)
from .languages import LanguageSpec, LANGUAGE_REGISTRY, LANGUAGE_EXTENSIONS, JAVA_SPEC
from .scanner import scan
from .methods import extract_methods, extract_annotations
from .endpoints import detect_endpoints, join_paths
from .enums import extract_enums
from .extractor import parse_file, unit_name
from .context import AnalysisContext
from .hierarchy import (
    ClassNode,
    resolve_relationships,
    resolve_class_name,
    build_class_tree,
    flatten_tree,
)

__all__ = [
    "Annotation",
    "Method",
    "SourceUnit",
    "Endpoint",
    "ScanResult",
    "FileExtraction",
    "DEFAULT_PACKAGE",
    "make_qualified_name",
    "simplify_class_name",
    "LanguageSpec",
    "LANGUAGE_REGISTRY",
    "LANGUAGE_EXTENSIONS",
    "JAVA_SPEC",
    "scan",
    "extract_methods",
    "extract_annotations",
    "detect_endpoints",
    "join_paths",
    "extract_enums",
    "parse_file",
    "unit_name",
    "AnalysisContext",
    "ClassNode",
    "resolve_relationships",
    "resolve_class_name",
    "build_class_tree",
    "flatten_tree",
]
