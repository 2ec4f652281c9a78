"""Analyze local folder tool - walk, extract, resolve, summarize, save."""

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from ..config import AnalyzerConfig
from ..parser import AnalysisContext, LANGUAGE_EXTENSIONS, parse_file, resolve_relationships
from ..parser.symbols import FileExtraction
from ..report import write_reports
from ..storage import AnalysisStore
from ..summarizer import summarize_methods

logger = logging.getLogger(__name__)


# Path fragments to skip
SKIP_PATTERNS = [
    "node_modules/", "vendor/", ".git/", ".svn/", ".hg/",
    "target/", "build/", "out/", "bin/", ".gradle/", ".idea/",
    "generated/", "generated-sources/",
]


def should_skip_file(path: str) -> bool:
    """Check if file should be skipped based on path patterns."""
    normalized = path.replace("\\", "/")
    for pattern in SKIP_PATTERNS:
        if normalized.startswith(pattern) or f"/{pattern}" in normalized:
            return True
    return False


def discover_local_files(
    folder_path: Path,
    max_files: int = 5000,
    max_size: int = 1024 * 1024,  # 1MB
) -> list[Path]:
    """Discover source files in a local folder.

    Args:
        folder_path: Root folder to scan
        max_files: Maximum number of files to analyze
        max_size: Maximum file size in bytes

    Returns:
        Sorted list of Path objects for source files
    """
    files = []

    for file_path in folder_path.rglob("*"):
        if not file_path.is_file():
            continue

        try:
            rel_path = file_path.relative_to(folder_path).as_posix()
        except ValueError:
            continue

        if should_skip_file(rel_path):
            continue

        if file_path.suffix not in LANGUAGE_EXTENSIONS:
            continue

        try:
            if file_path.stat().st_size > max_size:
                logger.info("Skipping oversized file %s", rel_path)
                continue
        except OSError:
            continue

        files.append(file_path)

    files.sort()
    if len(files) > max_files:
        logger.warning("Found %d files; analyzing the first %d", len(files), max_files)
        files = files[:max_files]

    return files


def find_specific_class_files(folder_path: Path, class_name: str) -> list[Path]:
    """Files for a single class: `<class>.java` or any name ending in it."""
    pattern = re.compile(rf".*{re.escape(class_name)}\.java")
    return [
        p for p in discover_local_files(folder_path)
        if p.name == f"{class_name}.java" or pattern.fullmatch(p.name)
    ]


def _extract_path(path: Path) -> Optional[FileExtraction]:
    """Read and parse one file. Raises OSError when it cannot be read."""
    content = path.read_text(encoding="utf-8", errors="replace")
    return parse_file(content, str(path), LANGUAGE_EXTENSIONS.get(path.suffix, ""))


def _extract_or_warn(path: Path) -> tuple[Path, Optional[FileExtraction], Optional[str]]:
    try:
        return path, _extract_path(path), None
    except OSError as e:
        return path, None, f"Failed to read {path}: {e}"


def analyze_files(paths: list[Path], max_workers: int = 1) -> AnalysisContext:
    """Build and resolve a model from a list of files.

    Extraction fans out over a thread pool when `max_workers` > 1. Results
    are merged in input order once every file is done, then relationships
    are resolved, so the model does not depend on the worker count. A file
    that cannot be read is skipped with a warning.
    """
    context = AnalysisContext()

    if max_workers > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(_extract_or_warn, paths))
    else:
        results = [_extract_or_warn(p) for p in paths]

    for path, extraction, warning in results:
        if warning:
            logger.warning(warning)
            context.warnings.append(warning)
            continue
        if extraction is None:
            continue
        context.add(extraction)

    resolve_relationships(context)

    logger.info(
        "Analyzed %d of %d files: %d classes, %d endpoints, %d enums",
        len(context.units), len(paths), len(context.units),
        len(context.endpoints), len(context.enums),
    )
    return context


def analyze_folder(
    path: str,
    specific_class: Optional[str] = None,
    output_dir: Optional[str] = None,
    use_ai_summaries: bool = False,
    storage_path: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> dict:
    """Analyze a local folder containing source code.

    Args:
        path: Path to local folder (absolute or relative)
        specific_class: Analyze only files for this class name
        output_dir: Write Markdown reports here when given
        use_ai_summaries: Whether to use AI for method summaries
        storage_path: Custom storage path (default: ~/.code-analysis/)
        max_workers: Extraction threads (default from configuration)

    Returns:
        Dict with analysis results
    """
    config = AnalyzerConfig.from_env()
    folder_path = Path(path).expanduser().resolve()

    if not folder_path.exists():
        return {"success": False, "error": f"Folder not found: {path}"}

    if not folder_path.is_dir():
        return {"success": False, "error": f"Path is not a directory: {path}"}

    if specific_class:
        source_files = find_specific_class_files(folder_path, specific_class)
    else:
        source_files = discover_local_files(folder_path, max_files=config.max_files)

    if not source_files:
        return {"success": False, "error": "No source files found"}

    context = analyze_files(source_files, max_workers=max_workers or config.max_workers)

    if not context.units:
        return {"success": False, "error": "No classes extracted from files", "warnings": context.warnings}

    all_methods = [m for u in context.units.values() for m in u.methods]
    summarize_methods(all_methods, use_ai=use_ai_summaries)

    store = AnalysisStore(base_path=storage_path or config.storage_path)
    owner = "local"
    name = folder_path.name
    index = store.save_analysis(
        owner=owner,
        name=name,
        context=context,
        source_root=str(folder_path),
        source_files=[u.file for u in context.units.values()],
    )

    result = {
        "success": True,
        "repo": f"{owner}/{name}",
        "folder_path": str(folder_path),
        "analyzed_at": index.analyzed_at,
        "file_count": len(source_files),
        **index.stats,
    }

    if output_dir:
        written = write_reports(context, output_dir)
        result["reports"] = [str(p) for p in written[:20]]
        result["report_count"] = len(written)

    if context.ambiguous_references:
        result["ambiguous_references"] = context.ambiguous_references

    if context.warnings:
        result["warnings"] = context.warnings

    return result
