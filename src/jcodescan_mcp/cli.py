"""Command line entry point: analyze a source tree and write Markdown reports."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import AnalyzerConfig
from .report import write_reports
from .summarizer import summarize_methods
from .tools.analyze_folder import analyze_files, discover_local_files, find_specific_class_files

logger = logging.getLogger(__name__)


def build_parser(config: AnalyzerConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jcodescan",
        description="Summarize the packages, class hierarchy, enums and REST endpoints of a Java source tree.",
    )
    parser.add_argument("source_dir", help="Root directory of Java source code")
    parser.add_argument("specific_class", nargs="?", default=None,
                        help="Analyze only files for this class")
    parser.add_argument("--output-dir", default=config.output_dir,
                        help=f"Directory for reports (default: {config.output_dir})")
    parser.add_argument("--workers", type=int, default=config.max_workers,
                        help="Extraction threads (default: %(default)s)")
    parser.add_argument("--ai-summaries", action="store_true",
                        help="Summarize undocumented methods with AI (needs ANTHROPIC_API_KEY)")
    parser.add_argument("--log-level", default=config.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: %(default)s)")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    config = AnalyzerConfig.from_env()
    args = build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    root = Path(args.source_dir).expanduser()
    if not root.is_dir():
        logger.error("Not a directory: %s", args.source_dir)
        return 1

    logger.info("Analyzing codebase in: %s", root)
    if args.specific_class:
        files = find_specific_class_files(root, args.specific_class)
        logger.info("Analyzing specific class: %s", args.specific_class)
    else:
        files = discover_local_files(root, max_files=config.max_files)
        logger.info("Found %d Java files", len(files))

    if not files:
        logger.error("No source files found in %s", root)
        return 1

    context = analyze_files(files, max_workers=max(1, args.workers))
    summarize_methods(
        [m for u in context.units.values() for m in u.methods],
        use_ai=args.ai_summaries,
    )
    write_reports(context, args.output_dir)

    logger.info("Analysis complete. Reports saved to %s directory", args.output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
