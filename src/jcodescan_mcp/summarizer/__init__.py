"""Summarizer package for generating method summaries."""

from .batch_summarize import (
    BatchSummarizer,
    extract_summary_from_docstring,
    signature_fallback,
    summarize_methods_simple,
    summarize_methods,
)

__all__ = [
    "BatchSummarizer",
    "extract_summary_from_docstring",
    "signature_fallback",
    "summarize_methods_simple",
    "summarize_methods",
]
