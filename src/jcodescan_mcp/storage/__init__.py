"""Storage package for analysis save/load operations."""

from .index_store import AnalysisIndex, AnalysisStore, context_to_dict, context_from_dict

__all__ = ["AnalysisIndex", "AnalysisStore", "context_to_dict", "context_from_dict"]
