"""Engine Layer - Core Orchestration and Pipeline Management

This module provides the core engine layer, implementing:
- SearchOrchestrator: Main entry point (query variants → filter → pipeline)
- PriceEnhancementPipeline: Snippet/webpage price evidence and ranking
- filter_price_results: Price-bearing result filter
- SearchHit / PriceEvidence / RankedResult: Standardized result format
"""

from .filter import filter_price_results, is_price_candidate
from .orchestrator import SearchOrchestrator, build_query_variants
from .pipeline import PriceEnhancementPipeline, PriceFetcher, rank_results
from .result import PRICE_NOT_FOUND, PriceEvidence, PriceSource, RankedResult, SearchHit

__all__ = [
    "SearchOrchestrator",
    "build_query_variants",
    "PriceEnhancementPipeline",
    "PriceFetcher",
    "rank_results",
    "filter_price_results",
    "is_price_candidate",
    "SearchHit",
    "PriceEvidence",
    "PriceSource",
    "RankedResult",
    "PRICE_NOT_FOUND",
]
