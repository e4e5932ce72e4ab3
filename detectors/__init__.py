"""
Detectors Package

Contains the stages of the adaptive edge-extraction pipeline:
- Edge scoring
- Threshold estimation
- Hysteresis selection
- Chain building
- Chain smoothing
"""

from .edge_scorer import score_edges, intensity_at
from .threshold_estimator import percentile, estimate_thresholds
from .hysteresis import edges_touch, split_by_strength, apply_hysteresis
from .chain_builder import extend_chain, build_chains
from .chain_smoother import corner_cut, smooth_chain, smooth_chains
from .pipeline import PipelineResult, run_edge_pipeline

__all__ = [
    "score_edges",
    "intensity_at",
    "percentile",
    "estimate_thresholds",
    "edges_touch",
    "split_by_strength",
    "apply_hysteresis",
    "extend_chain",
    "build_chains",
    "corner_cut",
    "smooth_chain",
    "smooth_chains",
    "PipelineResult",
    "run_edge_pipeline",
]
