"""
The full adaptive edge-extraction run.

This module provides:
    • PipelineResult
    • run_edge_pipeline(points, graph, sampler, smooth_iterations)

Each call builds fresh structures and threads them through the five
stages in order; nothing is kept between runs.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from models.chain import Chain
from models.point import Point
from models.scored_edge import ScoredEdge
from models.thresholds import Thresholds
from detectors.edge_scorer import score_edges
from detectors.threshold_estimator import estimate_thresholds
from detectors.hysteresis import apply_hysteresis
from detectors.chain_builder import build_chains
from detectors.chain_smoother import smooth_chains


@dataclass
class PipelineResult:
    edges: List[ScoredEdge]
    thresholds: Thresholds
    kept: List[ScoredEdge]
    chains: List[Chain]
    smoothed: List[Chain]


def run_edge_pipeline(
    points: Sequence[Point],
    graph,
    sampler,
    smooth_iterations: Optional[int] = None,
) -> PipelineResult:
    """
    Runs, in order:
      1. Edge scoring
      2. Threshold estimation
      3. Hysteresis selection
      4. Chain building
      5. Chain smoothing

    Any precondition failure (ValueError / IndexError) aborts the run
    before a result is returned.
    """
    edges = score_edges(points, graph, sampler)
    thresholds = estimate_thresholds(edges)
    kept = apply_hysteresis(edges, thresholds)
    chains = build_chains(kept, thresholds.connect)
    smoothed = smooth_chains(chains, smooth_iterations)

    return PipelineResult(
        edges=edges,
        thresholds=thresholds,
        kept=kept,
        chains=chains,
        smoothed=smoothed,
    )
