"""
Data Models

Defines the core data structures:
- Point
- ScoredEdge
- Thresholds
- Chain
"""

from .point import Point
from .scored_edge import ScoredEdge
from .thresholds import Thresholds
from .chain import Chain

__all__ = ["Point", "ScoredEdge", "Thresholds", "Chain"]
