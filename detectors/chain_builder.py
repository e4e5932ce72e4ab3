"""
Greedy reassembly of kept edges into open polylines.

This module provides:
    • extend_chain(chain, edge, tolerance)
    • build_chains(kept_edges, tolerance)

Work-list policy:
    - the pool is the kept edges in kept-set order, with a consumed marker
    - a new chain is seeded from the first unconsumed edge
    - each extension takes the first pool edge (in pool order) whose
      endpoint touches the chain's current head or tail
Chain membership is fixed by geometry; which chain an edge lands in, and
point order within it, depend on this policy.
"""

from typing import List

from models.chain import Chain
from models.scored_edge import ScoredEdge
from utils.geometry import within_tolerance


def extend_chain(chain: Chain, edge: ScoredEdge, tolerance: float) -> bool:
    """
    Attaches `edge` to the chain if one of its endpoints touches the tail
    or the head; the *other* endpoint is added at that end.

    Checked in order: a-tail, b-tail, a-head, b-head. Interior points of
    the chain are never considered.

    Returns True if the edge was attached.
    """
    head = chain.head
    tail = chain.tail

    if within_tolerance(edge.a, tail, tolerance):
        chain.append(edge.b, edge)
        return True
    if within_tolerance(edge.b, tail, tolerance):
        chain.append(edge.a, edge)
        return True
    if within_tolerance(edge.a, head, tolerance):
        chain.prepend(edge.b, edge)
        return True
    if within_tolerance(edge.b, head, tolerance):
        chain.prepend(edge.a, edge)
        return True
    return False


def build_chains(kept_edges: List[ScoredEdge], tolerance: float) -> List[Chain]:
    """
    Partitions the kept edges into chains; every edge is consumed by
    exactly one chain. Each chain has at least 2 points.
    """
    pool = list(kept_edges)
    consumed = [False] * len(pool)
    remaining = len(pool)
    chains = []

    seed_idx = 0
    while remaining > 0:
        while consumed[seed_idx]:
            seed_idx += 1

        seed = pool[seed_idx]
        consumed[seed_idx] = True
        remaining -= 1
        chain = Chain(points=[seed.a, seed.b], edges=[seed])

        growing = True
        while growing:
            growing = False
            for idx, e in enumerate(pool):
                if consumed[idx]:
                    continue
                if extend_chain(chain, e, tolerance):
                    consumed[idx] = True
                    remaining -= 1
                    growing = True
                    break

        chains.append(chain)

    return chains
