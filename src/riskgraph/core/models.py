from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from riskgraph.core.dto import WalletRecord
from riskgraph.core.enums import EdgeKind, RiskTier



# Visual encoding models

@dataclass(frozen=True)
class RiskStyle:
    """
    Visual encoding of a suspicion score.
    """

    tier: RiskTier
    fill: str
    glow: str
    opacity: float


@dataclass(frozen=True)
class EdgeStyle:

    color: str
    width: int
    bold: bool



# Graph models

@dataclass(frozen=True)
class GraphNode:

    record: WalletRecord
    label: str
    tooltip: str

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def layer(self) -> int:
        return self.record.layer

    @property
    def distance(self) -> int:
        return self.record.distance

    @property
    def suspicion_score(self) -> float:
        return self.record.suspicion_score


@dataclass(frozen=True)
class GraphEdge:

    source: str
    target: str
    kind: EdgeKind

    def pair(self) -> tuple:
        return (self.source, self.target)


@dataclass(frozen=True)
class WalletGraph:
    """
    Result of one build. Collections are tuples; the id index is built once
    at construction.
    """

    root_wallet: str
    nodes: Tuple[GraphNode, ...] = ()
    edges: Tuple[GraphEdge, ...] = ()

    # ids seen more than once in the input; only the first record is kept
    duplicate_ids: Tuple[str, ...] = ()

    _index: Dict[str, GraphNode] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))
        object.__setattr__(self, "duplicate_ids", tuple(self.duplicate_ids))

        index: Dict[str, GraphNode] = {}
        for n in self.nodes:
            index.setdefault(n.id, n)
        object.__setattr__(self, "_index", index)

    def lookup(self, node_id: str) -> Optional[GraphNode]:
        return self._index.get(node_id)

    def edge_pairs(self) -> List[tuple]:
        return [e.pair() for e in self.edges]
