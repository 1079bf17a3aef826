from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Set

from riskgraph.config import settings
from riskgraph.core.dto import WalletRecord
from riskgraph.core.enums import EdgeKind
from riskgraph.core.models import GraphEdge, GraphNode, WalletGraph
from riskgraph.services.tooltip import format_tooltip


logger = logging.getLogger(__name__)


class GraphBuilderService:
    """
    Rebuilds a wallet relationship graph from the flat record list the
    validate API returns.

    - Root edges: root -> every node with distance > 0
    - Layer edges: first node (input order) on layer - 1 -> node
    - Duplicate ids: first record wins, later ones are dropped and reported

    The layer rule is a stand-in for real parentage; it does not claim the
    linked wallets actually transacted.
    """

    def __init__(self, label_length: int = settings.LABEL_LENGTH) -> None:
        self.label_length = label_length

    def build(self, records: Iterable[WalletRecord], root_id: str) -> WalletGraph:
        nodes, duplicates = self._nodes_for(records)
        edges = self._edges_for(nodes, root_id)

        logger.debug(
            "Built graph for %s: %d nodes, %d edges",
            root_id, len(nodes), len(edges),
        )
        return WalletGraph(
            root_wallet=root_id,
            nodes=nodes,
            edges=edges,
            duplicate_ids=duplicates,
        )

    # -------------------------
    # Nodes
    # -------------------------

    def _nodes_for(self, records: Iterable[WalletRecord]):
        nodes: List[GraphNode] = []
        duplicates: List[str] = []
        seen: Set[str] = set()

        for rec in records:
            if rec.id in seen:
                logger.warning("Duplicate wallet id %s in payload; keeping first record", rec.id)
                duplicates.append(rec.id)
                continue
            seen.add(rec.id)
            nodes.append(
                GraphNode(
                    record=rec,
                    label=self.label_for(rec.id),
                    tooltip=format_tooltip(rec),
                )
            )
        return nodes, duplicates

    def label_for(self, wallet_id: str) -> str:
        if self.label_length <= 0:
            return wallet_id
        return wallet_id[-self.label_length:]

    # -------------------------
    # Edges
    # -------------------------

    def _edges_for(self, nodes: List[GraphNode], root_id: str) -> List[GraphEdge]:
        # same result as scanning the node list per node for the first match
        first_on_layer: Dict[int, GraphNode] = {}
        for n in nodes:
            first_on_layer.setdefault(n.layer, n)

        edges: List[GraphEdge] = []
        for n in nodes:
            if n.distance > 0 and n.id != root_id:
                edges.append(GraphEdge(root_id, n.id, EdgeKind.ROOT))

            parent = first_on_layer.get(n.layer - 1)
            if parent is not None and parent.id != root_id and parent.id != n.id:
                edges.append(GraphEdge(parent.id, n.id, EdgeKind.LAYER))

        return edges


def build_graph(records: Iterable[WalletRecord], root_id: str) -> WalletGraph:
    return GraphBuilderService().build(records, root_id)
