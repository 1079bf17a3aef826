from __future__ import annotations

from typing import Any, Dict, Tuple

from riskgraph.config import settings
from riskgraph.core.models import EdgeStyle, GraphEdge, GraphNode, WalletGraph
from riskgraph.services.risk_encoder import encode_risk


NEUTRAL_EDGE = EdgeStyle("rgba(100, 116, 139, 0.2)", 1, False)

# strict ">" bands, coarser than the node tiers
EDGE_BANDS: Tuple[Tuple[float, str], ...] = (
    (80, "rgba(220, 38, 38, 0.5)"),
    (60, "rgba(239, 68, 68, 0.4)"),
    (40, "rgba(249, 115, 22, 0.3)"),
)

BOLD_EDGE_THRESHOLD = 60


def node_size(node: GraphNode, base_size: float = settings.NODE_BASE_SIZE) -> float:
    """Unbounded above; clamp on the render side if needed."""
    return base_size + node.suspicion_score / settings.SIZE_DIVISOR


def node_color(node: GraphNode) -> str:
    return encode_risk(node.suspicion_score).fill


def node_glow(node: GraphNode) -> str:
    return encode_risk(node.suspicion_score).glow


def label_height(node: GraphNode) -> float:
    return settings.LABEL_BASE_HEIGHT + node.suspicion_score / settings.SIZE_DIVISOR


def edge_style(edge: GraphEdge, graph: WalletGraph) -> EdgeStyle:
    """
    Color and width of an edge, taken from its source node's suspicion score.

    The root wallet is often missing from the node list, so an unknown source
    gets the neutral style instead of an error.
    """
    source = graph.lookup(edge.source)
    if source is None:
        return NEUTRAL_EDGE

    score = source.suspicion_score
    bold = score > BOLD_EDGE_THRESHOLD
    width = 2 if bold else 1
    for threshold, color in EDGE_BANDS:
        if score > threshold:
            return EdgeStyle(color, width, bold)
    return EdgeStyle(NEUTRAL_EDGE.color, width, bold)


def node_attributes(node: GraphNode) -> Dict[str, Any]:
    style = encode_risk(node.suspicion_score)
    return {
        "color": style.fill,
        "glow": style.glow,
        "opacity": style.opacity,
        "tier": style.tier.value,
        "val": node_size(node),
        "label_height": label_height(node),
    }


def edge_attributes(edge: GraphEdge, graph: WalletGraph) -> Dict[str, Any]:
    style = edge_style(edge, graph)
    return {
        "color": style.color,
        "width": style.width,
        "bold": style.bold,
    }
