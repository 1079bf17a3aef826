import unittest
from decimal import Decimal

from riskgraph.core.dto import WalletRecord
from riskgraph.core.enums import EdgeKind
from riskgraph.core.models import GraphEdge
from riskgraph.services.graph_builder import build_graph
from riskgraph.services.visual_projection import (
    NEUTRAL_EDGE,
    edge_attributes,
    edge_style,
    label_height,
    node_attributes,
    node_color,
    node_glow,
    node_size,
)


def _rec(wallet_id: str, distance: int, layer: int, suspicion: float) -> WalletRecord:
    return WalletRecord(
        id=wallet_id,
        distance=distance,
        layer=layer,
        risk_score=0.0,
        suspicion_score=suspicion,
        is_scam=False,
        balance=Decimal("0"),
        tx_count=0,
    )


class VisualProjectionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.graph = build_graph(
            [
                _rec("0xROOT", 0, 0, 0),
                _rec("0xA", 1, 1, 85),
                _rec("0xB", 2, 2, 10),
                _rec("0xC", 1, 1, 61),
                _rec("0xD", 1, 1, 60),
                _rec("0xE", 1, 1, 45),
            ],
            "0xROOT",
        )

    def test_node_size_grows_with_suspicion(self) -> None:
        self.assertAlmostEqual(node_size(self.graph.lookup("0xROOT")), 8.0)
        self.assertAlmostEqual(node_size(self.graph.lookup("0xA")), 8 + 85 / 15)
        self.assertAlmostEqual(node_size(self.graph.lookup("0xA"), base_size=2), 2 + 85 / 15)

    def test_node_colors_use_risk_tiers(self) -> None:
        self.assertEqual(node_color(self.graph.lookup("0xA")), "#dc2626")
        self.assertEqual(node_color(self.graph.lookup("0xB")), "#22c55e")
        self.assertEqual(node_glow(self.graph.lookup("0xE")), "rgba(249, 115, 22, 0.4)")

    def test_label_height(self) -> None:
        self.assertAlmostEqual(label_height(self.graph.lookup("0xB")), 0.4 + 10 / 15)

    def test_edge_style_from_source_node(self) -> None:
        style = edge_style(GraphEdge("0xA", "0xB", EdgeKind.LAYER), self.graph)
        self.assertEqual(style.color, "rgba(220, 38, 38, 0.5)")
        self.assertEqual(style.width, 2)
        self.assertTrue(style.bold)

    def test_edge_bands_are_strict(self) -> None:
        high = edge_style(GraphEdge("0xC", "0xB", EdgeKind.LAYER), self.graph)
        self.assertEqual((high.color, high.width, high.bold), ("rgba(239, 68, 68, 0.4)", 2, True))

        # exactly 60 is not above 60
        medium = edge_style(GraphEdge("0xD", "0xB", EdgeKind.LAYER), self.graph)
        self.assertEqual((medium.color, medium.width, medium.bold), ("rgba(249, 115, 22, 0.3)", 1, False))

        low = edge_style(GraphEdge("0xB", "0xA", EdgeKind.LAYER), self.graph)
        self.assertEqual(low, NEUTRAL_EDGE)

    def test_unknown_source_returns_neutral_default(self) -> None:
        style = edge_style(GraphEdge("0xNOPE", "0xA", EdgeKind.ROOT), self.graph)
        self.assertEqual(style, NEUTRAL_EDGE)
        self.assertEqual(style.color, "rgba(100, 116, 139, 0.2)")
        self.assertEqual(style.width, 1)
        self.assertFalse(style.bold)

    def test_attribute_dicts(self) -> None:
        attrs = node_attributes(self.graph.lookup("0xA"))
        self.assertEqual(attrs["tier"], "Critical")
        self.assertEqual(attrs["color"], "#dc2626")
        self.assertAlmostEqual(attrs["val"], 8 + 85 / 15)

        edge = edge_attributes(GraphEdge("0xC", "0xB", EdgeKind.LAYER), self.graph)
        self.assertEqual(edge, {"color": "rgba(239, 68, 68, 0.4)", "width": 2, "bold": True})


if __name__ == "__main__":
    unittest.main()
