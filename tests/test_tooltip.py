import unittest
from decimal import Decimal

from riskgraph.core.dto import WalletRecord
from riskgraph.services.tooltip import format_tooltip


def _rec(**overrides) -> WalletRecord:
    defaults = dict(
        id="0xabc123",
        distance=1,
        layer=2,
        risk_score=42.0,
        suspicion_score=85.0,
        is_scam=False,
        balance=Decimal("1.5"),
        tx_count=17,
    )
    defaults.update(overrides)
    return WalletRecord(**defaults)


class TooltipTests(unittest.TestCase):
    def test_contains_wallet_fields(self) -> None:
        text = format_tooltip(_rec())

        self.assertIn("Layer 2", text)
        self.assertIn("0xabc123", text)
        self.assertIn("1.500000 ETH", text)
        self.assertIn("Tx Count  17", text)
        self.assertIn("Risk Score       42", text)
        self.assertIn("85/100", text)

    def test_zero_balance_has_six_decimals(self) -> None:
        text = format_tooltip(_rec(balance=Decimal("0")))
        self.assertIn("0.000000", text)

    def test_large_values(self) -> None:
        text = format_tooltip(_rec(balance=Decimal("123456789.1234567"), tx_count=10**9))
        self.assertIn("123456789.123457", text)
        self.assertIn("1000000000", text)

    def test_status_follows_risk_bands(self) -> None:
        self.assertIn("🚨 Critical Fraud", format_tooltip(_rec(suspicion_score=80)))
        self.assertIn("🔴 High Risk", format_tooltip(_rec(suspicion_score=60)))
        self.assertIn("⚠️ Medium Risk", format_tooltip(_rec(suspicion_score=40)))
        self.assertIn("⚡ Low Risk", format_tooltip(_rec(suspicion_score=20)))
        self.assertIn("✅ Safe", format_tooltip(_rec(suspicion_score=-3)))

    def test_scam_flag(self) -> None:
        self.assertIn("⛔ Yes", format_tooltip(_rec(is_scam=True)))
        self.assertIn("✓ No", format_tooltip(_rec(is_scam=False)))

    def test_fractional_scores_kept(self) -> None:
        text = format_tooltip(_rec(risk_score=12.5, suspicion_score=33.25))
        self.assertIn("Risk Score       12.5", text)
        self.assertIn("33.25/100", text)

    def test_fixed_layout(self) -> None:
        lines = format_tooltip(_rec()).split("\n")
        self.assertEqual(len(lines), 12)
        self.assertEqual(lines[0], "═" * 40)
        self.assertEqual(lines[-1], "═" * 40)


if __name__ == "__main__":
    unittest.main()
