from __future__ import annotations

from decimal import Decimal
from typing import Union

from riskgraph.core.dto import WalletRecord
from riskgraph.services.risk_encoder import risk_tier


HEAVY_RULE = "═" * 40
LIGHT_RULE = "─" * 40


def _plain(value: Union[int, float, Decimal]) -> str:
    # 85.0 -> "85", 12.5 -> "12.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _balance(value: Decimal) -> str:
    return f"{Decimal(value):.6f}"


def format_tooltip(record: WalletRecord) -> str:
    """
    Fixed-layout wallet report shown when hovering a node.

    Display only: nothing downstream parses this text.
    """
    tier = risk_tier(record.suspicion_score)
    status = f"{tier.marker} {tier.display_name}"
    scam = "⛔ Yes" if record.is_scam else "✓ No"

    lines = [
        HEAVY_RULE,
        f"  WALLET  |  Layer {record.layer}",
        LIGHT_RULE,
        f"  Address   {record.id}",
        f"  Balance   {_balance(record.balance)} ETH",
        f"  Tx Count  {int(record.tx_count)}",
        LIGHT_RULE,
        f"  Risk Score       {_plain(record.risk_score)}",
        f"  Suspicion Score  {_plain(record.suspicion_score)}/100",
        f"  Status           {status}",
        f"  Is Scam          {scam}",
        HEAVY_RULE,
    ]
    return "\n".join(lines)
