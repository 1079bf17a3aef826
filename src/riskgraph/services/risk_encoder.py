from __future__ import annotations

from typing import Tuple

from riskgraph.core.enums import RiskTier
from riskgraph.core.models import RiskStyle


# (threshold, style) from most to least severe; first band whose threshold is
# <= score wins, so a score sitting on a boundary takes the higher tier.
RISK_BANDS: Tuple[Tuple[float, RiskStyle], ...] = (
    (80, RiskStyle(RiskTier.CRITICAL, "#dc2626", "rgba(220, 38, 38, 0.6)", 0.6)),
    (60, RiskStyle(RiskTier.HIGH, "#ef4444", "rgba(239, 68, 68, 0.5)", 0.5)),
    (40, RiskStyle(RiskTier.MEDIUM, "#f97316", "rgba(249, 115, 22, 0.4)", 0.4)),
    (20, RiskStyle(RiskTier.LOW, "#eab308", "rgba(234, 179, 8, 0.3)", 0.3)),
)

SAFE_STYLE = RiskStyle(RiskTier.SAFE, "#22c55e", "rgba(34, 197, 94, 0.2)", 0.2)


def encode_risk(suspicion_score: float) -> RiskStyle:
    # NaN fails every comparison and lands on Safe
    for threshold, style in RISK_BANDS:
        if suspicion_score >= threshold:
            return style
    return SAFE_STYLE


def risk_tier(suspicion_score: float) -> RiskTier:
    return encode_risk(suspicion_score).tier
