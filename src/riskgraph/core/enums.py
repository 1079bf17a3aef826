from __future__ import annotations

from enum import Enum


class RiskTier(str, Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    SAFE = "Safe"

    @property
    def display_name(self) -> str:
        return _DISPLAY[self]

    @property
    def marker(self) -> str:
        return _MARKERS[self]


_DISPLAY = {
    RiskTier.CRITICAL: "Critical Fraud",
    RiskTier.HIGH: "High Risk",
    RiskTier.MEDIUM: "Medium Risk",
    RiskTier.LOW: "Low Risk",
    RiskTier.SAFE: "Safe",
}

_MARKERS = {
    RiskTier.CRITICAL: "🚨",
    RiskTier.HIGH: "🔴",
    RiskTier.MEDIUM: "⚠️",
    RiskTier.LOW: "⚡",
    RiskTier.SAFE: "✅",
}


class EdgeKind(str, Enum):
    ROOT = "root"
    LAYER = "layer"
