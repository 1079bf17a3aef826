from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional


@dataclass(frozen=True)
class WalletRecord:
    id: str
    distance: int           # hops from the root wallet (0 only for the root)
    layer: int              # generation index used for linking
    risk_score: float
    suspicion_score: float  # 0..100
    is_scam: bool
    balance: Decimal        # native currency units
    tx_count: int
    type: Optional[str] = None


@dataclass(frozen=True)
class GraphPayload:
    root_wallet: str
    nodes: List[WalletRecord]
