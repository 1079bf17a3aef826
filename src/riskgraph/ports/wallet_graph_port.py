from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class WalletGraphPort(ABC):
    """
    Source of the raw validate payload ({"root_wallet": ..., "nodes": [...]}).
    """

    @abstractmethod
    def fetch_payload(self) -> Dict[str, Any]:
        raise NotImplementedError
