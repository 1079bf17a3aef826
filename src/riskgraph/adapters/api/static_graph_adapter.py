from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from riskgraph.core.errors import DataSourceError
from riskgraph.ports.wallet_graph_port import WalletGraphPort


class StaticGraphAdapter(WalletGraphPort):
    """
    Serves a fixed payload, either given directly or read from a JSON file.
    """

    def __init__(
        self,
        payload: Optional[Dict[str, Any]] = None,
        path: Optional[str] = None,
    ) -> None:
        if payload is None and path is None:
            raise ValueError("StaticGraphAdapter needs a payload or a path")
        self._payload = payload
        self._path = Path(path) if path else None

    def fetch_payload(self) -> Dict[str, Any]:
        if self._payload is not None:
            # callers must not be able to mutate the stored payload
            return copy.deepcopy(self._payload)
        try:
            with self._path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise DataSourceError(f"Could not read payload from {self._path}: {e}") from e
