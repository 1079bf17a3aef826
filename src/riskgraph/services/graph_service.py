from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from riskgraph.core.models import WalletGraph
from riskgraph.io.schemas import payload_from_dict
from riskgraph.ports.wallet_graph_port import WalletGraphPort
from riskgraph.services.graph_builder import GraphBuilderService


logger = logging.getLogger(__name__)


class GraphService:
    """
    Fetch -> validate -> build.

    Holds no per-call state, so a result from an older fetch can simply be
    dropped when a newer one arrives.
    """

    def __init__(self, source: WalletGraphPort, builder: Optional[GraphBuilderService] = None) -> None:
        self.source = source
        self.builder = builder or GraphBuilderService()

    def load(self) -> WalletGraph:
        return self.from_payload(self.source.fetch_payload())

    def from_payload(self, data: Dict[str, Any]) -> WalletGraph:
        payload = payload_from_dict(data)
        logger.info(
            "Building graph for root %s from %d record(s)",
            payload.root_wallet, len(payload.nodes),
        )
        return self.builder.build(payload.nodes, payload.root_wallet)
