from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping

from riskgraph.core.dto import GraphPayload, WalletRecord
from riskgraph.core.errors import MalformedInputError
from riskgraph.core.models import WalletGraph
from riskgraph.services.visual_projection import edge_attributes, node_attributes


# the validate API spells it "suspicious_score"
_SUSPICION_KEYS = ("suspicious_score", "suspicion_score")


def _dec_to_str(x: Decimal) -> str:
    # keep as string for JSON precision safety
    return format(x, "f")


def _missing(index: int, field: str) -> MalformedInputError:
    return MalformedInputError(f"nodes[{index}]: missing required field '{field}'")


def _bad(index: int, field: str, value: Any, expected: str) -> MalformedInputError:
    return MalformedInputError(
        f"nodes[{index}]: field '{field}' must be {expected}, got {value!r}"
    )


def _as_int(raw: Mapping[str, Any], index: int, field: str) -> int:
    if field not in raw:
        raise _missing(index, field)
    value = raw[field]
    if isinstance(value, bool):
        raise _bad(index, field, value, "an integer")
    if isinstance(value, int):
        out = value
    elif isinstance(value, float) and value.is_integer():
        out = int(value)
    else:
        raise _bad(index, field, value, "an integer")
    if out < 0:
        raise _bad(index, field, value, "non-negative")
    return out


def _as_number(raw: Mapping[str, Any], index: int, field: str) -> float:
    value = raw[field]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _bad(index, field, value, "a number")
    try:
        out = float(value)
    except OverflowError as e:
        raise _bad(index, field, value, "a finite number") from e
    # NaN / Infinity have no JSON encoding for the renderer
    if not math.isfinite(out):
        raise _bad(index, field, value, "a finite number")
    return out


def _as_balance(raw: Mapping[str, Any], index: int) -> Decimal:
    if "balance" not in raw:
        raise _missing(index, "balance")
    value = raw["balance"]
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise _bad(index, "balance", value, "a decimal number")
    try:
        out = Decimal(str(value))
    except InvalidOperation as e:
        raise _bad(index, "balance", value, "a decimal number") from e
    if not out.is_finite() or out < 0:
        raise _bad(index, "balance", value, "a non-negative decimal")
    return out


def record_from_dict(raw: Any, index: int = 0) -> WalletRecord:
    if not isinstance(raw, Mapping):
        raise MalformedInputError(f"nodes[{index}]: expected an object, got {type(raw).__name__}")

    if "id" not in raw:
        raise _missing(index, "id")
    wallet_id = raw["id"]
    if not isinstance(wallet_id, str) or not wallet_id:
        raise _bad(index, "id", wallet_id, "a non-empty string")

    if "risk_score" not in raw:
        raise _missing(index, "risk_score")
    risk = _as_number(raw, index, "risk_score")

    key = next((k for k in _SUSPICION_KEYS if k in raw), None)
    if key is None:
        raise _missing(index, _SUSPICION_KEYS[0])
    suspicion = _as_number(raw, index, key)

    if "is_scam" not in raw:
        raise _missing(index, "is_scam")
    is_scam = raw["is_scam"]
    if not isinstance(is_scam, bool):
        raise _bad(index, "is_scam", is_scam, "a boolean")

    kind = raw.get("type")
    return WalletRecord(
        id=wallet_id,
        distance=_as_int(raw, index, "distance"),
        layer=_as_int(raw, index, "layer"),
        risk_score=risk,
        suspicion_score=suspicion,
        is_scam=is_scam,
        balance=_as_balance(raw, index),
        tx_count=_as_int(raw, index, "tx_count"),
        type=str(kind) if kind is not None else None,
    )


def payload_from_dict(data: Any) -> GraphPayload:
    """
    Validate a validate-API response and turn it into records.

    Fails on the first problem found; nothing is built from a partial payload.
    """
    if not isinstance(data, Mapping):
        raise MalformedInputError(f"payload must be an object, got {type(data).__name__}")
    if "root_wallet" not in data:
        raise MalformedInputError("payload missing required field 'root_wallet'")
    if "nodes" not in data:
        raise MalformedInputError("payload missing required field 'nodes'")

    root = data["root_wallet"]
    if not isinstance(root, str) or not root:
        raise MalformedInputError(f"'root_wallet' must be a non-empty string, got {root!r}")
    raw_nodes = data["nodes"]
    if not isinstance(raw_nodes, list):
        raise MalformedInputError(f"'nodes' must be a list, got {type(raw_nodes).__name__}")

    records: List[WalletRecord] = [record_from_dict(r, i) for i, r in enumerate(raw_nodes)]
    return GraphPayload(root_wallet=root, nodes=records)


def record_to_dict(rec: WalletRecord) -> Dict[str, Any]:
    return {
        "id": rec.id,
        "type": rec.type,
        "distance": rec.distance,
        "layer": rec.layer,
        "risk_score": rec.risk_score,
        "suspicious_score": rec.suspicion_score,
        "is_scam": rec.is_scam,
        "balance": _dec_to_str(rec.balance),
        "tx_count": rec.tx_count,
    }


def graph_to_dict(g: WalletGraph) -> Dict[str, Any]:
    return {
        "root_wallet": g.root_wallet,
        "nodes": [
            {
                **record_to_dict(n.record),
                "label": n.label,
                "tooltip": n.tooltip,
                **node_attributes(n),
            }
            for n in g.nodes
        ],
        "links": [
            {
                "source": e.source,
                "target": e.target,
                "kind": e.kind.value,
                **edge_attributes(e, g),
            }
            for e in g.edges
        ],
        "duplicate_ids": list(g.duplicate_ids),
    }
