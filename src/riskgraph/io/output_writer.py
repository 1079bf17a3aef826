from __future__ import annotations

import json
from collections import Counter
from pathlib import Path

from riskgraph.core.enums import RiskTier
from riskgraph.core.models import WalletGraph
from riskgraph.io.schemas import graph_to_dict
from riskgraph.services.risk_encoder import risk_tier


def write_graph_json(graph: WalletGraph, out_dir: str, filename: str = "graph.json") -> str:
    p = Path(out_dir)
    p.mkdir(parents=True, exist_ok=True)

    out_path = p / filename
    # browsers reject NaN / Infinity; fail before touching the file
    text = json.dumps(graph_to_dict(graph), indent=2, ensure_ascii=False, allow_nan=False)
    with out_path.open("w", encoding="utf-8") as f:
        f.write(text)

    return str(out_path)


def write_summary_md(graph: WalletGraph, out_dir: str, filename: str = "summary.md", top: int = 10) -> str:
    """
    Short investigator-facing summary of the risk graph.
    """
    p = Path(out_dir)
    p.mkdir(parents=True, exist_ok=True)

    out_path = p / filename

    tiers = Counter(risk_tier(n.suspicion_score) for n in graph.nodes)
    scams = [n for n in graph.nodes if n.record.is_scam]
    ranked = sorted(graph.nodes, key=lambda n: n.suspicion_score, reverse=True)[:top]

    lines = []
    lines.append("# Wallet Risk Summary\n")
    lines.append(f"- Root: **{graph.root_wallet}**\n")
    lines.append(f"- Wallets: **{len(graph.nodes)}**\n")
    lines.append(f"- Links: **{len(graph.edges)}**\n")
    lines.append(f"- Flagged as scam: **{len(scams)}**\n")
    lines.append("\n")

    lines.append("## Risk Levels\n\n")
    for tier in RiskTier:
        lines.append(f"- {tier.marker} **{tier.display_name}**: {tiers.get(tier, 0)}\n")
    lines.append("\n")

    lines.append(f"## Top {top} Suspicious Wallets\n\n")
    if not ranked:
        lines.append("_No wallets in this payload._\n\n")
    else:
        for n in ranked:
            flag = " | scam" if n.record.is_scam else ""
            lines.append(
                f"- **{n.suspicion_score:g}/100** | layer {n.layer} | {n.id}{flag}\n"
            )
        lines.append("\n")

    if graph.duplicate_ids:
        lines.append("## Duplicate Wallet Ids\n\n")
        lines.append("Only the first record for each id was used.\n\n")
        for wallet_id in sorted(set(graph.duplicate_ids)):
            lines.append(f"- {wallet_id}\n")
        lines.append("\n")

    lines.append("## Limitations\n\n")
    lines.append("- Layer links join each wallet to the first wallet listed on the previous layer;\n")
    lines.append("  they are not confirmed transfers.\n")
    lines.append("- Scores come from the validate API and are shown as received.\n")

    with out_path.open("w", encoding="utf-8") as f:
        f.writelines(lines)

    return str(out_path)


def write_graph_html(graph: WalletGraph, out_dir: str, filename: str = "index.html") -> str:
    p = Path(out_dir)
    p.mkdir(parents=True, exist_ok=True)

    out_path = p / filename

    html = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Wallet Risk Network</title>
  <style>
    :root {
      --bg: #0a0a0a;
      --panel: #151824;
      --text: #e6e8ef;
      --muted: #9aa3b2;
    }
    body {
      margin: 0;
      font-family: "SF Mono", "Menlo", "Consolas", monospace;
      background: var(--bg);
      color: var(--text);
    }
    header {
      padding: 16px 20px;
      border-bottom: 1px solid #23283a;
      background: var(--panel);
    }
    header h1 {
      margin: 0;
      font-size: 18px;
      letter-spacing: 0.5px;
    }
    header p {
      margin: 6px 0 0 0;
      font-size: 12px;
      color: var(--muted);
    }
    #wrap {
      display: grid;
      grid-template-columns: 300px 1fr;
      height: calc(100vh - 64px);
    }
    #sidebar {
      padding: 14px;
      border-right: 1px solid #23283a;
      background: var(--panel);
      overflow-y: auto;
    }
    #sidebar h2 {
      font-size: 13px;
      margin: 10px 0 6px 0;
      color: var(--muted);
      text-transform: uppercase;
      letter-spacing: 0.08em;
    }
    #sidebar .stat {
      font-size: 13px;
      margin-bottom: 8px;
    }
    #network {
      width: 100%;
      height: 100%;
      min-height: 600px;
      background: var(--bg);
    }
    .legend {
      font-size: 12px;
      color: var(--muted);
    }
    .legend span {
      display: inline-block;
      width: 10px;
      height: 10px;
      margin-right: 6px;
      border-radius: 50%;
    }
    #details {
      font-size: 11px;
      white-space: pre-wrap;
      color: var(--text);
    }
  </style>
</head>
<body>
  <header>
    <h1>Wallet Risk Network</h1>
    <p>Blockchain transaction graph with risk-based visualization</p>
  </header>
  <div id="wrap">
    <div id="sidebar">
      <div class="stat" id="stats">Loading...</div>
      <h2>Risk Levels</h2>
      <div class="legend"><span style="background: #22c55e;"></span>Safe (0-20)</div>
      <div class="legend"><span style="background: #eab308;"></span>Low Risk (20-40)</div>
      <div class="legend"><span style="background: #f97316;"></span>Medium Risk (40-60)</div>
      <div class="legend"><span style="background: #ef4444;"></span>High Risk (60-80)</div>
      <div class="legend"><span style="background: #dc2626;"></span>Critical (80-100)</div>
      <h2>Details</h2>
      <div id="details">Hover a wallet for details</div>
    </div>
    <div id="network"></div>
  </div>

  <script src="https://unpkg.com/vis-network/standalone/umd/vis-network.min.js"></script>
  <script>
    fetch("./graph.json")
      .then((r) => r.json())
      .then((data) => {
        if (!window.vis || !window.vis.Network) {
          document.getElementById("stats").textContent = "Graph library failed to load.";
          return;
        }
        const byId = {};
        const nodes = data.nodes.map((n) => {
          byId[n.id] = n;
          return {
            id: n.id,
            label: n.label,
            shape: "dot",
            color: { background: n.color, border: n.glow },
            shadow: { enabled: true, color: n.glow, size: 12 },
            size: n.val,
            font: { color: "#ffffff", size: 10 + n.label_height * 4 },
          };
        });
        if (!byId[data.root_wallet]) {
          nodes.push({
            id: data.root_wallet,
            label: data.root_wallet.slice(-4),
            shape: "diamond",
            color: "#64748b",
            size: 10,
            font: { color: "#ffffff" },
          });
        }

        const edges = data.links.map((e) => ({
          from: e.source,
          to: e.target,
          arrows: "to",
          color: e.color,
          width: e.width,
          smooth: { type: "curvedCW", roundness: 0.1 },
        }));

        const container = document.getElementById("network");
        const options = {
          layout: { improvedLayout: true },
          physics: { stabilization: { iterations: 200 } },
          interaction: { hover: true },
        };
        const network = new vis.Network(container, { nodes, edges }, options);
        network.once("stabilizationIterationsDone", () => {
          network.fit({ animation: true });
        });

        const details = document.getElementById("details");
        network.on("hoverNode", (params) => {
          const n = byId[params.node];
          details.textContent = n ? n.tooltip : params.node;
        });
        network.on("blurNode", () => {
          details.textContent = "Hover a wallet for details";
        });

        const stats = document.getElementById("stats");
        stats.textContent = `Wallets: ${data.nodes.length} • Links: ${edges.length}`;
      })
      .catch((err) => {
        document.getElementById("stats").textContent = "Failed to load graph.json";
        console.error(err);
      });
  </script>
</body>
</html>
"""

    with out_path.open("w", encoding="utf-8") as f:
        f.write(html)

    return str(out_path)
