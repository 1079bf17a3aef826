from __future__ import annotations

import argparse
import logging
import sys

from riskgraph.adapters.api.static_graph_adapter import StaticGraphAdapter
from riskgraph.adapters.api.validate_api_adapter import ValidateApiAdapter
from riskgraph.config import settings
from riskgraph.core.errors import RiskGraphError
from riskgraph.io.output_writer import write_graph_html, write_graph_json, write_summary_md
from riskgraph.services.graph_service import GraphService


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="riskgraph", description="Wallet risk graph builder")
    p.add_argument("--input", help="Read the validate payload from a JSON file instead of the API")
    p.add_argument("--url", default=settings.RISKGRAPH_API_URL, help="Validate API endpoint")
    p.add_argument("--out", default="out", help="Output folder")
    p.add_argument("--html", action="store_true", help="Write an HTML visualization alongside graph.json")
    p.add_argument("--log-level", default=settings.RISKGRAPH_LOG_LEVEL, help="Logging level (DEBUG, INFO, ...)")
    return p


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    level = getattr(logging, str(args.log_level).upper(), None)
    if not isinstance(level, int):
        print(f"Unknown --log-level {args.log_level!r}", file=sys.stderr)
        return 2
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Ports
    if args.input:
        source = StaticGraphAdapter(path=args.input)
        adapter_label = f"StaticGraphAdapter ({args.input})"
    else:
        source = ValidateApiAdapter(url=args.url)
        adapter_label = f"ValidateApiAdapter ({args.url})"

    svc = GraphService(source=source)
    print(f"Adapter: {adapter_label}")
    try:
        graph = svc.load()
    except RiskGraphError as exc:
        print(f"Error: {exc.__class__.__name__}: {exc}", file=sys.stderr)
        return 1

    # Outputs
    print("Writing outputs...")
    graph_path = write_graph_json(graph, args.out)
    summary_path = write_summary_md(graph, args.out)
    html_path = None
    if args.html:
        html_path = write_graph_html(graph, args.out)

    print(f"Wrote: {graph_path}")
    print(f"Wrote: {summary_path}")
    if html_path:
        print(f"Wrote: {html_path}")
    print(f"{len(graph.nodes)} wallets • {len(graph.edges)} links")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
