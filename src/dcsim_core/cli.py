# src/dcsim_core/cli.py
"""
Command-line interface for DCSim Core.

Usage::

    dcsim solve divider.txt
    dcsim solve divider.yaml --epsilon 1e-12
    dcsim show divider.txt
    dcsim dot divider.txt --output divider.dot
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .analysis.visualization import format_adjacency_list, format_results, to_graphviz_dot
from .circuit_builder import load_netlist
from .errors import DCSimError
from .log_config import setup_logging
from .simulation.config import ConfigParsingError, SolverConfig

logger = logging.getLogger(__name__)


def cmd_solve(args) -> int:
    circuit = load_netlist(args.netlist)
    if args.epsilon is not None:
        circuit.solver_config = SolverConfig(epsilon=args.epsilon)
    outcome = circuit.solve()
    if not outcome.ok:
        print(outcome.error.get_diagnostic_report(), file=sys.stderr)
        return 1
    print(format_results(outcome.solution, decimals=args.decimals))
    return 0


def cmd_show(args) -> int:
    circuit = load_netlist(args.netlist)
    print(format_adjacency_list(circuit.node_registry, circuit.list_components()))
    return 0


def cmd_dot(args) -> int:
    circuit = load_netlist(args.netlist)
    dot = to_graphviz_dot(circuit.node_registry, circuit.list_components(), graph_name=circuit.name)
    if args.output:
        Path(args.output).write_text(dot + "\n", encoding="utf-8")
        logger.info(f"Graphviz source written to {args.output}")
    else:
        print(dot)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dcsim",
        description="Solve resistive DC networks with Modified Nodal Analysis.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    solve_parser = subparsers.add_parser("solve", help="Solve a netlist and print node voltages")
    solve_parser.add_argument("netlist", help="Path to a text (.txt, .net) or YAML (.yaml) netlist")
    solve_parser.add_argument("--epsilon", type=float, default=None, help="Pivot threshold for singularity detection")
    solve_parser.add_argument("--decimals", type=int, default=3, help="Decimals printed per voltage (default: 3)")
    solve_parser.set_defaults(func=cmd_solve)

    show_parser = subparsers.add_parser("show", help="Print the circuit as an adjacency list")
    show_parser.add_argument("netlist", help="Path to the netlist")
    show_parser.set_defaults(func=cmd_show)

    dot_parser = subparsers.add_parser("dot", help="Export the circuit as Graphviz source")
    dot_parser.add_argument("netlist", help="Path to the netlist")
    dot_parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    dot_parser.set_defaults(func=cmd_dot)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 2

    setup_logging(getattr(logging, args.log_level))
    try:
        return args.func(args)
    except DCSimError as e:
        print(str(e), file=sys.stderr)
        return 1
    except ConfigParsingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
