#!/usr/bin/env python3
"""
forcegraph CLI - random networks, graph metrics and force-directed layout

Usage:
    forcegraph random <n> <p>             Generate a network and lay it out
    forcegraph stats <n> <p>              Show metrics for a random network
    forcegraph path <n> <p> <start> <end> Hop distance between two nodes
"""

import argparse
import asyncio
import logging
import random
import sys


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="forcegraph: graph metrics and Fruchterman-Reingold layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    forcegraph random 20 0.15 --seed 7
    forcegraph random 30 0.1 --animate --config layout.yaml
    forcegraph stats 100 0.02
    forcegraph path 50 0.05 n0 n10 --seed 3
        """
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    def add_network_args(p):
        p.add_argument("n", type=int, help="Number of nodes")
        p.add_argument("p", type=float, help="Edge probability for each node pair")
        p.add_argument("--prefix", default="n", help="Node id prefix")
        p.add_argument("--seed", type=int, help="Random seed (overrides config)")
        p.add_argument("--config", "-c", help="Layout config YAML")

    # random command
    random_parser = subparsers.add_parser("random", help="Generate a random network and lay it out")
    add_network_args(random_parser)
    random_parser.add_argument("--animate", "-a", action="store_true", help="Run the animated layout")
    random_parser.add_argument("--width", type=float, help="Canvas width")
    random_parser.add_argument("--height", type=float, help="Canvas height")

    # stats command
    stats_parser = subparsers.add_parser("stats", help="Show metrics for a random network")
    add_network_args(stats_parser)

    # path command
    path_parser = subparsers.add_parser("path", help="Shortest path length between two nodes")
    add_network_args(path_parser)
    path_parser.add_argument("start", help="Start node id")
    path_parser.add_argument("end", help="End node id")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Import here to avoid slow startup for --help
    from .config import load_config
    from .core import ForceGraphError, Graph, generate_random_network
    from .logging_config import setup_logging

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if getattr(args, "width", None) is not None:
        config.width = args.width
    if getattr(args, "height", None) is not None:
        config.height = args.height
    if args.seed is not None:
        config.seed = args.seed

    try:
        graph = Graph(width=config.width, height=config.height, rng=random.Random(config.seed))
        generate_random_network(graph, args.n, args.p, args.prefix)

        if args.command == "random":
            return cmd_random(graph, config, args)
        elif args.command == "stats":
            return cmd_stats(graph, args)
        elif args.command == "path":
            return cmd_path(graph, args)
    except ForceGraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Invalid arguments: {e}", file=sys.stderr)
        return 1

    return 0


def cmd_random(graph, config, args):
    """Handle random command."""
    from .display import console, print_positions
    from .layout import FruchtermanReingold

    engine = FruchtermanReingold(graph, config.to_params())

    if not args.animate:
        snapshot = engine.solve()
        print_positions(snapshot)
        return 0

    done = [0]

    def on_step(snapshot):
        done[0] += 1
        console.print(f"[dim]pass {done[0]}/{config.iterations}[/dim]")

    try:
        passes = asyncio.run(engine.animate(on_step))
    except KeyboardInterrupt:
        # asyncio.run cancels the task; the graph holds the last completed pass
        passes = None

    title = "Node Positions" if passes is None else f"Node Positions ({passes} passes)"
    print_positions(graph.snapshot(), title=title)
    return 0


def cmd_stats(graph, args):
    """Handle stats command."""
    from .display import print_stats

    print_stats(graph)
    return 0


def cmd_path(graph, args):
    """Handle path command."""
    from .core import Analyzer

    distance = Analyzer(graph).shortest_path(args.start, args.end)
    print(f"{args.start} -> {args.end}: {distance} hop(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
