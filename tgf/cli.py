"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from tgf.codec import codecs
from tgf.config import GraphConfig
from tgf.errors import GraphError
from tgf.graph import Graph
from tgf.logs import fatal, setup_logging
from tgf.render import FormatError, NodeRenderer
from tgf.text import records
from tgf.watch import Watcher


def main(argv: Optional[List[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    log_level = logging.WARNING
    if args.verbose and args.verbose == 1:
        log_level = logging.INFO
    elif args.verbose and args.verbose >= 2:
        log_level = logging.DEBUG
    exit_level = logging.ERROR
    # The watcher reports errors in the file and keeps watching.
    if args.keep_going or args.command == "watch":
        exit_level = logging.FATAL
    setup_logging(sys.stderr, log_level, exit_level)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(prog="tgf", description="inspect trivial graph format files")
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_show = commands.add_parser("show", help="list nodes and their neighbors")
    parser_show.add_argument("file", nargs="?", help="graph file (default: test.tgf)")

    parser_walk = commands.add_parser("walk", help="list nodes reachable from a node")
    parser_walk.add_argument("file", help="graph file")
    parser_walk.add_argument("root", type=int, help="id of the starting node")

    parser_check = commands.add_parser("check", help="validate a graph file")
    parser_check.add_argument("file", help="graph file")

    parser_format = commands.add_parser("format", help="print a graph file canonically")
    parser_format.add_argument("file", help="graph file")

    parser_watch = commands.add_parser("watch", help="show again whenever the file changes")
    parser_watch.add_argument("file", nargs="?", help="graph file (default: test.tgf)")

    for subparser in [parser_show, parser_walk, parser_check, parser_format, parser_watch]:
        subparser.add_argument(
            "-t", "--type", choices=codecs.keys(), help="node value type",
        )
        subparser.add_argument(
            "-c", "--config", type=Path, help="configuration file (default: tgf.yml)",
        )
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="skip bad lines instead of stopping",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def get_config(args: Namespace) -> GraphConfig:
    cfg = GraphConfig.find(args.config)
    cfg.validate(value_type=args.type)
    logging.debug("config: %r", cfg)
    return cfg


def get_file(args: Namespace, cfg: GraphConfig) -> Path:
    return Path(args.file or cfg["default_file"])


def load_graph(path: Path, cfg: GraphConfig) -> Graph:
    """Load a graph file.

    Bad lines are logged as errors. Unless --keep-going was given, the first one
    exits the program; otherwise the line is skipped.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as ex:
        fatal("cannot read %s: %s", path, ex.strerror)
    except UnicodeDecodeError as ex:
        fatal("cannot read %s: not UTF-8 (byte %d)", path, ex.start)
    graph = Graph(codecs[cfg["value_type"]])
    for record in records(text):
        try:
            graph.add_record(record)
        except GraphError as ex:
            logging.error("%s:%d: %s", path, record.lineno, ex)
    logging.info("loaded %s: %r", path, graph)
    return graph


def get_renderer(graph: Graph, cfg: GraphConfig) -> NodeRenderer:
    try:
        return NodeRenderer(graph, cfg["node_format"])
    except FormatError as ex:
        fatal("%s", ex)


def show(path: Path, cfg: GraphConfig):
    graph = load_graph(path, cfg)
    renderer = get_renderer(graph, cfg)
    try:
        for node in graph.all_nodes():
            print(renderer.render(node))
    except FormatError as ex:
        fatal("%s", ex)


def command_show(args: Namespace):
    cfg = get_config(args)
    show(get_file(args, cfg), cfg)


def command_walk(args: Namespace):
    cfg = get_config(args)
    path = get_file(args, cfg)
    graph = load_graph(path, cfg)
    root = graph.get_node(args.root)
    if root is None:
        fatal("%s: no node with id %d", path, args.root)
    renderer = get_renderer(graph, cfg)
    try:
        graph.traverse_from(root, lambda node: print(renderer.render(node)))
    except FormatError as ex:
        fatal("%s", ex)


def command_check(args: Namespace):
    cfg = get_config(args)
    graph = load_graph(get_file(args, cfg), cfg)
    print(f"{len(graph)} nodes, {len(graph.all_edges())} edges")


def command_format(args: Namespace):
    cfg = get_config(args)
    graph = load_graph(get_file(args, cfg), cfg)
    graph.dump(sys.stdout)


def command_watch(args: Namespace):
    cfg = get_config(args)
    path = get_file(args, cfg)

    def on_change():
        if path.is_file():
            show(path, cfg)
        else:
            logging.warning("%s does not exist", path)

    Watcher(path, on_change).run()
