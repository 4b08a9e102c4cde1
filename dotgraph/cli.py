import argparse
import logging
import os
import sys

from . import Graph, digraph

logger = logging.getLogger(__name__)


def run() -> int:
    """
    Run dotgraph code files and save the graphs they build.

    Every root graph left in a file's namespace is saved next to the file,
    as ``<stem>.dot`` when the file builds a single graph and as
    ``<stem>_<variable>.dot`` otherwise.

    Returns:
        The exit code.
    """
    parser = argparse.ArgumentParser(
        description="Run dotgraph code files and save the graphs they build.",
    )
    parser.add_argument(
        "paths",
        metavar="path",
        type=str,
        nargs="+",
        help="a Python file containing dotgraph code",
    )
    parser.add_argument(
        "-T",
        "--format",
        dest="fmt",
        default=None,
        help="also render each graph to this format, e.g. png or svg",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log files written and commands run")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    for path in args.paths:
        namespace = {"Graph": Graph, "digraph": digraph, "__name__": "__main__", "__file__": path}
        with open(path, encoding="utf-8") as f:
            exec(compile(f.read(), path, "exec"), namespace)

        graphs = [
            (var, value)
            for var, value in namespace.items()
            if isinstance(value, Graph) and value.owner is None and not var.startswith("_")
        ]
        stem = os.path.splitext(path)[0]
        if not graphs:
            logger.debug("%s built no graph", path)
        for var, graph in graphs:
            target = stem if len(graphs) == 1 else f"{stem}_{var}"
            graph.save(target, args.fmt)

    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
