from typing import Callable, Optional

from .attribute import Attribute
from .edge import Edge
from .graph import Graph, InsufficientNodesError
from .node import Node
from .utils import getgraph, setgraph

__all__ = [
    "Attribute",
    "Edge",
    "Graph",
    "InsufficientNodesError",
    "Node",
    "digraph",
    "getgraph",
    "setgraph",
]


def digraph(name: Optional[str] = None, setup: Optional[Callable[[Graph], None]] = None) -> Graph:
    """Build a graph in one go.

    :param name: Graph name.
    :param setup: Called with the new graph before it is returned.
    """
    return Graph(name, setup)
