import logging
import subprocess
from typing import Callable, Dict, List, Optional, Union

from graphviz import Source

from . import config as cfg
from .attribute import Attribute
from .edge import Edge
from .node import Node
from .utils import getgraph, setgraph

logger = logging.getLogger(__name__)


class InsufficientNodesError(ValueError):
    """Raised when an edge chain is declared with fewer than two nodes."""


class Graph:
    """Graph represents a directed graph, or a subgraph of one."""

    def __init__(self, name: Optional[str] = None, setup: Optional[Callable[["Graph"], None]] = None):
        """Graph represents a directed graph description.

        :param name: Graph name. Rendered after the ``digraph`` or
            ``subgraph`` keyword, empty if not given.
        :param setup: Called with the new graph right after construction.
        """
        self.name = name
        self.owner: Optional["Graph"] = None
        self.nodes: Dict[str, Node] = {}
        self.edges: Dict[str, Dict[str, Edge]] = {}
        self.subgraphs: List["Graph"] = []
        self.graph_attribs: List[Union[Attribute, str]] = []
        self.node_attribs: List[Union[Attribute, str]] = []
        self.edge_attribs: List[Union[Attribute, str]] = []

        self._parents: List[Optional["Graph"]] = []

        if setup is not None:
            setup(self)

    def __repr__(self):
        return f"<Graph {self.name!r}>"

    def __str__(self) -> str:
        return self.to_text()

    def __enter__(self):
        self._parents.append(getgraph())
        setgraph(self)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        parent = self._parents.pop()
        # A graph built inside another graph's block becomes its subgraph.
        if parent is not None and parent is not self and self.owner is None:
            parent.attach(self)
        setgraph(parent)

    def __getitem__(self, name: str) -> Node:
        """Implements Self[name], same as node."""
        return self.node(name)

    def __lshift__(self, subgraph: "Graph") -> "Graph":
        """Implements Self << Graph."""
        return self.attach(subgraph)

    def _repr_png_(self):
        return self.pipe(format="png")

    def node(self, name: str) -> Node:
        """Return the node with the given name, creating it if needed."""
        node = self.nodes.get(name)
        if node is None:
            node = self.nodes[name] = Node(self, name)
        return node

    def connect(self, source: Node, target: Node) -> Edge:
        """Return the edge between two nodes of this graph, creating it if needed."""
        targets = self.edges.setdefault(source.name, {})
        edge = targets.get(target.name)
        if edge is None:
            edge = targets[target.name] = Edge(self, source, target)
        return edge

    def edge(self, *names: str) -> "Graph":
        """Declare a chain of edges.

        ``edge("a", "b", "c")`` connects a to b and b to c.

        :param names: At least two node names, created if missing.
        """
        if len(names) < 2:
            raise InsufficientNodesError(f"an edge needs at least 2 nodes, got {len(names)}")
        for source, target in zip(names, names[1:]):
            self.node(source).connect(target)
        return self

    def subgraph(self, name: Optional[str] = None, setup: Optional[Callable[["Graph"], None]] = None) -> "Graph":
        """Create a subgraph of this graph.

        :param name: Subgraph name.
        :param setup: Called with the subgraph once it is attached.
        :return: The new subgraph.
        """
        subgraph = Graph(name)
        self.attach(subgraph)
        if setup is not None:
            setup(subgraph)
        return subgraph

    def attach(self, subgraph: "Graph") -> "Graph":
        """Attach an independently built graph as a subgraph.

        :raises ValueError: If the graph is this graph or one of its owners.
        """
        ancestor = self
        while ancestor is not None:
            if ancestor is subgraph:
                raise ValueError(f"{subgraph!r} cannot be a subgraph of itself")
            ancestor = ancestor.owner
        subgraph.owner = self
        self.subgraphs.append(subgraph)
        return self

    def label(self, text: str) -> "Graph":
        self.graph_attribs.append(f'label = "{text}"')
        return self

    def orient(self, direction: str = cfg.DIRECTION_DEFAULT) -> "Graph":
        """Set the rank direction, top to bottom unless told otherwise."""
        self.graph_attribs.append(f"rankdir = {direction}")
        return self

    def rotate(self, direction: str = cfg.ROTATE_DEFAULT) -> "Graph":
        """Same as orient, defaulting to left to right."""
        return self.orient(direction)

    def boxes(self) -> "Graph":
        """Draw every node as a box by default."""
        self.node_attribs.append(cfg.BOX_SHAPE)
        return self

    def color(self, color: str) -> Attribute:
        return Attribute(f"color = {color}")

    def fillcolor(self, color: str) -> Attribute:
        return Attribute(f"fillcolor = {color}")

    def colorscheme(self, scheme: str) -> Attribute:
        return Attribute(f"colorscheme = {scheme}")

    def shape(self, shape: str) -> Attribute:
        return Attribute(f"shape = {shape}")

    def style(self, style: str) -> Attribute:
        return Attribute(f"style = {style}")

    def font(self, name: str, size: Optional[int] = None) -> Attribute:
        text = f'fontname = "{name}"'
        if size is not None:
            text += f", fontsize = {size}"
        return Attribute(text)

    def invert(self) -> "Graph":
        """Return a new graph with the same nodes and every edge reversed.

        Attributes and subgraphs are not copied. The original graph is left
        untouched.
        """
        result = Graph(self.name)
        for name in self.nodes:
            result.node(name)
        for source, targets in self.edges.items():
            for target in targets:
                result.node(target).connect(source)
        return result

    def to_text(self) -> str:
        """Serialize the graph, and its subgraphs, to DOT source."""
        kind = "subgraph" if self.owner is not None else "digraph"
        lines = [f"{kind} {self.name or ''}", "  {"]
        lines.extend(f"    {attr};" for attr in self.graph_attribs)
        if self.node_attribs:
            lines.append(f"    node [ {', '.join(str(a) for a in self.node_attribs)} ];")
        if self.edge_attribs:
            lines.append(f"    edge [ {', '.join(str(a) for a in self.edge_attribs)} ];")
        lines.extend(f"    {subgraph.to_text()};" for subgraph in self.subgraphs)
        # Edge statements declare plain nodes already, except inside subgraphs
        # where membership has to be spelled out.
        for node in self.nodes.values():
            if self.owner is not None or node.attributes:
                lines.append(f"    {node};")
        for targets in self.edges.values():
            lines.extend(f"    {edge};" for edge in targets.values())
        lines.append("  }")
        return "\n".join(lines)

    def source(self) -> Source:
        """Wrap the DOT text in a graphviz Source for piping or viewing.

        graphviz appends a trailing newline to the source, as save does.
        """
        return Source(self.to_text())

    def pipe(self, format: str = "png") -> bytes:
        return self.source().pipe(format=format)

    def save(self, path: str, fmt: Optional[str] = None) -> None:
        """Write the DOT source and optionally render it.

        :param path: Output path without extension. The source goes to
            ``<path>.dot``.
        :param fmt: Output format such as ``png``. When given the renderer
            writes ``<path>.<fmt>``.
        """
        filename = f"{path}.{cfg.SOURCE_EXT}"
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.to_text() + "\n")
        logger.debug("wrote %s", filename)

        if fmt:
            self.system(f"{cfg.RENDERER} -T{fmt} {filename} > {path}.{fmt}")

    def system(self, command: str) -> None:
        """Run a shell command, raising if it fails."""
        logger.debug("running %s", command)
        subprocess.run(command, shell=True, check=True)
