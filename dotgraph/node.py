from typing import List, Union

from .attribute import Attribute
from .edge import Edge
from .utils import quote, statement


class Node:
    """Node represents a named vertex of a graph."""

    def __init__(self, owner, name: str):
        """Node represents a named vertex.

        :param owner: Graph the node belongs to. Only used to look up or
            create the targets of outgoing edges.
        :param name: Node name, unique within its graph.
        """
        self.owner = owner
        self.name = name
        self.attributes: List[Union[Attribute, str]] = []

    def __repr__(self):
        return f"<Node {self.name!r}>"

    def __str__(self) -> str:
        return statement(quote(self.name), self.attributes)

    def __getitem__(self, name: str) -> Edge:
        """Implements Self[name], same as connect."""
        return self.connect(name)

    def __rshift__(self, name: str) -> "Node":
        """Implements Self >> name. Returns self so several targets can be chained."""
        self.connect(name)
        return self

    def connect(self, name: str) -> Edge:
        """Connect to another node of the same graph.

        :param name: Target node name. The node is created if missing.
        :return: The edge from this node to the target.
        """
        return self.owner.connect(self, self.owner.node(name))

    def attribute(self, attr: Union[Attribute, str]) -> "Node":
        self.attributes.append(attr)
        return self

    def label(self, text: str) -> "Node":
        return self.attribute(Attribute(f'label = "{text}"'))
