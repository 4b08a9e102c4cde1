from typing import List, Union

from .attribute import Attribute
from .utils import quote, statement


class Edge:
    """Edge represents a directed connection between two nodes of a graph."""

    def __init__(self, owner, source: "Node", target: "Node"):
        """Edge represents a directed connection between two nodes.

        :param owner: Graph the edge belongs to.
        :param source: Node the edge starts at.
        :param target: Node the edge points to.
        """
        self.owner = owner
        self.source = source
        self.target = target
        self.attributes: List[Union[Attribute, str]] = []

    def __repr__(self):
        return f"<Edge {self.source.name!r} -> {self.target.name!r}>"

    def __str__(self) -> str:
        return statement(f"{quote(self.source.name)} -> {quote(self.target.name)}", self.attributes)

    def attribute(self, attr: Union[Attribute, str]) -> "Edge":
        self.attributes.append(attr)
        return self

    def label(self, text: str) -> "Edge":
        return self.attribute(Attribute(f'label = "{text}"'))
