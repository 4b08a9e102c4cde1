from typing import Union


class Attribute:
    """Attribute is an opaque DOT fragment such as ``color = blue``.

    The text is never parsed or validated. Attributes are usually created by
    the factory methods on :class:`dotgraph.Graph` and then attached to a
    node, an edge or one of a graph's default lists.
    """

    def __init__(self, text: str):
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self):
        return f"<Attribute {self._text!r}>"

    def __eq__(self, other):
        if isinstance(other, Attribute):
            return self._text == other._text
        return NotImplemented

    def __hash__(self):
        return hash(self._text)

    def __add__(self, other: Union["Attribute", str]) -> "Attribute":
        """Implements Self + Attribute."""
        return self.merge(other)

    def __lshift__(self, target):
        """Implements Self << Node and Self << Edge."""
        return self.attach(target)

    def merge(self, other: Union["Attribute", str]) -> "Attribute":
        """Combine two attributes into one comma separated attribute.

        :param other: Attribute (or raw text) to append.
        :return: A new attribute, neither operand is modified.
        """
        return Attribute(f"{self._text}, {other}")

    def attach(self, target):
        """Attach to a node, an edge or a graph's default attribute list.

        :param target: Anything with an ``attributes`` list, or a list itself
            such as ``graph.node_attribs``.
        :return: The target, for chaining.
        """
        if isinstance(target, list):
            target.append(self)
        else:
            target.attributes.append(self)
        return target
