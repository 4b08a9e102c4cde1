from contextvars import ContextVar
from typing import Optional

# Global context for the graph being built.
#
# This lets nested `with Graph(...)` blocks find the graph they belong to,
# so a subgraph does not need its parent passed in explicitly.
__graph: ContextVar[Optional["Graph"]] = ContextVar("graph")


def getgraph() -> Optional["Graph"]:
    return __graph.get(None)


def setgraph(graph: Optional["Graph"]) -> None:
    __graph.set(graph)


def quote(name: str) -> str:
    """Wrap an identifier in double quotes. Embedded quotes are not escaped."""
    return f'"{name}"'


def statement(head: str, attributes) -> str:
    """Render a node or edge statement with its optional attribute list."""
    if not attributes:
        return head
    return f"{head} [ {', '.join(str(a) for a in attributes)} ]"
