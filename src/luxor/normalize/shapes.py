"""Connection envelope flattening.

Collection queries return one of two envelopes:

    {"nodes": [record, ...]}
    {"edges": [{"node": record}, ...]}

``resolve_envelope`` turns the raw tree into one of two tagged types once, so
mappers never inspect the shape themselves. Records always come back in
server order: nothing is sorted or deduplicated.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from luxor.exceptions import MalformedResponseShape


@dataclass(frozen=True)
class NodesEnvelope:
    """``{"nodes": [...]}`` collection."""

    nodes: tuple[Mapping[str, Any], ...]


@dataclass(frozen=True)
class EdgesEnvelope:
    """``{"edges": [{"node": ...}, ...]}`` collection."""

    edges: tuple[Mapping[str, Any], ...]


Envelope = NodesEnvelope | EdgesEnvelope


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def extract_field(response: Any, key: str) -> Any:
    """Return ``response[key]`` or raise MalformedResponseShape."""
    if not isinstance(response, Mapping) or key not in response:
        raise MalformedResponseShape(f"Response has no {key!r} field")
    return response[key]


def resolve_envelope(tree: Any) -> Envelope:
    """Classify a connection tree as a nodes or edges envelope.

    ``nodes`` wins when both are present.

    Raises:
        MalformedResponseShape: If neither list is present, or an entry is not
            a mapping.
    """
    if not isinstance(tree, Mapping):
        raise MalformedResponseShape(
            f"Expected a connection object, got {type(tree).__name__}"
        )

    nodes = tree.get("nodes")
    if _is_list(nodes):
        for node in nodes:
            if not isinstance(node, Mapping):
                raise MalformedResponseShape("Connection node is not an object")
        return NodesEnvelope(nodes=tuple(nodes))

    edges = tree.get("edges")
    if _is_list(edges):
        for edge in edges:
            if not isinstance(edge, Mapping) or not isinstance(edge.get("node"), Mapping):
                raise MalformedResponseShape("Connection edge has no node object")
        return EdgesEnvelope(edges=tuple(edges))

    raise MalformedResponseShape("Connection has neither 'nodes' nor 'edges'")


def flatten_connection(tree: Any) -> list[Mapping[str, Any]]:
    """Return the records of a connection tree in server order."""
    envelope = resolve_envelope(tree)
    if isinstance(envelope, NodesEnvelope):
        return list(envelope.nodes)
    return [edge["node"] for edge in envelope.edges]
