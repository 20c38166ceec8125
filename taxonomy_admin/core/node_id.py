"""Prefixed tree node identifiers (``cat-<id>``, ``sub-<id>``, ``pt-<id>``)."""

import enum
from dataclasses import dataclass


class NodeType(str, enum.Enum):
    """Level of a node in the product tree."""

    CATEGORY = "category"
    SUBCATEGORY = "subcategory"
    PRODUCT_TYPE = "product_type"


_PREFIXES: dict[NodeType, str] = {
    NodeType.CATEGORY: "cat-",
    NodeType.SUBCATEGORY: "sub-",
    NodeType.PRODUCT_TYPE: "pt-",
}


@dataclass(frozen=True)
class NodeRef:
    """Parsed node identifier."""

    type: NodeType
    id: str

    def __str__(self) -> str:
        return prefix_id(self.type, self.id)


def prefix_id(node_type: NodeType, node_id: object) -> str:
    return f"{_PREFIXES[node_type]}{node_id}"


def parse_id(prefixed: object) -> NodeRef | None:
    """Parse a prefixed identifier.

    Returns:
        NodeRef, or None if the prefix is unknown or the id part is empty
    """
    if prefixed is None:
        return None
    value = str(prefixed)
    for node_type, prefix in _PREFIXES.items():
        if value.startswith(prefix) and len(value) > len(prefix):
            return NodeRef(type=node_type, id=value[len(prefix):])
    return None
