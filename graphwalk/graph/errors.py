"""Construction-boundary errors and value checks shared by the graph builders."""

from typing import Any


class GraphDefinitionError(ValueError):
    pass


def _is_plain_int(value: Any) -> bool:
    # bool is an int subclass but never a valid id or weight
    return isinstance(value, int) and not isinstance(value, bool)


def validate_node_id(node_id: Any) -> int:
    """Node ids are non-negative integers."""
    if not _is_plain_int(node_id) or node_id < 0:
        raise GraphDefinitionError(f"Invalid node id: {node_id!r} (expected a non-negative integer)")
    return node_id


def validate_weight(weight: Any) -> int:
    """Edge weights are unsigned integers."""
    if not _is_plain_int(weight) or weight < 0:
        raise GraphDefinitionError(f"Invalid edge weight: {weight!r} (expected a non-negative integer)")
    return weight
