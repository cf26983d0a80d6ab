from .templates import (
    EDGE_STATISTICS_QUERY,
    FIND_NODES_QUERY,
    INDEX_TEMPLATE,
    NODE_BY_KEY_QUERY,
    NODE_STATISTICS_QUERY,
    RELATED_NODES_QUERY,
    UNIQUE_CONSTRAINT_TEMPLATE,
    relationship_pattern,
)

__all__ = [
    "EDGE_STATISTICS_QUERY",
    "FIND_NODES_QUERY",
    "INDEX_TEMPLATE",
    "NODE_BY_KEY_QUERY",
    "NODE_STATISTICS_QUERY",
    "RELATED_NODES_QUERY",
    "UNIQUE_CONSTRAINT_TEMPLATE",
    "relationship_pattern",
]
