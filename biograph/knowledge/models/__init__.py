# 知识图谱类型定义
from .base import (
    Direction,
    Endpoint,
    GraphNode,
    GraphRelationship,
    GraphType,
    PropertySpec,
    Reference,
    Relation,
    SchemaDeclarationError,
    SchemaModule,
    graph_field,
    id_field,
    indexed_field,
    unique_field,
)
from . import biomedical, clinical_trials, literature, patents

__all__ = [
    "Direction",
    "Endpoint",
    "GraphNode",
    "GraphRelationship",
    "GraphType",
    "PropertySpec",
    "Reference",
    "Relation",
    "SchemaDeclarationError",
    "SchemaModule",
    "graph_field",
    "id_field",
    "indexed_field",
    "unique_field",
    # 模块
    "biomedical",
    "clinical_trials",
    "literature",
    "patents",
]
