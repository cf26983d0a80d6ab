# 知识图谱核心模块
"""
生物医药知识图谱组件:
- 类型定义 (Biomedical, ClinicalTrials, Literature, Patents)
- Schema 注册表、SDL 渲染与检查
- Neo4j 客户端
"""

from .models import (
    Direction,
    Endpoint,
    GraphNode,
    GraphRelationship,
    GraphType,
    Reference,
    Relation,
    SchemaDeclarationError,
    SchemaModule,
)
from .neo4j_client import Neo4jClient, get_neo4j_client, init_neo4j_schema
from .schema import (
    SchemaRegistry,
    get_schema_registry,
    lint_registry,
    load_registry,
    render_sdl,
)

__all__ = [
    # 类型声明
    "Direction",
    "Endpoint",
    "GraphNode",
    "GraphRelationship",
    "GraphType",
    "Reference",
    "Relation",
    "SchemaDeclarationError",
    "SchemaModule",
    # Schema
    "SchemaRegistry",
    "get_schema_registry",
    "lint_registry",
    "load_registry",
    "render_sdl",
    # 客户端
    "Neo4jClient",
    "get_neo4j_client",
    "init_neo4j_schema",
]
