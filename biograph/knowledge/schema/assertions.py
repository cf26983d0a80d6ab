# Schema 约束与索引
"""
由字段指令 ``@id``、``@unique``、``@index`` 以及 ``storage_indexes``
生成 Neo4j 约束与索引
"""

from ..queries.templates import INDEX_TEMPLATE, UNIQUE_CONSTRAINT_TEMPLATE
from .registry import SchemaRegistry


def schema_assertions(registry: SchemaRegistry) -> list[str]:
    """生成 Schema 约束语句，每个带指令或列入 storage_indexes 的属性一条"""
    statements = []
    for node_type in registry.node_types():
        label = node_type.label()
        for prop in node_type.properties():
            if prop.directive in ("id", "unique"):
                statements.append(UNIQUE_CONSTRAINT_TEMPLATE.format(label=label, property=prop.name))
            elif prop.directive == "index" or prop.name in node_type.storage_indexes:
                statements.append(INDEX_TEMPLATE.format(label=label, property=prop.name))
    return statements
