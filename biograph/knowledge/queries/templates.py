# Cypher 查询模板
"""
知识图谱只读查询

标签、属性名和关系名来自类型声明，以反引号格式化进模板；
取值一律通过参数传入。
"""

from ..models.base import Direction

# ==============================================================================
# 节点查询
# ==============================================================================

NODE_BY_KEY_QUERY = """
MATCH (n:`{label}` {{`{key}`: $key}})
RETURN n
LIMIT 1
"""

FIND_NODES_QUERY = """
MATCH (n:`{label}`)
{where_clause}
RETURN n
{order_clause}
SKIP $skip
LIMIT $limit
"""

# ==============================================================================
# 关系遍历
# ==============================================================================

RELATED_NODES_QUERY = """
MATCH (n:`{label}` {{`{key}`: $key}}){pattern}(m:`{target}`)
RETURN m
LIMIT $limit
"""

# ==============================================================================
# 统计查询
# ==============================================================================

NODE_STATISTICS_QUERY = """
MATCH (n)
WITH labels(n) as labels, count(*) as count
UNWIND labels as label
RETURN label, sum(count) as node_count
ORDER BY node_count DESC
"""

EDGE_STATISTICS_QUERY = """
MATCH ()-[r]->()
RETURN type(r) as edge_type, count(*) as edge_count
ORDER BY edge_count DESC
"""

# ==============================================================================
# Schema 约束与索引
# ==============================================================================

UNIQUE_CONSTRAINT_TEMPLATE = (
    "CREATE CONSTRAINT IF NOT EXISTS FOR (n:`{label}`) REQUIRE n.`{property}` IS UNIQUE"
)

INDEX_TEMPLATE = "CREATE INDEX IF NOT EXISTS FOR (n:`{label}`) ON (n.`{property}`)"


def relationship_pattern(name: str, direction: Direction) -> str:
    """从声明字段的节点一侧看到的关系模式"""
    if Direction(direction) is Direction.OUT:
        return f"-[:`{name}`]->"
    return f"<-[:`{name}`]-"
