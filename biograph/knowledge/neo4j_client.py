# Neo4j 客户端
"""
Neo4j 图数据库客户端，提供:
- 连接管理
- 按类型的 @id 属性查询节点
- 沿声明的关系遍历
- Schema 约束创建与统计

此处对图谱只读，数据导入不在本模块。
"""

from contextlib import asynccontextmanager
from typing import Any

from neo4j import AsyncDriver, AsyncGraphDatabase

from biograph.config import get_settings
from biograph.utils import get_logger

from .models.base import GraphNode, Relation
from .queries.templates import (
    EDGE_STATISTICS_QUERY,
    FIND_NODES_QUERY,
    NODE_BY_KEY_QUERY,
    NODE_STATISTICS_QUERY,
    RELATED_NODES_QUERY,
    relationship_pattern,
)
from .schema.assertions import schema_assertions
from .schema.registry import SchemaRegistry, get_schema_registry

logger = get_logger(__name__)

# 全局客户端实例
_neo4j_client: "Neo4jClient | None" = None


def _id_property(node_type: type[GraphNode]) -> str:
    prop = node_type.id_property()
    if prop is None:
        raise ValueError(f"{node_type.graphql_name()} has no @id field to look nodes up by")
    return prop.name


class Neo4jClient:
    """异步 Neo4j 客户端

    通过类型声明查询节点，标签、主键和关系名均取自类型定义，不取自请求输入。
    """

    def __init__(
        self,
        uri: str,
        username: str,
        password: str,
        database: str = "neo4j",
    ):
        self.uri = uri
        self.username = username
        self.password = password
        self.database = database
        self._driver: AsyncDriver | None = None

    async def connect(self) -> None:
        """建立连接并验证连通性"""
        if self._driver is None:
            logger.info("Connecting to Neo4j", uri=self.uri)
            self._driver = AsyncGraphDatabase.driver(
                self.uri,
                auth=(self.username, self.password),
            )
            await self._driver.verify_connectivity()
            logger.info("Neo4j connection established")

    async def close(self) -> None:
        """关闭连接"""
        if self._driver:
            await self._driver.close()
            self._driver = None
            logger.info("Neo4j connection closed")

    @asynccontextmanager
    async def session(self):
        """获取会话，退出时关闭"""
        if self._driver is None:
            await self.connect()

        session = self._driver.session(database=self.database)
        try:
            yield session
        finally:
            await session.close()

    async def execute_query(
        self,
        query: str,
        parameters: dict[str, Any] | None = None
    ) -> list[dict]:
        """执行 Cypher 查询，以字典列表返回记录"""
        async with self.session() as session:
            result = await session.run(query, **(parameters or {}))
            return await result.data()

    # ==================== 节点操作 ====================

    async def get_node(self, node_type: type[GraphNode], key: str) -> GraphNode | None:
        """按 @id 值获取节点

        Args:
            node_type: 节点类型
            key: 该类型 @id 属性的值

        Returns:
            GraphNode | None: 按 `node_type` 校验后的节点
        """
        query = NODE_BY_KEY_QUERY.format(label=node_type.label(), key=_id_property(node_type))
        records = await self.execute_query(query, {"key": key})
        if not records:
            return None
        return node_type.from_neo4j(records[0]["n"])

    async def find_nodes(
        self,
        node_type: type[GraphNode],
        filters: dict[str, Any] | None = None,
        limit: int = 100,
        skip: int = 0,
    ) -> list[GraphNode]:
        """按属性过滤查询节点

        Args:
            node_type: 节点类型
            filters: 属性等值过滤条件，键须为已声明的属性
            limit: 返回数量上限
            skip: 偏移量

        Returns:
            list[GraphNode]: 匹配的节点
        """
        filters = filters or {}
        declared = set(node_type.model_fields)
        unknown = sorted(set(filters) - declared)
        if unknown:
            raise ValueError(
                f"{node_type.graphql_name()} has no properties {unknown}"
            )

        params: dict[str, Any] = {"skip": skip, "limit": limit}
        conditions = []
        for i, (prop, value) in enumerate(filters.items()):
            conditions.append(f"n.`{prop}` = $f{i}")
            params[f"f{i}"] = value

        where_clause = "WHERE " + " AND ".join(conditions) if conditions else ""
        id_prop = node_type.id_property()
        order_clause = f"ORDER BY n.`{id_prop.name}`" if id_prop else ""

        query = FIND_NODES_QUERY.format(
            label=node_type.label(),
            where_clause=where_clause,
            order_clause=order_clause,
        )
        records = await self.execute_query(query, params)
        return [node_type.from_neo4j(r["n"]) for r in records]

    async def get_related(
        self,
        node_type: type[GraphNode],
        key: str,
        field_name: str,
        limit: int = 100,
    ) -> list[GraphNode]:
        """沿声明的关系字段获取关联节点

        Args:
            node_type: 起始节点类型
            key: 起始节点的 @id 值
            field_name: ``node_type`` 上的关系字段，如 ``conductedAt``
            limit: 返回数量上限

        Returns:
            list[GraphNode]: 按关系目标类型校验后的关联节点
        """
        try:
            relation: Relation = node_type.relation(field_name)
        except KeyError:
            raise ValueError(
                f"{node_type.graphql_name()}.{field_name} is not a relation field"
            ) from None

        target_type = get_schema_registry().get_node(relation.target)

        query = RELATED_NODES_QUERY.format(
            label=node_type.label(),
            key=_id_property(node_type),
            pattern=relationship_pattern(relation.name, relation.direction),
            target=relation.target,
        )
        records = await self.execute_query(query, {"key": key, "limit": limit})
        logger.debug(
            "Related nodes fetched",
            type=node_type.graphql_name(),
            field=field_name,
            count=len(records),
        )
        return [target_type.from_neo4j(r["m"]) for r in records]

    # ==================== 统计 ====================

    async def get_statistics(self) -> dict:
        """按标签统计节点数、按类型统计关系数"""
        node_stats = await self.execute_query(NODE_STATISTICS_QUERY)
        edge_stats = await self.execute_query(EDGE_STATISTICS_QUERY)

        return {
            "nodes": {r["label"]: r["node_count"] for r in node_stats},
            "edges": {r["edge_type"]: r["edge_count"] for r in edge_stats},
        }


def get_neo4j_client() -> Neo4jClient:
    """获取 Neo4j 客户端单例"""
    global _neo4j_client

    if _neo4j_client is None:
        settings = get_settings()
        _neo4j_client = Neo4jClient(
            uri=settings.neo4j.uri,
            username=settings.neo4j.username,
            password=settings.neo4j.password,
            database=settings.neo4j.database,
        )

    return _neo4j_client


async def init_neo4j_schema(client: Neo4jClient, registry: SchemaRegistry) -> int:
    """按类型定义创建 Neo4j 约束与索引

    Args:
        client: Neo4j 客户端
        registry: 类型注册表

    Returns:
        int: 执行的语句数
    """
    statements = schema_assertions(registry)
    async with client.session() as session:
        for query in statements:
            await session.run(query)

    logger.info("Neo4j schema asserted", statements=len(statements))
    return len(statements)
