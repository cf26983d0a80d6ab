"""Pytest 配置与 fixtures"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from biograph.knowledge.neo4j_client import Neo4jClient
from biograph.knowledge.schema import SchemaRegistry, load_registry


@pytest.fixture
def registry() -> SchemaRegistry:
    """包含全部内置模块的注册表"""
    return load_registry()


@pytest.fixture
def neo4j_session() -> AsyncMock:
    """run() 不返回记录的会话"""
    result = MagicMock()
    result.data = AsyncMock(return_value=[])
    session = AsyncMock()
    session.run = AsyncMock(return_value=result)
    return session


@pytest.fixture
def neo4j_client(neo4j_session) -> Neo4jClient:
    """连接到 mock 驱动的客户端"""
    client = Neo4jClient(uri="bolt://test:7687", username="neo4j", password="secret")
    driver = MagicMock()
    driver.session.return_value = neo4j_session
    driver.close = AsyncMock()
    client._driver = driver
    return client


@pytest.fixture
def mock_graph_client() -> MagicMock:
    """API 路由使用的 Neo4j 客户端替身"""
    client = MagicMock()
    client.connect = AsyncMock()
    client.get_node = AsyncMock(return_value=None)
    client.find_nodes = AsyncMock(return_value=[])
    client.get_related = AsyncMock(return_value=[])
    client.get_statistics = AsyncMock(return_value={"nodes": {}, "edges": {}})
    return client
