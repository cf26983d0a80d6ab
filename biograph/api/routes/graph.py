# 图谱查询路由
"""
按类型声明只读访问知识图谱节点
"""

from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel, TypeAdapter, ValidationError

from biograph.knowledge import get_neo4j_client
from biograph.knowledge.models.base import GraphNode
from biograph.knowledge.schema import get_schema_registry
from biograph.utils import get_logger

logger = get_logger(__name__)
router = APIRouter()

_PAGING_PARAMS = {"limit", "skip"}


# ==================== 响应模型 ====================

class NodeResponse(BaseModel):
    """节点响应"""
    type: str
    key: str
    properties: dict[str, Any]


class NodeListResponse(BaseModel):
    """节点列表响应"""
    type: str
    nodes: list[dict[str, Any]]
    count: int


class RelatedResponse(BaseModel):
    """关联节点响应"""
    type: str
    key: str
    field: str
    relation: str
    direction: str
    target: str
    nodes: list[dict[str, Any]]
    count: int


def _node_type(type_name: str) -> type[GraphNode]:
    try:
        return get_schema_registry().get_node(type_name)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0])


def _filters(node_type: type[GraphNode], request: Request) -> dict[str, Any]:
    """分页以外的查询参数，按声明的字段类型转换"""
    filters = {}
    for name, value in request.query_params.items():
        if name in _PAGING_PARAMS:
            continue
        info = node_type.model_fields.get(name)
        if info is None:
            raise HTTPException(
                status_code=400,
                detail=f"{node_type.graphql_name()} has no property {name!r}",
            )
        try:
            filters[name] = TypeAdapter(info.annotation).validate_python(value)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=f"Invalid value for {name!r}: {e.errors()[0]['msg']}")
    return filters


# ==================== 统计 ====================

@router.get("/statistics")
async def get_statistics():
    """获取图谱统计信息"""
    client = get_neo4j_client()

    try:
        await client.connect()
        return await client.get_statistics()
    except Exception as e:
        logger.error(f"Failed to get statistics: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# ==================== 节点查询 ====================
# @id 值通过查询参数 ?key= 传递

@router.get("/{type_name}", response_model=NodeListResponse)
async def list_nodes(
    type_name: str,
    request: Request,
    limit: int = Query(100, ge=1, le=1000),
    skip: int = Query(0, ge=0),
):
    """列出某类型的节点，其余查询参数作为属性过滤条件"""
    node_type = _node_type(type_name)
    filters = _filters(node_type, request)
    client = get_neo4j_client()

    try:
        await client.connect()
        nodes = await client.find_nodes(node_type, filters, limit=limit, skip=skip)
    except ValidationError as e:
        logger.error(f"Stored node does not match its type: {e}", type=type_name)
        raise HTTPException(status_code=500, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to list nodes: {e}", type=type_name)
        raise HTTPException(status_code=500, detail=str(e))

    return NodeListResponse(
        type=type_name,
        nodes=[n.to_neo4j_properties() for n in nodes],
        count=len(nodes),
    )


@router.get("/{type_name}/node", response_model=NodeResponse)
async def get_node(type_name: str, key: str = Query(..., min_length=1)):
    """按 @id 值获取节点"""
    node_type = _node_type(type_name)
    client = get_neo4j_client()

    try:
        await client.connect()
        node = await client.get_node(node_type, key)
    except ValidationError as e:
        logger.error(f"Stored node does not match its type: {e}", type=type_name, key=key)
        raise HTTPException(status_code=500, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to get node: {e}", type=type_name, key=key)
        raise HTTPException(status_code=500, detail=str(e))

    if node is None:
        raise HTTPException(status_code=404, detail=f"{type_name} {key!r} not found")

    return NodeResponse(type=type_name, key=key, properties=node.to_neo4j_properties())


@router.get("/{type_name}/related/{field}", response_model=RelatedResponse)
async def get_related(
    type_name: str,
    field: str,
    key: str = Query(..., min_length=1),
    limit: int = Query(100, ge=1, le=1000),
):
    """沿关系字段获取关联节点"""
    node_type = _node_type(type_name)

    try:
        relation = node_type.relation(field)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=e.args[0])

    client = get_neo4j_client()

    try:
        await client.connect()
        nodes = await client.get_related(node_type, key, field, limit=limit)
    except ValidationError as e:
        logger.error(f"Stored node does not match its type: {e}", type=relation.target)
        raise HTTPException(status_code=500, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to get related nodes: {e}", type=type_name, key=key, field=field)
        raise HTTPException(status_code=500, detail=str(e))

    return RelatedResponse(
        type=type_name,
        key=key,
        field=field,
        relation=relation.name,
        direction=relation.direction.value,
        target=relation.target,
        nodes=[n.to_neo4j_properties() for n in nodes],
        count=len(nodes),
    )
