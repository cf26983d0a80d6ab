# Schema 路由
"""
类型定义 API: SDL 导出、类型目录、Schema 检查与约束语句
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from biograph.knowledge.models.base import GraphRelationship, GraphType, Relation
from biograph.knowledge.schema import (
    DIRECTIVE_PRELUDE,
    LintReport,
    get_schema_registry,
    lint_registry,
    render_module,
    render_sdl,
    render_type,
    schema_assertions,
)
from biograph.utils import get_logger

logger = get_logger(__name__)
router = APIRouter()


# ==================== 响应模型 ====================

class TypeSummary(BaseModel):
    """类型摘要"""
    name: str
    kind: str
    module: str
    description: Optional[str] = None


class PropertyInfo(BaseModel):
    """标量字段"""
    name: str
    type: str
    directive: Optional[str] = None
    description: Optional[str] = None


class ReferenceInfo(BaseModel):
    """引用其他类型的字段"""
    name: str
    type: str
    target: str
    relation: Optional[str] = None
    direction: Optional[str] = None
    description: Optional[str] = None


class TypeDetail(TypeSummary):
    """类型详情，含字段与渲染后的 SDL"""
    relation_name: Optional[str] = None
    properties: list[PropertyInfo] = Field(default_factory=list)
    references: list[ReferenceInfo] = Field(default_factory=list)
    sdl: str


class AssertionsResponse(BaseModel):
    """Schema 约束与索引语句"""
    statements: list[str]
    count: int


def _kind(model: type[GraphType]) -> str:
    return "relationship" if issubclass(model, GraphRelationship) else "node"


# ==================== SDL ====================

@router.get("/sdl", response_class=PlainTextResponse)
async def get_sdl(
    module: Optional[str] = Query(None, description="Render a single schema module"),
    with_directives: bool = Query(False, description="Prepend directive definitions"),
):
    """获取合并后的 GraphQL SDL"""
    registry = get_schema_registry()

    if module is None:
        return render_sdl(registry, include_directives=with_directives)

    try:
        selected = registry.module(module)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown schema module: {module}")

    sdl = render_module(selected)
    if with_directives:
        sdl = DIRECTIVE_PRELUDE + "\n" + sdl
    return sdl


# ==================== 类型 ====================

@router.get("/types", response_model=list[TypeSummary])
async def list_types(
    module: Optional[str] = Query(None, description="Only types of this module"),
):
    """按 Schema 顺序列出全部类型"""
    registry = get_schema_registry()

    if module is not None:
        try:
            types = list(registry.module(module))
        except KeyError:
            raise HTTPException(status_code=404, detail=f"Unknown schema module: {module}")
    else:
        types = registry.types()

    return [
        TypeSummary(
            name=t.graphql_name(),
            kind=_kind(t),
            module=registry.module_of(t.graphql_name()),
            description=t.graphql_description(),
        )
        for t in types
    ]


@router.get("/types/{name}", response_model=TypeDetail)
async def get_type(name: str):
    """获取单个类型及其字段"""
    registry = get_schema_registry()

    try:
        model = registry.get(name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown type: {name}")

    references = []
    for ref in model.references():
        info = ReferenceInfo(
            name=ref.field_name,
            type=ref.graphql_type,
            target=ref.target,
            description=ref.description,
        )
        if isinstance(ref, Relation):
            info.relation = ref.name
            info.direction = ref.direction.value
        references.append(info)

    return TypeDetail(
        name=model.graphql_name(),
        kind=_kind(model),
        module=registry.module_of(name),
        description=model.graphql_description(),
        relation_name=getattr(model, "relation_name", None) or None,
        properties=[
            PropertyInfo(
                name=p.name,
                type=p.graphql_type,
                directive=p.directive,
                description=p.description,
            )
            for p in model.properties()
        ],
        references=references,
        sdl=render_type(model),
    )


# ==================== 检查 ====================

@router.get("/lint", response_model=LintReport)
async def lint_schema():
    """检查合并后的 SDL"""
    return lint_registry(get_schema_registry())


@router.get("/assertions", response_model=AssertionsResponse)
async def get_assertions():
    """获取类型定义所需的约束与索引语句"""
    statements = schema_assertions(get_schema_registry())
    return AssertionsResponse(statements=statements, count=len(statements))
