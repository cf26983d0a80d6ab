# SDK 数据模型
"""
biograph API 响应模型定义
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


# ==================== Schema 模型 ====================

class TypeSummary(BaseModel):
    """类型摘要"""
    name: str
    kind: Literal["node", "relationship"]
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
    direction: Optional[Literal["IN", "OUT"]] = None
    description: Optional[str] = None


class TypeDetail(TypeSummary):
    """类型详情"""
    relation_name: Optional[str] = None
    properties: list[PropertyInfo] = Field(default_factory=list)
    references: list[ReferenceInfo] = Field(default_factory=list)
    sdl: str


class LintIssue(BaseModel):
    """单条检查结果"""
    severity: Literal["error", "warning"]
    code: str
    message: str
    type_name: Optional[str] = None
    field_name: Optional[str] = None


class LintReport(BaseModel):
    """Schema 检查结果"""
    issues: list[LintIssue] = Field(default_factory=list)

    @property
    def errors(self) -> list[LintIssue]:
        return [i for i in self.issues if i.severity == "error"]

    @property
    def warnings(self) -> list[LintIssue]:
        return [i for i in self.issues if i.severity == "warning"]

    @property
    def ok(self) -> bool:
        return not self.errors


# ==================== 图谱模型 ====================

class Node(BaseModel):
    """节点"""
    type: str
    key: str
    properties: dict[str, Any]


class NodeList(BaseModel):
    """节点列表"""
    type: str
    nodes: list[dict[str, Any]]
    count: int


class RelatedNodes(BaseModel):
    """关联节点"""
    type: str
    key: str
    field: str
    relation: str
    direction: Literal["IN", "OUT"]
    target: str
    nodes: list[dict[str, Any]]
    count: int


class GraphStatistics(BaseModel):
    """图谱统计"""
    nodes: dict[str, int]
    edges: dict[str, int]
