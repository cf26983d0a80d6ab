# Schema 检查
"""
neo4j-graphql 风格 SDL 的规范性检查

检查基于 SDL 文本，渲染出的 Schema 与手写的类型定义均可检查:

1. graphql-core SDL 校验 (未知类型、重复类型名、未知指令或参数)
2. 字段上的 ``@relation`` 需有合法的 ``name`` 与 IN/OUT ``direction``
3. 关系字段须指向已声明的节点类型
4. 关系类型须声明 ``name``/``from``/``to``，两端均为本类型的节点字段
5. 每个类型至多一个 ``@id``，且为非列表标量字段
6. 两个类型间互逆的关系字段方向相反，同一类型上同名同向的关系字段至多一个
7. 未标注 ``@relation`` 的节点类型字段 (警告)
"""

from typing import Literal, Optional

from graphql import (
    DocumentNode,
    GraphQLSyntaxError,
    ObjectTypeDefinitionNode,
    parse,
)
from graphql.language import (
    DirectiveDefinitionNode,
    DirectiveNode,
    EnumValueNode,
    FieldDefinitionNode,
    ListTypeNode,
    NonNullTypeNode,
    StringValueNode,
    TypeDefinitionNode,
)
from graphql.validation.validate import validate_sdl
from pydantic import BaseModel, Field

from biograph.utils import get_logger

from ..models.base import RELATION_NAME_PATTERN
from .registry import SchemaRegistry
from .sdl import DIRECTIVE_PRELUDE, render_sdl

logger = get_logger(__name__)

Severity = Literal["error", "warning"]

_BUILTIN_SCALARS = {"String", "Int", "Float", "Boolean", "ID"}


class LintIssue(BaseModel):
    """单条检查结果"""
    severity: Severity
    code: str
    message: str
    type_name: Optional[str] = None
    field_name: Optional[str] = None


class LintReport(BaseModel):
    """一份 SDL 文档的全部检查结果"""
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

    def add(
        self,
        severity: Severity,
        code: str,
        message: str,
        type_name: str | None = None,
        field_name: str | None = None,
    ) -> None:
        self.issues.append(
            LintIssue(
                severity=severity,
                code=code,
                message=message,
                type_name=type_name,
                field_name=field_name,
            )
        )

    def codes(self) -> set[str]:
        return {i.code for i in self.issues}


# ==================== AST 工具函数 ====================

def _directive(node, name: str) -> DirectiveNode | None:
    for directive in node.directives or ():
        if directive.name.value == name:
            return directive
    return None


def _directives(node, name: str) -> list[DirectiveNode]:
    return [d for d in node.directives or () if d.name.value == name]


def _argument(directive: DirectiveNode, name: str) -> str | None:
    """指令参数的字符串或枚举值"""
    for arg in directive.arguments or ():
        if arg.name.value == name:
            if isinstance(arg.value, (StringValueNode, EnumValueNode)):
                return arg.value.value
            return None
    return None


def _unwrap(type_node) -> tuple[str, bool]:
    """字段的具名类型，以及是否为列表"""
    is_list = False
    while isinstance(type_node, (NonNullTypeNode, ListTypeNode)):
        if isinstance(type_node, ListTypeNode):
            is_list = True
        type_node = type_node.type
    return type_node.name.value, is_list


def _with_prelude(document: DocumentNode) -> DocumentNode:
    declares_relation = any(
        isinstance(d, DirectiveDefinitionNode) and d.name.value == "relation"
        for d in document.definitions
    )
    if declares_relation:
        return document
    prelude = parse(DIRECTIVE_PRELUDE)
    return DocumentNode(definitions=tuple(prelude.definitions) + tuple(document.definitions))


# ==================== 检查项 ====================

def _check_relation_field(
    report: LintReport,
    type_name: str,
    field: FieldDefinitionNode,
    directive: DirectiveNode,
    node_types: set[str],
) -> tuple[str, str, str] | None:
    field_name = field.name.value
    target, _ = _unwrap(field.type)

    name = _argument(directive, "name")
    if not name or not RELATION_NAME_PATTERN.match(name):
        report.add(
            "error", "relation-name",
            f"@relation on {type_name}.{field_name} needs a valid name, got {name!r}",
            type_name, field_name,
        )
        name = None
    elif name != name.upper():
        report.add(
            "warning", "relation-name-style",
            f"Relation name {name!r} is not UPPER_SNAKE_CASE",
            type_name, field_name,
        )

    direction = _argument(directive, "direction")
    if direction not in ("IN", "OUT"):
        report.add(
            "error", "relation-direction",
            f"@relation on {type_name}.{field_name} needs direction IN or OUT, got {direction!r}",
            type_name, field_name,
        )
        direction = None

    if target not in node_types:
        report.add(
            "error", "relation-target",
            f"{type_name}.{field_name} relates to {target}, which is not a declared node type",
            type_name, field_name,
        )

    if name and direction:
        return target, name, direction
    return None


def _check_relationship_type(
    report: LintReport,
    node: ObjectTypeDefinitionNode,
    directive: DirectiveNode,
    node_types: set[str],
) -> None:
    type_name = node.name.value
    fields = {f.name.value: f for f in node.fields or ()}

    name = _argument(directive, "name")
    if not name or not RELATION_NAME_PATTERN.match(name):
        report.add(
            "error", "relation-name",
            f"Relationship type {type_name} needs a valid name, got {name!r}",
            type_name,
        )

    if _argument(directive, "direction") is not None:
        report.add(
            "warning", "relationship-direction",
            f"Relationship type {type_name} takes from/to, direction is ignored",
            type_name,
        )

    for role in ("from", "to"):
        field_name = _argument(directive, role)
        if not field_name:
            report.add(
                "error", "relationship-endpoint",
                f"Relationship type {type_name} is missing '{role}'",
                type_name,
            )
            continue
        field = fields.get(field_name)
        if field is None:
            report.add(
                "error", "relationship-endpoint",
                f"Relationship type {type_name}: '{role}' names missing field {field_name!r}",
                type_name, field_name,
            )
            continue
        target, is_list = _unwrap(field.type)
        if target not in node_types or is_list:
            report.add(
                "error", "relationship-endpoint",
                f"{type_name}.{field_name} must be a single node type, got {target}",
                type_name, field_name,
            )


def _check_ids(
    report: LintReport,
    node: ObjectTypeDefinitionNode,
    object_types: set[str],
) -> None:
    type_name = node.name.value
    id_fields = [f for f in node.fields or () if _directive(f, "id")]

    if len(id_fields) > 1:
        report.add(
            "error", "id-duplicate",
            f"{type_name} has more than one @id field: {[f.name.value for f in id_fields]}",
            type_name,
        )

    for field in id_fields:
        target, is_list = _unwrap(field.type)
        if is_list or target in object_types:
            report.add(
                "error", "id-type",
                f"@id field {type_name}.{field.name.value} must be a single scalar",
                type_name, field.name.value,
            )


def lint_document(document: DocumentNode) -> LintReport:
    """检查已解析的 SDL 文档"""
    report = LintReport()

    for error in validate_sdl(_with_prelude(document)):
        report.add("error", "sdl", error.message)

    objects = [d for d in document.definitions if isinstance(d, ObjectTypeDefinitionNode)]
    object_types = {o.name.value for o in objects}
    relationship_types = {o.name.value for o in objects if _directive(o, "relation")}
    node_types = object_types - relationship_types
    declared = {d.name.value for d in document.definitions if isinstance(d, TypeDefinitionNode)}

    edges: dict[tuple[str, str, str], list[tuple[str, str]]] = {}

    for node in objects:
        type_name = node.name.value
        type_directive = _directive(node, "relation")
        if type_directive:
            _check_relationship_type(report, node, type_directive, node_types)

        _check_ids(report, node, object_types)

        for field in node.fields or ():
            field_name = field.name.value
            target, _ = _unwrap(field.type)
            relations = _directives(field, "relation")

            if not relations:
                if target in node_types and not type_directive:
                    report.add(
                        "warning", "untyped-reference",
                        f"{type_name}.{field_name} references node type {target} without @relation",
                        type_name, field_name,
                    )
                elif target not in declared and target not in _BUILTIN_SCALARS:
                    report.add(
                        "error", "unknown-type",
                        f"{type_name}.{field_name} references undeclared type {target}",
                        type_name, field_name,
                    )
                continue

            edge = _check_relation_field(report, type_name, field, relations[0], node_types)
            if edge:
                target, name, direction = edge
                edges.setdefault((type_name, target, name), []).append((field_name, direction))

    _check_inverse_directions(report, edges)
    return report


def _check_inverse_directions(
    report: LintReport,
    edges: dict[tuple[str, str, str], list[tuple[str, str]]],
) -> None:
    for (source, target, name), fields in edges.items():
        if source == target:
            _check_self_relation(report, source, name, fields)
            continue
        if source > target:
            continue
        for field_name, direction in fields:
            for inverse_field, inverse_direction in edges.get((target, source, name), ()):
                if direction == inverse_direction:
                    report.add(
                        "error", "relation-conflict",
                        f"{source}.{field_name} and {target}.{inverse_field} both use "
                        f"{name} with direction {direction}",
                        source, field_name,
                    )


def _check_self_relation(
    report: LintReport,
    type_name: str,
    name: str,
    fields: list[tuple[str, str]],
) -> None:
    # 每个方向只允许一个字段
    seen: dict[str, str] = {}
    for field_name, direction in fields:
        if direction in seen:
            report.add(
                "error", "relation-conflict",
                f"{type_name}.{seen[direction]} and {type_name}.{field_name} both use "
                f"{name} with direction {direction}",
                type_name, field_name,
            )
        else:
            seen[direction] = field_name


def lint_sdl(text: str) -> LintReport:
    """检查 SDL 文本"""
    try:
        document = parse(text)
    except GraphQLSyntaxError as e:
        report = LintReport()
        report.add("error", "syntax", e.message)
        return report
    return lint_document(document)


def lint_registry(registry: SchemaRegistry) -> LintReport:
    """渲染注册表合并后的 SDL 并检查"""
    report = lint_sdl(render_sdl(registry))
    logger.info(
        "Schema linted",
        types=len(registry),
        errors=len(report.errors),
        warnings=len(report.warnings),
    )
    return report
