# SDL 渲染
"""
将声明的类型渲染为 neo4j-graphql 风格自动解析器可识别的 GraphQL SDL
(``@relation``, ``@id``, ``@unique``, ``@index``)。
"""

from graphql import DocumentNode, GraphQLSchema, build_ast_schema, parse

from ..models.base import (
    Endpoint,
    GraphRelationship,
    GraphType,
    PropertySpec,
    Reference,
    Relation,
    SchemaModule,
)
from .registry import SchemaRegistry

INDENT = "  "

# 指令定义，单独校验 SDL 时前置
DIRECTIVE_PRELUDE = '''enum _RelationDirections {
  IN
  OUT
}

directive @relation(name: String, direction: _RelationDirections, from: String, to: String) on FIELD_DEFINITION | OBJECT

directive @id on FIELD_DEFINITION

directive @unique on FIELD_DEFINITION

directive @index on FIELD_DEFINITION
'''


def _block_string(text: str | None, indent: str) -> list[str]:
    if not text:
        return []
    body = text.replace('"""', '\\"""').splitlines()
    return (
        [f'{indent}"""']
        + [f"{indent}{line}" if line.strip() else "" for line in body]
        + [f'{indent}"""']
    )


def _property_line(prop: PropertySpec) -> str:
    line = f"{prop.name}: {prop.graphql_type}"
    if prop.directive:
        line += f" @{prop.directive}"
    return line


def _reference_line(ref: Reference) -> str:
    line = f"{ref.field_name}: {ref.graphql_type}"
    if isinstance(ref, Relation):
        line += f' @relation(name: "{ref.name}", direction: {ref.direction.value})'
    return line


def _fields(model: type[GraphType]) -> list[tuple[str | None, str]]:
    props = [(p.description, _property_line(p)) for p in model.properties()]
    refs = model.references()

    if issubclass(model, GraphRelationship):
        start = model.endpoint("from")
        end = model.endpoint("to")
        return (
            [(start.description, _reference_line(start))]
            + props
            + [(end.description, _reference_line(end))]
        )

    return props + [(r.description, _reference_line(r)) for r in refs if not isinstance(r, Endpoint)]


def render_type(model: type[GraphType]) -> str:
    """单个类型的 SDL"""
    header = f"type {model.graphql_name()}"
    if issubclass(model, GraphRelationship):
        header += (
            f' @relation(name: "{model.relation_name}", '
            f'from: "{model.endpoint("from").field_name}", '
            f'to: "{model.endpoint("to").field_name}")'
        )

    lines = _block_string(model.graphql_description(), "")
    lines.append(header + " {")

    for i, (description, line) in enumerate(_fields(model)):
        if description and i > 0:
            lines.append("")
        lines.extend(_block_string(description, INDENT))
        lines.append(INDENT + line)

    lines.append("}")
    return "\n".join(lines)


def render_module(module: SchemaModule) -> str:
    """模块内全部类型的 SDL，按声明顺序"""
    return "\n\n".join(render_type(t) for t in module) + "\n"


def render_sdl(registry: SchemaRegistry, include_directives: bool = False) -> str:
    """注册表中全部模块合并后的 SDL

    Args:
        registry: 待合并的模块
        include_directives: 是否前置指令定义，使文档可脱离扩展库单独校验
    """
    parts = []
    if include_directives:
        parts.append(DIRECTIVE_PRELUDE)
    for module in registry.modules:
        parts.append(f"# {module.name}\n\n" + render_module(module))
    return "\n".join(parts)


def parse_sdl(text: str) -> DocumentNode:
    """解析 SDL 文本，语法错误时抛出 ``GraphQLSyntaxError``"""
    return parse(text)


def build_graphql_schema(registry: SchemaRegistry) -> GraphQLSchema:
    """由合并后的 SDL 构建 graphql-core Schema，SDL 无效时抛出异常"""
    return build_ast_schema(parse(render_sdl(registry, include_directives=True)))
