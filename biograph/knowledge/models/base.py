# Schema 声明基础组件
"""
知识图谱类型定义的基础组件

节点类型是 pydantic 模型，其字段即 Neo4j 中存储的节点属性。
指向其他类型的关系字段以类属性声明 (``Relation`` 或 ``Reference``)，
会渲染到 GraphQL SDL 中，但不属于属性数据。

带属性的关系类型 (``type Synonym @relation(...)``) 是 ``GraphRelationship``，
恰有一个 ``from`` 和一个 ``to`` ``Endpoint``。

    class Facility(GraphNode):
        \"\"\"A site where a clinical trial is conducted.\"\"\"
        name: str = id_field()
        trials = Relation("ClinicalTrial", "CONDUCTED_AT", Direction.IN)
        city = Relation("City", "LOCATED_IN", Direction.OUT, many=False)
"""

import inspect
import re
import types
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, ClassVar, Iterator, Mapping, Optional, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field
from pydantic.fields import FieldInfo

RELATION_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

DIRECTIVES = ("id", "unique", "index")

_SCALARS: dict[type, str] = {
    str: "String",
    int: "Int",
    float: "Float",
    bool: "Boolean",
    # 日期以字符串存储，不使用 Cypher 时间类型
    date: "String",
    datetime: "String",
}


class SchemaDeclarationError(ValueError):
    """类型声明错误"""


class Direction(str, Enum):
    """关系方向，以声明字段的类型为视角"""
    IN = "IN"
    OUT = "OUT"

    @property
    def inverse(self) -> "Direction":
        return Direction.OUT if self is Direction.IN else Direction.IN


# ==================== 属性字段 ====================

def graph_field(
    default: Any = ...,
    *,
    description: str | None = None,
    graphql_type: str | None = None,
    directive: str | None = None,
    **kwargs: Any,
) -> Any:
    """带 GraphQL 渲染信息的 pydantic ``Field``

    Args:
        default: 默认值 (必填为 ``...``)
        description: 渲染为 SDL 字段描述
        graphql_type: 覆盖由类型注解推导出的标量类型
        directive: ``id``、``unique`` 或 ``index``
    """
    if directive is not None and directive not in DIRECTIVES:
        raise SchemaDeclarationError(f"Unsupported field directive: {directive}")

    extra: dict[str, Any] = {}
    if graphql_type:
        extra["graphql_type"] = graphql_type
    if directive:
        extra["graphql_directive"] = directive

    return Field(
        default,
        description=description,
        json_schema_extra=extra or None,
        **kwargs,
    )


def id_field(description: str | None = None, graphql_type: str | None = None) -> Any:
    """标注 ``@id`` 的必填属性"""
    return graph_field(..., description=description, graphql_type=graphql_type, directive="id")


def unique_field(default: Any = ..., description: str | None = None) -> Any:
    """标注 ``@unique`` 的属性"""
    return graph_field(default, description=description, directive="unique")


def indexed_field(default: Any = ..., description: str | None = None) -> Any:
    """标注 ``@index`` 的属性"""
    return graph_field(default, description=description, directive="index")


@dataclass(frozen=True)
class PropertySpec:
    """SDL 中的标量字段"""
    name: str
    scalar: str
    required: bool
    many: bool
    description: Optional[str] = None
    directive: Optional[str] = None

    @property
    def graphql_type(self) -> str:
        rendered = f"[{self.scalar}]" if self.many else self.scalar
        return f"{rendered}!" if self.required else rendered

    @classmethod
    def from_field(cls, name: str, info: FieldInfo) -> "PropertySpec":
        annotation = info.annotation
        required = True

        origin = get_origin(annotation)
        if origin is Union or origin is types.UnionType:
            args = get_args(annotation)
            non_null = [a for a in args if a is not type(None)]
            if len(non_null) != 1:
                raise SchemaDeclarationError(
                    f"Field {name!r}: union types cannot be rendered as GraphQL scalars"
                )
            required = len(non_null) == len(args)
            annotation = non_null[0]
            origin = get_origin(annotation)

        many = origin is list
        if many:
            (annotation,) = get_args(annotation) or (str,)

        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        scalar = extra.get("graphql_type") or _SCALARS.get(annotation)
        if scalar is None:
            raise SchemaDeclarationError(
                f"Field {name!r}: no GraphQL scalar for {annotation!r}"
            )

        return cls(
            name=name,
            scalar=scalar,
            required=required,
            many=many,
            description=info.description,
            directive=extra.get("graphql_directive"),
        )


# ==================== 引用字段 ====================

class Reference:
    """类型为其他已声明类型的字段，不带关系指令"""

    def __init__(
        self,
        target: str,
        *,
        many: bool = True,
        description: str | None = None,
    ):
        if not target or not target.isidentifier():
            raise SchemaDeclarationError(f"Invalid target type name: {target!r}")
        self.target = target
        self.many = many
        self.description = description
        self.field_name: str = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.field_name = name

    @property
    def graphql_type(self) -> str:
        return f"[{self.target}]" if self.many else self.target

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.field_name}: {self.graphql_type})"


class Relation(Reference):
    """沿具名、有向关系指向节点类型的字段"""

    def __init__(
        self,
        target: str,
        name: str,
        direction: Direction | str = Direction.OUT,
        *,
        many: bool = True,
        description: str | None = None,
    ):
        super().__init__(target, many=many, description=description)
        if not RELATION_NAME_PATTERN.match(name or ""):
            raise SchemaDeclarationError(f"Invalid relation name: {name!r}")
        try:
            self.direction = Direction(direction)
        except ValueError:
            raise SchemaDeclarationError(
                f"Invalid relation direction {direction!r} (expected IN or OUT)"
            ) from None
        self.name = name

    def __repr__(self) -> str:
        return (
            f"Relation({self.field_name}: {self.graphql_type} "
            f"{self.name} {self.direction.value})"
        )


class Endpoint(Reference):
    """关系类型的 ``from`` 或 ``to`` 端"""

    def __init__(self, target: str, role: str, *, description: str | None = None):
        super().__init__(target, many=False, description=description)
        if role not in ("from", "to"):
            raise SchemaDeclarationError(f"Endpoint role must be 'from' or 'to', got {role!r}")
        self.role = role


# ==================== 类型 ====================

class GraphType(BaseModel):
    """所有 GraphQL 对象类型声明的基类"""
    model_config = ConfigDict(ignored_types=(Reference,), extra="ignore")

    @classmethod
    def graphql_name(cls) -> str:
        return cls.__name__

    @classmethod
    def graphql_description(cls) -> str | None:
        doc = cls.__dict__.get("__doc__")
        return inspect.cleandoc(doc) if doc else None

    @classmethod
    def properties(cls) -> list[PropertySpec]:
        return [PropertySpec.from_field(name, info) for name, info in cls.model_fields.items()]

    @classmethod
    def references(cls) -> list[Reference]:
        """按声明顺序返回引用字段，基类字段在前"""
        found: dict[str, Reference] = {}
        for klass in reversed(cls.__mro__):
            for value in vars(klass).values():
                if isinstance(value, Reference):
                    found[value.field_name] = value
        return list(found.values())

    @classmethod
    def field_names(cls) -> list[str]:
        return [p.name for p in cls.properties()] + [r.field_name for r in cls.references()]

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        clashes = set(cls.model_fields) & {r.field_name for r in cls.references()}
        if clashes:
            raise SchemaDeclarationError(
                f"{cls.__name__}: {sorted(clashes)} declared both as property and reference"
            )

    def to_neo4j_properties(self) -> dict[str, Any]:
        """转换为 Neo4j 属性字典，忽略未设置的可选值"""
        data = self.model_dump(exclude_none=True)
        for key, value in data.items():
            if isinstance(value, (datetime, date)):
                data[key] = value.isoformat()
            elif isinstance(value, Enum):
                data[key] = value.value
        return data


class GraphNode(GraphType):
    """节点类型，Neo4j 标签即类型名

    ``storage_indexes`` 列出需建 Neo4j 索引、但在 SDL 中不标注 ``@index`` 的属性。
    """
    storage_indexes: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def label(cls) -> str:
        return cls.graphql_name()

    @classmethod
    def id_property(cls) -> PropertySpec | None:
        for prop in cls.properties():
            if prop.directive == "id":
                return prop
        return None

    @classmethod
    def relations(cls) -> list[Relation]:
        return [r for r in cls.references() if isinstance(r, Relation)]

    @classmethod
    def relation(cls, field_name: str) -> Relation:
        for rel in cls.relations():
            if rel.field_name == field_name:
                return rel
        raise KeyError(f"{cls.__name__} has no relation field {field_name!r}")

    @classmethod
    def from_neo4j(cls, properties: Mapping[str, Any]) -> "GraphNode":
        """由 Neo4j 节点属性构建并校验，忽略未声明的属性"""
        return cls.model_validate(dict(properties))

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        ids = [p.name for p in cls.properties() if p.directive == "id"]
        if len(ids) > 1:
            raise SchemaDeclarationError(f"{cls.__name__}: more than one @id field {ids}")
        undeclared = sorted(set(cls.storage_indexes) - set(cls.model_fields))
        if undeclared:
            raise SchemaDeclarationError(f"{cls.__name__}: storage_indexes names undeclared properties {undeclared}")
        if any(isinstance(r, Endpoint) for r in cls.references()):
            raise SchemaDeclarationError(f"{cls.__name__}: endpoints belong on relationship types")


class GraphRelationship(GraphType):
    """带属性的关系类型

    子类需设置 ``relation_name``，并各声明一个 ``from`` 与 ``to`` 端。
    """
    relation_name: ClassVar[str] = ""

    @classmethod
    def endpoint(cls, role: str) -> Endpoint:
        for ref in cls.references():
            if isinstance(ref, Endpoint) and ref.role == role:
                return ref
        raise KeyError(f"{cls.__name__} has no {role!r} endpoint")

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if not RELATION_NAME_PATTERN.match(cls.relation_name or ""):
            raise SchemaDeclarationError(
                f"{cls.__name__}: invalid relation_name {cls.relation_name!r}"
            )
        refs = cls.references()
        roles = sorted(r.role for r in refs if isinstance(r, Endpoint))
        if roles != ["from", "to"]:
            raise SchemaDeclarationError(
                f"{cls.__name__}: needs exactly one 'from' and one 'to' endpoint, got {roles}"
            )
        if any(not isinstance(r, Endpoint) for r in refs):
            raise SchemaDeclarationError(f"{cls.__name__}: only endpoints may reference other types")


class SchemaModule:
    """一组有序的类型定义"""

    def __init__(
        self,
        name: str,
        types: list[type[GraphType]],
        description: str | None = None,
    ):
        if not types:
            raise SchemaDeclarationError(f"Schema module {name!r} declares no types")
        for t in types:
            if not (isinstance(t, type) and issubclass(t, GraphType)):
                raise SchemaDeclarationError(f"Schema module {name!r}: {t!r} is not a GraphType")
        self.name = name
        self.types: tuple[type[GraphType], ...] = tuple(types)
        self.description = description

    def type_names(self) -> list[str]:
        return [t.graphql_name() for t in self.types]

    def __iter__(self) -> Iterator[type[GraphType]]:
        return iter(self.types)

    def __len__(self) -> int:
        return len(self.types)

    def __repr__(self) -> str:
        return f"SchemaModule({self.name!r}, {len(self.types)} types)"
