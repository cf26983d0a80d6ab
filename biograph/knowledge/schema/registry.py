# Schema 注册表
"""
将各 Schema 模块合并为一组类型定义，
与各模块 typeDefs 拼接后交给 Schema 执行框架的方式一致。
"""

from functools import lru_cache
from typing import Iterable

from biograph.config import get_settings
from biograph.utils import get_logger

from ..models import biomedical, clinical_trials, literature, patents
from ..models.base import GraphNode, GraphRelationship, GraphType, SchemaModule

logger = get_logger(__name__)

DEFAULT_MODULES: tuple[SchemaModule, ...] = (
    biomedical.type_defs,
    clinical_trials.type_defs,
    literature.type_defs,
    patents.type_defs,
)


class SchemaRegistry:
    """按顺序合并多个 Schema 模块的视图

    多个模块声明同一类型名时只保留一次 (先声明的模块优先)，
    并通过 ``duplicates()`` 报告。
    """

    def __init__(self, modules: Iterable[SchemaModule]):
        self.modules: list[SchemaModule] = list(modules)
        self._types: dict[str, type[GraphType]] = {}
        self._owners: dict[str, list[str]] = {}

        for module in self.modules:
            for declared in module:
                name = declared.graphql_name()
                self._owners.setdefault(name, []).append(module.name)
                self._types.setdefault(name, declared)

    def types(self) -> list[type[GraphType]]:
        return list(self._types.values())

    def node_types(self) -> list[type[GraphNode]]:
        return [t for t in self._types.values() if issubclass(t, GraphNode)]

    def relationship_types(self) -> list[type[GraphRelationship]]:
        return [t for t in self._types.values() if issubclass(t, GraphRelationship)]

    def get(self, name: str) -> type[GraphType]:
        try:
            return self._types[name]
        except KeyError:
            raise KeyError(f"Unknown type: {name}") from None

    def get_node(self, name: str) -> type[GraphNode]:
        declared = self.get(name)
        if not issubclass(declared, GraphNode):
            raise KeyError(f"{name} is a relationship type, not a node type")
        return declared

    def module(self, name: str) -> SchemaModule:
        for module in self.modules:
            if module.name == name:
                return module
        raise KeyError(f"Unknown schema module: {name}")

    def module_of(self, type_name: str) -> str:
        self.get(type_name)
        return self._owners[type_name][0]

    def duplicates(self) -> dict[str, list[str]]:
        """被重复声明的类型名及声明它们的模块"""
        return {name: owners for name, owners in self._owners.items() if len(owners) > 1}

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)


def load_registry(names: Iterable[str] | None = None) -> SchemaRegistry:
    """基于内置模块构建注册表，可按模块名筛选"""
    if names is None:
        return SchemaRegistry(DEFAULT_MODULES)

    by_name = {m.name: m for m in DEFAULT_MODULES}
    selected = []
    for name in names:
        if name not in by_name:
            raise KeyError(f"Unknown schema module: {name}")
        selected.append(by_name[name])
    return SchemaRegistry(selected)


@lru_cache()
def get_schema_registry() -> SchemaRegistry:
    """获取配置中启用模块的注册表 (缓存)"""
    settings = get_settings()
    registry = load_registry(settings.graph_schema.modules or None)
    logger.debug(
        "Schema registry loaded",
        modules=[m.name for m in registry.modules],
        types=len(registry),
    )
    return registry
