# Schema 合并、渲染与检查
from .assertions import schema_assertions
from .lint import LintIssue, LintReport, lint_document, lint_registry, lint_sdl
from .registry import (
    DEFAULT_MODULES,
    SchemaRegistry,
    get_schema_registry,
    load_registry,
)
from .sdl import (
    DIRECTIVE_PRELUDE,
    build_graphql_schema,
    parse_sdl,
    render_module,
    render_sdl,
    render_type,
)

__all__ = [
    "DEFAULT_MODULES",
    "DIRECTIVE_PRELUDE",
    "LintIssue",
    "LintReport",
    "SchemaRegistry",
    "build_graphql_schema",
    "get_schema_registry",
    "lint_document",
    "lint_registry",
    "lint_sdl",
    "load_registry",
    "parse_sdl",
    "render_module",
    "render_sdl",
    "render_type",
    "schema_assertions",
]
