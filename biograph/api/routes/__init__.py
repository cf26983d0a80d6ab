# API 路由
from . import graph, schema

__all__ = ["graph", "schema"]
