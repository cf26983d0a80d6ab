from .settings import (
    APIConfig,
    Neo4jConfig,
    SchemaConfig,
    Settings,
    get_settings,
    load_yaml_config,
)

__all__ = [
    "APIConfig",
    "Neo4jConfig",
    "SchemaConfig",
    "Settings",
    "get_settings",
    "load_yaml_config",
]
