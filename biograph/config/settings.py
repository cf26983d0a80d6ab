# biograph 配置管理
"""
统一配置管理模块，支持:
- YAML 配置文件 (conf.yaml，可选)
- 环境变量覆盖
"""

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def load_yaml_config(config_path: str | Path) -> dict[str, Any]:
    """加载 YAML 配置文件，支持环境变量替换 ${VAR_NAME}"""
    config_path = Path(config_path)
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        content = f.read()

    def replace_env_var(match):
        var_name = match.group(1)
        return os.environ.get(var_name, match.group(0))

    content = re.sub(r'\$\{(\w+)\}', replace_env_var, content)
    return yaml.safe_load(content) or {}


class Neo4jConfig(BaseSettings):
    """Neo4j 连接配置"""
    model_config = SettingsConfigDict(env_prefix="NEO4J_")

    uri: str = "bolt://localhost:7687"
    username: str = "neo4j"
    password: str = ""
    database: str = "neo4j"


class APIConfig(BaseSettings):
    """API 服务配置"""
    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]


class SchemaConfig(BaseSettings):
    """API 提供的 Schema 模块配置"""
    model_config = SettingsConfigDict(env_prefix="SCHEMA_")

    # 为空时加载全部内置模块
    modules: list[str] = Field(default_factory=list)
    assert_on_startup: bool = False


class Settings(BaseSettings):
    """全局配置"""
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    neo4j: Neo4jConfig = Field(default_factory=Neo4jConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    graph_schema: SchemaConfig = Field(default_factory=SchemaConfig)

    log_level: str = "INFO"

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "Settings":
        """从 YAML 文件加载配置"""
        config = load_yaml_config(config_path)

        settings_dict: dict[str, Any] = {}

        if "NEO4J" in config:
            settings_dict["neo4j"] = Neo4jConfig(**config["NEO4J"])
        if "API" in config:
            settings_dict["api"] = APIConfig(**config["API"])
        if "SCHEMA" in config:
            settings_dict["graph_schema"] = SchemaConfig(**config["SCHEMA"])
        if "LOG_LEVEL" in config:
            settings_dict["log_level"] = config["LOG_LEVEL"]

        return cls(**settings_dict)


@lru_cache()
def get_settings() -> Settings:
    """获取全局配置 (缓存)"""
    config_path = Path(__file__).parent.parent.parent / "conf.yaml"
    if config_path.exists():
        return Settings.from_yaml(config_path)
    return Settings()
