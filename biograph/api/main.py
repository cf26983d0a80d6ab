# FastAPI 应用入口
"""
biograph REST API 服务
"""

import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biograph import __version__
from biograph.config import get_settings
from biograph.knowledge import get_neo4j_client, get_schema_registry, init_neo4j_schema
from biograph.utils import get_logger, setup_logging

from .routes import graph, schema

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Starting biograph API...")

    registry = get_schema_registry()
    logger.info("Schema loaded", modules=[m.name for m in registry.modules], types=len(registry))

    try:
        client = get_neo4j_client()
        await client.connect()
        if settings.graph_schema.assert_on_startup:
            await init_neo4j_schema(client, registry)
        logger.info("Neo4j initialized")
    except Exception as e:
        logger.warning(f"Neo4j initialization failed: {e}")

    yield

    logger.info("Shutting down biograph API...")
    try:
        await get_neo4j_client().close()
    except Exception as e:
        logger.warning(f"Neo4j shutdown failed: {e}")


app = FastAPI(
    title="biograph API",
    description="Biomedical knowledge graph type definitions and read API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(schema.router, prefix="/api/v1/schema", tags=["Schema"])
app.include_router(graph.router, prefix="/api/v1/graph", tags=["Graph"])


@app.get("/")
async def root():
    """API 根路径"""
    return {
        "name": "biograph API",
        "version": __version__,
        "description": "Biomedical knowledge graph type definitions",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """健康检查"""
    registry = get_schema_registry()
    health = {
        "status": "healthy",
        "schema": {
            "modules": [m.name for m in registry.modules],
            "types": len(registry),
        },
        "services": {},
    }

    try:
        client = get_neo4j_client()
        await client.connect()
        stats = await client.get_statistics()
        health["services"]["neo4j"] = {
            "status": "connected",
            "nodes": sum(stats.get("nodes", {}).values()),
            "edges": sum(stats.get("edges", {}).values()),
        }
    except Exception as e:
        health["services"]["neo4j"] = {
            "status": "error",
            "error": str(e),
        }
        health["status"] = "degraded"

    return health


def run():
    """启动 API 服务"""
    settings = get_settings()
    uvicorn.run(
        "biograph.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )


if __name__ == "__main__":
    run()
