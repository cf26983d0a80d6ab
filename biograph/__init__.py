# biograph: 生物医药知识图谱 Schema
"""
biograph: 生物医药知识图谱的 GraphQL 类型定义

- Schema 模块 (基因、基因符号、临床试验、文献、专利)
- 面向 neo4j-graphql 自动解析器的 SDL 导出
- Schema 检查与 Neo4j 约束/索引创建
- 只读图谱 API (FastAPI)
"""

__version__ = "0.1.0"
