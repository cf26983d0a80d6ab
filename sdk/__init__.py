# biograph Python SDK
"""
biograph 知识图谱 API 的 Python 客户端

使用示例:

```python
from sdk import BiographClient

client = BiographClient(base_url="http://localhost:8000")

# 类型定义
for t in client.list_types(module="Biomedical"):
    print(t.name, t.kind)

# 图谱查询
gene = client.get_node("Gene", "59272")
symbols = client.get_related("Gene", "59272", "symbols")
```
"""

from .client import APIError, BiographClient, BiographError
from .models import (
    GraphStatistics,
    LintIssue,
    LintReport,
    Node,
    NodeList,
    RelatedNodes,
    TypeDetail,
    TypeSummary,
)

__version__ = "0.1.0"
__all__ = [
    "APIError",
    "BiographClient",
    "BiographError",
    "GraphStatistics",
    "LintIssue",
    "LintReport",
    "Node",
    "NodeList",
    "RelatedNodes",
    "TypeDetail",
    "TypeSummary",
]
