# biograph SDK 客户端
"""
biograph API 的 Python SDK 客户端实现
"""

from typing import Any, Optional
from urllib.parse import quote

import httpx

from .models import (
    GraphStatistics,
    LintReport,
    Node,
    NodeList,
    RelatedNodes,
    TypeDetail,
    TypeSummary,
)


def _segment(value: str) -> str:
    return quote(value, safe="")


class BiographError(Exception):
    """SDK 错误基类"""
    pass


class APIError(BiographError):
    """API 调用错误"""
    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API Error {status_code}: {detail}")


class BiographClient:
    """biograph SDK 客户端

    提供对 biograph API 的便捷访问。

    Example:
        ```python
        client = BiographClient(base_url="http://localhost:8000")

        # 获取 SDL
        print(client.get_sdl(module="ClinicalTrials"))

        # 查询节点及关联节点
        trial = client.get_node("ClinicalTrial", "NCT04280705")
        sites = client.get_related("ClinicalTrial", "NCT04280705", "conductedAt")
        ```
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 60.0,
        api_key: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """初始化客户端

        Args:
            base_url: API 基础地址
            timeout: 请求超时时间 (秒)
            api_key: API 密钥 (可选)
            transport: 自定义 httpx transport
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.api_key = api_key
        self.transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """获取 HTTP 客户端"""
        if self._client is None:
            headers = {"Accept": "application/json"}
            if self.api_key:
                headers["Authorization"] = f"Bearer {self.api_key}"

            self._client = httpx.Client(
                base_url=self.base_url,
                headers=headers,
                timeout=self.timeout,
                transport=self.transport,
            )
        return self._client

    def close(self):
        """关闭客户端"""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def _send(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        try:
            response = self.client.request(method, endpoint, **kwargs)
        except httpx.HTTPError as e:
            raise BiographError(f"Request to {endpoint} failed: {e}") from e

        if response.status_code >= 400:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            raise APIError(response.status_code, str(detail))

        return response

    def _request(self, method: str, endpoint: str, **kwargs) -> Any:
        """发送请求并解析 JSON 响应"""
        return self._send(method, endpoint, **kwargs).json()

    # ==================== Schema 接口 ====================

    def get_sdl(self, module: Optional[str] = None, with_directives: bool = False) -> str:
        """获取合并后的 GraphQL SDL，或单个模块的 SDL"""
        params: dict[str, Any] = {"with_directives": with_directives}
        if module:
            params["module"] = module
        return self._send("GET", "/api/v1/schema/sdl", params=params).text

    def list_types(self, module: Optional[str] = None) -> list[TypeSummary]:
        """列出类型"""
        params = {"module": module} if module else None
        result = self._request("GET", "/api/v1/schema/types", params=params)
        return [TypeSummary(**t) for t in result]

    def get_type(self, name: str) -> TypeDetail:
        """获取类型详情"""
        result = self._request("GET", f"/api/v1/schema/types/{_segment(name)}")
        return TypeDetail(**result)

    def lint(self) -> LintReport:
        """获取 Schema 检查结果"""
        result = self._request("GET", "/api/v1/schema/lint")
        return LintReport(**result)

    def get_assertions(self) -> list[str]:
        """获取约束与索引语句"""
        result = self._request("GET", "/api/v1/schema/assertions")
        return result["statements"]

    # ==================== 图谱接口 ====================

    def get_node(self, type_name: str, key: str) -> Node:
        """按 @id 值获取节点"""
        result = self._request(
            "GET",
            f"/api/v1/graph/{_segment(type_name)}/node",
            params={"key": key},
        )
        return Node(**result)

    def list_nodes(
        self,
        type_name: str,
        limit: int = 100,
        skip: int = 0,
        **filters: Any,
    ) -> NodeList:
        """按属性等值过滤列出节点"""
        params = {"limit": limit, "skip": skip, **filters}
        result = self._request("GET", f"/api/v1/graph/{_segment(type_name)}", params=params)
        return NodeList(**result)

    def get_related(
        self,
        type_name: str,
        key: str,
        field: str,
        limit: int = 100,
    ) -> RelatedNodes:
        """沿关系字段获取关联节点"""
        result = self._request(
            "GET",
            f"/api/v1/graph/{_segment(type_name)}/related/{_segment(field)}",
            params={"key": key, "limit": limit},
        )
        return RelatedNodes(**result)

    def get_statistics(self) -> GraphStatistics:
        """获取图谱统计"""
        result = self._request("GET", "/api/v1/graph/statistics")
        return GraphStatistics(**result)
