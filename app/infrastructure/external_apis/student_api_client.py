"""学生管理API的HTTP客户端，供前端页面使用"""

import logging
from typing import Any, Dict, Optional

import requests

from app.core.config import settings

logger = logging.getLogger(__name__)


class StudentAPIClient:
    """
    调用 /v1/students 接口的客户端。

    HTTP错误不在这里处理，以 requests.HTTPError 的形式抛给调用方。
    """

    def __init__(
            self,
            api_base: Optional[str] = None,
            timeout: Optional[int] = None,
            session: Optional[requests.Session] = None,
    ):
        """
        Args:
            api_base: 学生接口的基础URL (默认: 从配置获取)
            timeout: 请求超时秒数 (默认: 从配置获取)
            session: 可注入的 requests.Session，便于复用连接
        """
        self.api_base = (api_base or settings.STUDENT_API_BASE).rstrip("/")
        self.timeout = timeout or settings.STUDENT_API_TIMEOUT
        self.session = session or requests.Session()

    def _request(self, method: str, path: str = "", **kwargs) -> requests.Response:
        url = f"{self.api_base}{path}"
        logger.info(f"[STUDENT_API] {method} {url}")
        response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        try:
            response.raise_for_status()
        except requests.HTTPError:
            logger.error(f"[STUDENT_API] {method} {url} -> {response.status_code}: {response.text}")
            raise
        return response

    def fetch_student_by_id(self, student_id) -> Dict[str, Any]:
        return self._request("GET", f"/{student_id}").json()

    def create_student(self, student: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", json=student).json()

    def update_student(self, student_id, student: Dict[str, Any]) -> None:
        self._request("PUT", f"/{student_id}", json=student)

    def delete_student(self, student_id) -> None:
        self._request("DELETE", f"/{student_id}")

    def fetch_students_paged(
            self,
            page_number: int = 1,
            page_size: int = 10,
            search: str = "",
            sort_by: Optional[str] = None,
            sort_desc: bool = False,
    ) -> Dict[str, Any]:
        params = {"pageNumber": page_number, "pageSize": page_size, "search": search}
        if sort_by:
            params["sortBy"] = sort_by
        params["sortDesc"] = "true" if sort_desc else "false"
        return self._request("GET", "/paged", params=params).json()
