"""
学生列表页

通过 StudentAPIClient 加载学生，在客户端做模糊过滤，删除前需要确认。
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from app.infrastructure.external_apis import StudentAPIClient

logger = logging.getLogger(__name__)

LIST_ROUTE = "/students"
NEW_ROUTE = "/students/new"
SEARCH_FIELDS = ("name", "email", "ra", "cpf")


def edit_route(student_id) -> str:
    return f"/students/{student_id}/edit"


def filter_students(students: List[Dict[str, Any]], search: Optional[str]) -> List[Dict[str, Any]]:
    """不区分大小写，任一字段包含搜索文本即匹配；空搜索返回全部"""
    if not search or not search.strip():
        return list(students)
    needle = search.lower()
    return [
        student for student in students
        if any(needle in str(student.get(field) or "").lower() for field in SEARCH_FIELDS)
    ]


class StudentListPage:
    def __init__(
            self,
            client: StudentAPIClient,
            navigate: Callable[[str], None],
            page_size: int = 100,
    ):
        self.client = client
        self.navigate = navigate
        self.page_size = page_size

        self.students: List[Dict[str, Any]] = []
        self.search = ""
        self.show_delete_dialog = False
        self.selected_student_id = None

    def load(self) -> None:
        result = self.client.fetch_students_paged(page_number=1, page_size=self.page_size)
        self.students = result.get("items", [])
        logger.info(f"已加载 {len(self.students)} 名学生")

    @property
    def filtered_students(self) -> List[Dict[str, Any]]:
        return filter_students(self.students, self.search)

    def go_to_new(self) -> None:
        self.navigate(NEW_ROUTE)

    def go_to_edit(self, student_id) -> None:
        self.navigate(edit_route(student_id))

    def confirm_delete(self, student_id) -> None:
        self.selected_student_id = student_id
        self.show_delete_dialog = True

    def cancel_delete(self) -> None:
        self.selected_student_id = None
        self.show_delete_dialog = False

    def handle_delete(self) -> None:
        """删除选中的学生并重新加载列表，无论成功与否都关闭确认框"""
        student_id = self.selected_student_id
        try:
            if student_id is not None:
                self.client.delete_student(student_id)
                self.load()
        finally:
            self.cancel_delete()
