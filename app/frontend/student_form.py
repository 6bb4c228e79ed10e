"""
学生表单页

新建模式提交全部四个字段；编辑模式先加载记录，ra/cpf 只读，提交整条记录，服务端只更新姓名和邮箱。
"""
import logging
import re
from typing import Callable, Dict, Optional

from app.frontend.student_list import LIST_ROUTE
from app.infrastructure.external_apis import StudentAPIClient

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "ra", "cpf")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class StudentFormPage:
    def __init__(
            self,
            client: StudentAPIClient,
            navigate: Callable[[str], None],
            student_id=None,
    ):
        self.client = client
        self.navigate = navigate
        self.student_id = student_id
        self.student: Dict[str, str] = {field: "" for field in REQUIRED_FIELDS}
        self.errors: Dict[str, str] = {}

    @property
    def is_edit(self) -> bool:
        return self.student_id is not None

    @property
    def readonly_fields(self) -> tuple:
        return ("ra", "cpf") if self.is_edit else ()

    @property
    def valid(self) -> bool:
        return not self.validate()

    def load(self) -> None:
        if not self.is_edit:
            return
        data = self.client.fetch_student_by_id(self.student_id)
        self.student = {field: data.get(field) or "" for field in REQUIRED_FIELDS}

    def set_field(self, field: str, value: str) -> None:
        if field not in REQUIRED_FIELDS:
            raise KeyError(field)
        if field in self.readonly_fields:
            logger.warning(f"编辑模式下字段只读: {field}")
            return
        self.student[field] = value

    def validate(self) -> Dict[str, str]:
        errors = {}
        for field in REQUIRED_FIELDS:
            if not (self.student.get(field) or "").strip():
                errors[field] = f"{field} is required"
        email = self.student.get("email") or ""
        if "email" not in errors and not EMAIL_PATTERN.match(email.strip()):
            errors["email"] = "email is invalid"
        return errors

    def submit(self) -> bool:
        """校验通过才提交；成功后跳转回列表页"""
        self.errors = self.validate()
        if self.errors:
            return False

        if self.is_edit:
            self.client.update_student(self.student_id, dict(self.student))
        else:
            self.client.create_student(dict(self.student))
        self.navigate(LIST_ROUTE)
        return True

    def cancel(self) -> None:
        self.navigate(LIST_ROUTE)

    def field_value(self, field: str) -> Optional[str]:
        return self.student.get(field)
