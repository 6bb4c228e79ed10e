import logging
from typing import Optional

from app.infrastructure.exceptions import DuplicateRegistrationError
from app.models.student import Student
from app.repositories.student_repository import StudentRepository
from app.schemas.student import StudentCreate, StudentUpdate, StudentView, PagedResult

logger = logging.getLogger(__name__)


class StudentService:
    """
    学生业务服务

    负责实体与视图模型之间的转换，以及创建时的ra唯一性校验。
    失败通过返回值表达（None/False），不抛异常。
    """

    def __init__(self, repository: StudentRepository):
        self.repository = repository

    @staticmethod
    def _to_view(student: Student) -> StudentView:
        return StudentView.model_validate(student)

    def get_by_id(self, student_id: int) -> Optional[StudentView]:
        student = self.repository.get_by_id(student_id)
        if student is None:
            return None
        return self._to_view(student)

    def create(self, payload: StudentCreate) -> Optional[StudentView]:
        # 预检查只是提前返回，真正的唯一性由数据库唯一索引保证
        if self.repository.exists_by_ra(payload.ra):
            logger.info(f"ra已存在，拒绝创建: {payload.ra}")
            return None

        student = Student(
            name=payload.name,
            email=payload.email,
            ra=payload.ra,
            cpf=payload.cpf,
        )
        try:
            created = self.repository.create(student)
        except DuplicateRegistrationError:
            # 并发创建同一ra时由唯一索引拦截
            return None

        logger.info(f"学生已创建: id={created.id}, ra={created.ra}")
        return self._to_view(created)

    def update(self, student_id: int, payload: StudentUpdate) -> bool:
        student = self.repository.get_by_id(student_id)
        if student is None:
            return False

        student.name = payload.name
        student.email = payload.email
        self.repository.update(student)
        return True

    def delete(self, student_id: int) -> bool:
        return self.repository.delete(student_id)

    def get_paged(
            self,
            page_number: int,
            page_size: int,
            search: Optional[str] = None,
            sort_by: Optional[str] = None,
            sort_desc: bool = False,
    ) -> PagedResult:
        total_items = self.repository.count(search)
        # 起始位置已超出匹配总数时不再查询，直接返回空页
        if max(page_number - 1, 0) * max(page_size, 0) >= total_items:
            students = []
        else:
            students = self.repository.get_paged(page_number, page_size, search, sort_by, sort_desc)
        return PagedResult(
            items=[self._to_view(student) for student in students],
            total_items=total_items,
            page_number=page_number,
            page_size=page_size,
        )
