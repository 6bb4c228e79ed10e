"""Student Repository - 数据访问层，只返回ORM实体"""
import logging
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, Query

from app.infrastructure.exceptions import DuplicateRegistrationError
from app.models.student import Student

logger = logging.getLogger(__name__)

# 允许排序的字段，键区分大小写
SORT_COLUMNS = {
    "name": Student.name,
    "email": Student.email,
    "ra": Student.ra,
    "cpf": Student.cpf,
}


class StudentRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Student]:
        return self.db.query(Student).order_by(Student.id).all()

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self.db.get(Student, student_id)

    def get_by_ra(self, ra: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.ra == ra).first()

    def exists(self, student_id: int) -> bool:
        return bool(self.db.query(self.db.query(Student).filter(Student.id == student_id).exists()).scalar())

    def exists_by_ra(self, ra: str) -> bool:
        return bool(self.db.query(self.db.query(Student).filter(Student.ra == ra).exists()).scalar())

    def create(self, student: Student) -> Student:
        self.db.add(student)
        try:
            self.db.commit()
        except IntegrityError as e:
            # 唯一索引是ra唯一性的最终保证
            self.db.rollback()
            logger.warning(f"写入学生失败，ra重复: {student.ra}")
            raise DuplicateRegistrationError(student.ra) from e
        self.db.refresh(student)
        return student

    def update(self, student: Student) -> Student:
        self.db.add(student)
        self.db.commit()
        self.db.refresh(student)
        return student

    def delete(self, student_id: int) -> bool:
        student = self.get_by_id(student_id)
        if student is None:
            return False
        self.db.delete(student)
        self.db.commit()
        return True

    def get_paged(
            self,
            page_number: int,
            page_size: int,
            search: Optional[str] = None,
            sort_by: Optional[str] = None,
            sort_desc: bool = False,
    ) -> List[Student]:
        """
        分页查询学生

        Args:
            page_number: 页码，从1开始
            page_size: 每页条数
            search: 模糊搜索文本，不区分大小写，匹配 name/email/ra/cpf 任一字段
            sort_by: 排序字段，仅支持 name/email/ra/cpf，其余按id升序
            sort_desc: 是否降序
        """
        query = self._apply_search(self.db.query(Student), search)

        column = SORT_COLUMNS.get(sort_by) if sort_by else None
        if column is None:
            query = query.order_by(Student.id.asc())
        else:
            query = query.order_by(column.desc() if sort_desc else column.asc(), Student.id.asc())

        # 页码/页大小不做上限校验，越界只返回空列表
        page_size = max(page_size, 0)
        offset = max(page_number - 1, 0) * page_size
        return query.offset(offset).limit(page_size).all()

    def count(self, search: Optional[str] = None) -> int:
        return self._apply_search(self.db.query(Student), search).count()

    @staticmethod
    def _apply_search(query: Query, search: Optional[str]) -> Query:
        if not search or not search.strip():
            return query
        lower = search.lower()
        return query.filter(or_(
            func.lower(Student.name).contains(lower, autoescape=True),
            func.lower(Student.email).contains(lower, autoescape=True),
            func.lower(Student.ra).contains(lower, autoescape=True),
            func.lower(Student.cpf).contains(lower, autoescape=True),
        ))
