from sqlalchemy import Column, INT, VARCHAR

from app.db.base import Base


class Student(Base):
    """
    学生数据库模型

    ra（学号）全表唯一，由唯一索引保证；cpf 创建后不再修改
    """
    __tablename__ = "t_student"

    id = Column(INT, primary_key=True, autoincrement=True, index=True)
    name = Column(VARCHAR(255), nullable=False)
    email = Column(VARCHAR(255), nullable=False)
    ra = Column(VARCHAR(64), nullable=False, unique=True, index=True)
    cpf = Column(VARCHAR(32), nullable=False)

    def __repr__(self) -> str:
        return f"<Student id={self.id} ra={self.ra!r}>"
