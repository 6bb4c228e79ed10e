"""
测试公共夹具

每个测试使用独立的内存SQLite库，通过依赖覆盖替换 get_db。
"""
import os

# 必须在导入 app 之前设置，避免默认连接MySQL
os.environ.setdefault("DATABASE_URI", "sqlite://")
os.environ.setdefault("CREATE_TABLES", "true")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base, init_db
from app.db.session import get_db
from app.main import app
from app.models.student import Student
from app.repositories.student_repository import StudentRepository
from app.services.core.student_service import StudentService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db):
    return StudentRepository(db)


@pytest.fixture
def service(repository):
    return StudentService(repository)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_students(db):
    """批量写入学生，编号从1开始：Aluno 1, Aluno 2, ..."""
    def _add(count: int):
        students = [
            Student(
                name=f"Aluno {i}",
                email=f"aluno{i}@email.com",
                ra=f"2024{i:03d}",
                cpf=f"123456789{i:02d}",
            )
            for i in range(1, count + 1)
        ]
        db.add_all(students)
        db.commit()
        return students

    return _add
