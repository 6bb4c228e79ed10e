import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import settings

logger = logging.getLogger(__name__)


def _engine_options(uri: str) -> dict:
    """SQLite不支持连接池参数，只对服务端数据库启用"""
    if make_url(uri).get_backend_name() == "sqlite":
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_size": 10,
        "max_overflow": 20,
        "pool_recycle": 3600,
    }


# 创建数据库引擎
engine = create_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    # 启用回显SQL语句，便于调试
    echo=False,
    **_engine_options(settings.SQLALCHEMY_DATABASE_URI),
)

# 创建数据库会话
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 创建基本模型类
Base = declarative_base()


def _ensure_mysql_database(db_uri) -> None:
    """MySQL下如果库不存在则先建库"""
    url = make_url(db_uri)
    db_name = url.database
    server_engine = create_engine(url.set(database=None))
    try:
        with server_engine.connect() as connection:
            result = connection.execute(text("SHOW DATABASES LIKE :name"), {"name": db_name})
            if not result.fetchone():
                connection.execute(text(
                    f"CREATE DATABASE `{db_name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
                ))
                logger.info(f"数据库 {db_name} 已创建")
            else:
                logger.info(f"数据库 {db_name} 已存在")
    finally:
        server_engine.dispose()


def init_db(bind=None) -> None:
    """
    初始化数据库，如果表不存在则创建
    """
    # 注册模型到Base.metadata
    from app.models import student  # noqa: F401

    bind = bind or engine
    if not settings.CREATE_TABLES:
        logger.info("自动创建表功能已禁用")
        return

    try:
        if bind.url.get_backend_name() == "mysql":
            _ensure_mysql_database(bind.url)

        Base.metadata.create_all(bind=bind)
        logger.info("所有表已创建或已存在")
    except Exception as e:
        logger.error(f"初始化数据库时出错: {str(e)}")
        raise
