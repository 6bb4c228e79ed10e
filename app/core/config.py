import os
import json
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import field_validator

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # 基本设置
    API_V1_STR: str = "/v1"
    PROJECT_NAME: str = "AcademicManagement"
    VERSION: str = "0.1.0"

    # CORS 设置
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            # 优先按JSON数组解析，失败则按逗号分隔
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                if v.startswith("[") and v.endswith("]"):
                    v = v.strip("[]").strip()
                    if v:
                        return [i.strip().strip('"\'') for i in v.split(",")]
                    return []
                return [i.strip() for i in v.split(",") if i.strip()]

        if isinstance(v, list):
            return v

        return []

    # 数据库设置
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "academic"

    # 完整连接串，设置后覆盖上面的DB_*配置
    DATABASE_URI: Optional[str] = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        获取数据库URI
        """
        if self.DATABASE_URI:
            return self.DATABASE_URI

        return f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # 是否自动创建数据库表结构
    CREATE_TABLES: bool = True

    # 分页默认值
    DEFAULT_PAGE_SIZE: int = 10

    # 日志
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # 前端调用的学生API地址
    STUDENT_API_BASE: str = "http://localhost:8092/v1/students"
    STUDENT_API_TIMEOUT: int = 30

    # 服务器启动配置
    HOST: str = "0.0.0.0"
    PORT: int = 8092
    RELOAD: bool = True

    class Config:
        case_sensitive = True
        env_file = ".env"


# 创建设置实例
settings = Settings()
