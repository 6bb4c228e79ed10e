from typing import List

from pydantic import BaseModel, ConfigDict, Field


class StudentCreate(BaseModel):
    """
    学生创建请求模型

    ra 必须全局唯一，重复时创建失败
    """
    name: str
    email: str
    ra: str
    cpf: str


class StudentUpdate(BaseModel):
    """
    学生更新请求模型

    只允许修改姓名和邮箱，ra/cpf 不经此路径修改
    """
    name: str
    email: str


class StudentView(BaseModel):
    """对外暴露的学生视图"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    ra: str
    cpf: str


class PagedResult(BaseModel):
    """分页查询结果"""
    model_config = ConfigDict(populate_by_name=True)

    items: List[StudentView] = Field(default_factory=list)
    total_items: int = Field(0, alias="totalItems")
    page_number: int = Field(alias="pageNumber")
    page_size: int = Field(alias="pageSize")
