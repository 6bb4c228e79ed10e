"""
学生管理API接口模块

提供学生记录的增删改查与分页搜索接口。
成功时直接返回视图数据，失败时返回 {code, data, msg} 格式的错误体。
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_student_service
from app.core.config import settings
from app.infrastructure.response import bad_request_response, not_found_response, internal_error_response
from app.schemas.student import StudentCreate, StudentUpdate, StudentView, PagedResult
from app.services.core.student_service import StudentService

# 配置日志记录器
logger = logging.getLogger(__name__)

# 创建API路由实例
router = APIRouter()

# 页码/页大小按32位整数约束，避免偏移量超出数据库整数范围
MAX_PAGE_PARAM = 2 ** 31 - 1


def _internal_error() -> JSONResponse:
    return JSONResponse(content=internal_error_response(), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _not_found() -> JSONResponse:
    return JSONResponse(content=not_found_response(entity="Student"), status_code=status.HTTP_404_NOT_FOUND)


# 分页查询接口，必须在 /{student_id} 之前注册
@router.get("/paged", response_model=PagedResult)
async def get_paged(
        page_number: int = Query(1, alias="pageNumber", le=MAX_PAGE_PARAM),
        page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize", le=MAX_PAGE_PARAM),
        search: Optional[str] = None,
        sort_by: Optional[str] = Query(None, alias="sortBy"),
        sort_desc: bool = Query(False, alias="sortDesc"),
        service: StudentService = Depends(get_student_service),
):
    """
    分页获取学生列表

    Args:
        pageNumber (int): 页码，从1开始
        pageSize (int): 每页条数
        search (str): 模糊搜索，匹配姓名、邮箱、ra、cpf
        sortBy (str): 排序字段 name/email/ra/cpf，其他值按id升序
        sortDesc (bool): 是否降序

    Returns:
        {"items": [...], "totalItems": int, "pageNumber": int, "pageSize": int}
    """
    try:
        return service.get_paged(page_number, page_size, search, sort_by, sort_desc)
    except Exception:
        logger.exception("Error getting paged students")
        return _internal_error()


@router.get("/{student_id}", response_model=StudentView, name="get_student_by_id")
async def get_by_id(
        student_id: int,
        service: StudentService = Depends(get_student_service),
):
    """根据ID获取学生，不存在返回404"""
    try:
        student = service.get_by_id(student_id)
    except Exception:
        logger.exception(f"Error getting student by id: {student_id}")
        return _internal_error()

    if student is None:
        return _not_found()
    return student


@router.post("", response_model=StudentView, status_code=status.HTTP_201_CREATED)
async def create(
        payload: StudentCreate,
        request: Request,
        response: Response,
        service: StudentService = Depends(get_student_service),
):
    """
    创建学生

    ra 已存在时返回400；成功返回201，Location 指向详情接口
    """
    try:
        created = service.create(payload)
    except Exception:
        logger.exception(f"Error creating student with RA: {payload.ra}")
        return _internal_error()

    if created is None:
        return JSONResponse(
            content=bad_request_response(msg="Invalid data or RA already exists."),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    response.headers["Location"] = str(request.url_for("get_student_by_id", student_id=created.id))
    return created


@router.put("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update(
        student_id: int,
        payload: StudentUpdate,
        service: StudentService = Depends(get_student_service),
):
    """更新学生姓名和邮箱，不存在返回404"""
    try:
        updated = service.update(student_id, payload)
    except Exception:
        logger.exception(f"Error updating student: {student_id}")
        return _internal_error()

    if not updated:
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete(
        student_id: int,
        service: StudentService = Depends(get_student_service),
):
    """删除学生，不存在返回404"""
    try:
        deleted = service.delete(student_id)
    except Exception:
        logger.exception(f"Error deleting student: {student_id}")
        return _internal_error()

    if not deleted:
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
