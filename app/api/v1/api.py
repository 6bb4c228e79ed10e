from fastapi import APIRouter

from app.api.v1.endpoints import students


api_router = APIRouter()

# 包含各模块的路由
api_router.include_router(students.router, prefix="/students", tags=["students"])
