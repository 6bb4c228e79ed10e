from fastapi import FastAPI, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from sqlalchemy import text
from sqlalchemy.orm import Session
import logging
import sys

from app.api.v1.api import api_router
from app.core.config import settings
from app.db.base import init_db
from app.db.session import get_db
from app.infrastructure.response import standard_response, bad_request_response, internal_error_response

# 降低watchfiles日志级别，避免频繁输出
logging.getLogger('watchfiles').setLevel(logging.ERROR)
logging.getLogger('watchfiles.main').setLevel(logging.ERROR)

# 配置日志
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Academic management API - student records"
)

# 配置CORS - 必须在其他中间件之前添加
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """请求体或查询参数校验失败统一返回400"""
    logger.info(f"请求参数校验失败: {request.method} {request.url.path}")
    return JSONResponse(
        content=bad_request_response(msg="Invalid data", data=jsonable_encoder(exc.errors())),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """兜底异常处理，记录日志但不向调用方暴露细节"""
    logger.error(f"未处理的异常: {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        content=internal_error_response(),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# 包含API路由
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.on_event("startup")
async def startup_db_client():
    """
    应用启动时初始化数据库
    """
    logger.info("正在初始化数据库...")
    try:
        init_db()
        logger.info("数据库初始化成功")
    except Exception:
        logger.exception("数据库初始化失败")
        logger.warning("应用将继续启动，但数据库功能可能不可用")


@app.get("/")
async def root():
    """服务信息"""
    return standard_response(
        data={
            "status": "online",
            "version": settings.VERSION
        },
        msg=f"{settings.PROJECT_NAME} API is running"
    )


@app.get("/healthz")
async def healthz(db: Session = Depends(get_db)):
    """健康检查接口，探测数据库连通性"""
    try:
        db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("健康检查失败")
        return JSONResponse(
            content={"status": "Unhealthy"},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return {"status": "Healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
