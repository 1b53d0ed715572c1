"""FastAPI主应用入口

实现车间生产跟踪的RESTful API服务：
- 用户目录、工序目录
- 工作计划（排班、操作员分配、完工标记）
- 工序开始/停止事件日志、当前状态与每日生产汇总
"""

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .api.v1 import (
    auth_router,
    logs_router,
    process_steps_router,
    users_router,
    work_plans_router,
)
from .config.settings import settings
from .core.exceptions import (
    ConflictError,
    NotFoundError,
    ReferentialViolation,
    TrackerError,
    ValidationFailure,
)
from .database.connection import get_db

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# 创建FastAPI应用实例
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# 挂载API路由
app.include_router(auth_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")
app.include_router(process_steps_router, prefix="/api/v1")
app.include_router(work_plans_router, prefix="/api/v1")
app.include_router(logs_router, prefix="/api/v1")

_STATUS_CODES = (
    (NotFoundError, 404),
    (ConflictError, 409),
    (ReferentialViolation, 400),
    (ValidationFailure, 422),
)


@app.exception_handler(TrackerError)
async def tracker_error_handler(request: Request, exc: TrackerError):
    status_code = next((code for cls, code in _STATUS_CODES if isinstance(exc, cls)), 400)
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": exc.message, "error": exc.to_dict()},
    )


@app.get("/")
def root():
    return {"name": settings.APP_TITLE, "version": settings.APP_VERSION, "docs": "/docs"}


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/health/db")
def health_db(db: Session = Depends(get_db)):
    """数据库连通性检查"""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        return JSONResponse(status_code=503, content={"status": "error", "database": "unavailable"})
    return {"status": "ok", "database": "connected"}
