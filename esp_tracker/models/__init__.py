"""数据库模型模块

定义所有 SQLAlchemy ORM 模型
"""

from ..database.connection import Base
from .admin import Admin
from .user import User
from .process_step import ProcessStep
from .work_plan import WorkPlan, WorkPlanOperator, FinishedFlag
from .log import Log, LogStatus

__all__ = [
    "Base",
    "Admin",
    "User",
    "ProcessStep",
    "WorkPlan",
    "WorkPlanOperator",
    "FinishedFlag",
    "Log",
    "LogStatus",
]
