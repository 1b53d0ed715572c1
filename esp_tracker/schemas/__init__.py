"""API数据模型模块

定义所有 Pydantic 模型（请求/响应结构体）
"""

from .user import UserCreate, UserUpdate, UserRead, Token
from .process_step import (
    ProcessStepCreate,
    ProcessStepUpdate,
    ProcessStepRead,
    ProcessStepBulkCreate,
    BulkStep,
    JobCodeRead,
)
from .work_plan import (
    MAX_OPERATORS,
    OperatorRef,
    OperatorRead,
    OperatorReplace,
    WorkPlanCreate,
    WorkPlanUpdate,
    WorkPlanRead,
)
from .log import (
    LogCreate,
    LogUpdate,
    LogRead,
    LogDetail,
    ProcessAction,
    ProcessStatusRead,
    ProductionSummaryRead,
)

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserRead",
    "Token",
    "ProcessStepCreate",
    "ProcessStepUpdate",
    "ProcessStepRead",
    "ProcessStepBulkCreate",
    "BulkStep",
    "JobCodeRead",
    "MAX_OPERATORS",
    "OperatorRef",
    "OperatorRead",
    "OperatorReplace",
    "WorkPlanCreate",
    "WorkPlanUpdate",
    "WorkPlanRead",
    "LogCreate",
    "LogUpdate",
    "LogRead",
    "LogDetail",
    "ProcessAction",
    "ProcessStatusRead",
    "ProductionSummaryRead",
]
