"""领域异常定义

核心层只抛出这里定义的类型化错误，由 API 层统一转换为 HTTP 响应。
- NotFoundError: 引用的工作计划/操作员/工序不存在
- ConflictError: 唯一约束冲突（例如重复的员工编码）
- ReferentialViolation: 外键约束失败（例如针对不存在的工作计划写入事件）
- ValidationFailure: 输入格式错误（由校验层负责），以及其他无法归类的约束失败（例如 NOT NULL）
"""

from enum import Enum
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError


class ErrorType(str, Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    REFERENTIAL_VIOLATION = "referential_violation"
    VALIDATION = "validation"


class TrackerError(Exception):
    """所有领域错误的基类"""

    error_type: ErrorType = ErrorType.VALIDATION

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(TrackerError):
    error_type = ErrorType.NOT_FOUND

    def __init__(self, entity: str, identifier: Any):
        super().__init__(f"{entity} not found", {"entity": entity, "id": identifier})
        self.entity = entity
        self.identifier = identifier


class ConflictError(TrackerError):
    error_type = ErrorType.CONFLICT


class ReferentialViolation(TrackerError):
    error_type = ErrorType.REFERENTIAL_VIOLATION


class ValidationFailure(TrackerError):
    error_type = ErrorType.VALIDATION


# pymysql 错误码
_MYSQL_DUPLICATE_ENTRY = 1062
_MYSQL_FK_CODES = (1216, 1217, 1451, 1452)


def translate_integrity_error(exc: IntegrityError) -> TrackerError:
    """将 SQLAlchemy 的 IntegrityError 映射为领域错误"""
    orig = getattr(exc, "orig", None)
    code = orig.args[0] if orig is not None and orig.args else None
    text = str(orig if orig is not None else exc)

    if code in _MYSQL_FK_CODES or "foreign key" in text.lower():
        return ReferentialViolation("Referenced record not found", {"reason": text})
    if code == _MYSQL_DUPLICATE_ENTRY or "unique" in text.lower() or "duplicate" in text.lower():
        return ConflictError("Duplicate entry", {"reason": text})
    return ValidationFailure("Integrity constraint violated", {"reason": text})
