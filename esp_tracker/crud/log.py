"""数据库操作（CRUD）- 事件日志

事件日志只追加：append_event 是车间操作唯一的写入入口。
- 不校验开始/停止的先后顺序（没有开始的停止、重复开始都会被记录）
- 不去重，调用方重试会产生重复事件
- update_event / delete_event 仅供管理员更正使用，状态推导逻辑从不调用
"""

import logging
from datetime import date, datetime
from typing import Optional

from sqlalchemy import and_
from sqlalchemy.orm import Session

from ..core.exceptions import NotFoundError
from ..database.connection import transaction
from ..models import Log, LogStatus, ProcessStep, WorkPlan
from ..schemas import LogUpdate
from ..utils.helpers import day_bounds

logger = logging.getLogger(__name__)


def append_event(
    db: Session,
    work_plan_id: int,
    process_number: int,
    status: LogStatus,
    timestamp: Optional[datetime] = None,
):
    """追加一条开始/停止事件，timestamp 省略时使用服务器当前时间"""
    if db.get(WorkPlan, work_plan_id) is None:
        raise NotFoundError("Work plan", work_plan_id)

    db_log = Log(
        work_plan_id=work_plan_id,
        process_number=process_number,
        status=LogStatus(status),
        timestamp=timestamp or datetime.now(),
    )
    # 与删除工作计划并发时，外键失败会以 ReferentialViolation 抛出
    with transaction(db):
        db.add(db_log)
    db.refresh(db_log)
    logger.info(
        "Event %s: work plan %s process %s -> %s",
        db_log.id, work_plan_id, process_number, db_log.status.value,
    )
    return db_log


def start_process(db: Session, work_plan_id: int, process_number: int):
    """开始工序"""
    return append_event(db, work_plan_id, process_number, LogStatus.start)


def stop_process(db: Session, work_plan_id: int, process_number: int):
    """停止工序"""
    return append_event(db, work_plan_id, process_number, LogStatus.stop)


def _detail_query(db: Session):
    return (
        db.query(
            Log.id,
            Log.work_plan_id,
            Log.process_number,
            Log.status,
            Log.timestamp,
            WorkPlan.job_code,
            WorkPlan.job_name,
            WorkPlan.production_date,
            ProcessStep.process_description,
        )
        .select_from(Log)
        .outerjoin(WorkPlan, Log.work_plan_id == WorkPlan.id)
        .outerjoin(
            ProcessStep,
            and_(
                ProcessStep.job_code == WorkPlan.job_code,
                ProcessStep.process_number == Log.process_number,
            ),
        )
    )


def list_events(
    db: Session,
    work_plan_id: Optional[int] = None,
    day: Optional[date] = None,
    status: Optional[LogStatus] = None,
):
    """获取事件列表（附带作业信息和工序描述），按时间倒序"""
    query = _detail_query(db)
    if work_plan_id:
        query = query.filter(Log.work_plan_id == work_plan_id)
    if day:
        start, end = day_bounds(day)
        query = query.filter(Log.timestamp >= start, Log.timestamp < end)
    if status:
        query = query.filter(Log.status == LogStatus(status))
    rows = query.order_by(Log.timestamp.desc(), Log.id.desc()).all()
    return [dict(row._mapping) for row in rows]


def get_events_for_work_plan(db: Session, work_plan_id: int):
    """获取某工作计划的全部事件，按工序号、时间、id 排序"""
    rows = (
        _detail_query(db)
        .filter(Log.work_plan_id == work_plan_id)
        .order_by(Log.process_number, Log.timestamp, Log.id)
        .all()
    )
    return [dict(row._mapping) for row in rows]


def get_event(db: Session, log_id: int):
    """根据ID获取事件（附带作业信息和工序描述）"""
    row = _detail_query(db).filter(Log.id == log_id).first()
    return dict(row._mapping) if row else None


def update_event(db: Session, log_id: int, log_update: LogUpdate):
    """管理员更正事件"""
    db_log = db.get(Log, log_id)
    if not db_log:
        raise NotFoundError("Log", log_id)
    with transaction(db):
        for field, value in log_update.model_dump().items():
            setattr(db_log, field, value)
    db.refresh(db_log)
    logger.info("Administrative correction of event %s", log_id)
    return db_log


def delete_event(db: Session, log_id: int) -> bool:
    """管理员删除事件"""
    db_log = db.get(Log, log_id)
    if not db_log:
        return False
    with transaction(db):
        db.delete(db_log)
    logger.info("Administrative deletion of event %s", log_id)
    return True
