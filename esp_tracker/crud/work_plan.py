"""数据库操作（CRUD）- 工作计划相关

- create_work_plan 在一个事务中写入工作计划及其 0~4 个操作员分配
- update_work_plan 替换标量字段；提供 operators 时先删后插整体替换
- delete_work_plan 按 完工标记 -> 操作员分配 -> 工作计划 的顺序删除
- mark_finished / mark_unfinished 对完工标记做 upsert，不保留历史

本模块不做业务校验（作业编码、操作员是否存在由 API 层负责），
只依赖数据库约束；任何失败都会回滚整个事务。
"""

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session, selectinload

from ..core.exceptions import NotFoundError
from ..database.connection import transaction
from ..models import FinishedFlag, WorkPlan, WorkPlanOperator
from ..schemas import OperatorRef, WorkPlanCreate, WorkPlanRead, WorkPlanUpdate
from ..utils.helpers import format_time_window, normalize_production_date
from .user import resolve_operator_names

logger = logging.getLogger(__name__)


def _add_operators(db: Session, work_plan_id: int, operators: Iterable[OperatorRef]):
    for op in operators:
        db.add(WorkPlanOperator(work_plan_id=work_plan_id, user_id=op.user_id, id_code=op.id_code))


def _scalar_fields(plan) -> dict:
    return {
        "production_date": normalize_production_date(plan.production_date),
        "job_code": plan.job_code,
        "job_name": plan.job_name,
        "start_time": plan.start_time,
        "end_time": plan.end_time,
    }


def create_work_plan(db: Session, plan: WorkPlanCreate):
    """创建工作计划并关联操作员（原子操作）"""
    db_plan = WorkPlan(**_scalar_fields(plan))
    with transaction(db):
        db.add(db_plan)
        db.flush()
        _add_operators(db, db_plan.id, plan.operators)
    logger.info(
        "Created work plan %s: job %s on %s %s with %d operator(s)",
        db_plan.id,
        db_plan.job_code,
        db_plan.production_date,
        format_time_window(db_plan.start_time, db_plan.end_time),
        len(plan.operators),
    )
    return get_work_plan(db, db_plan.id)


def get_work_plan(db: Session, work_plan_id: int):
    """根据ID获取工作计划（含完工标记和操作员）"""
    return (
        db.query(WorkPlan)
        .options(selectinload(WorkPlan.operators), selectinload(WorkPlan.finished_flag))
        .filter(WorkPlan.id == work_plan_id)
        .first()
    )


def list_work_plans(db: Session, production_date: Optional[date] = None):
    """获取工作计划列表，按生产日期倒序、开始时间正序"""
    query = db.query(WorkPlan).options(
        selectinload(WorkPlan.operators), selectinload(WorkPlan.finished_flag)
    )
    if production_date:
        query = query.filter(WorkPlan.production_date == normalize_production_date(production_date))
    return query.order_by(WorkPlan.production_date.desc(), WorkPlan.start_time.asc(), WorkPlan.id).all()


def update_work_plan(db: Session, work_plan_id: int, plan: WorkPlanUpdate):
    """更新工作计划

    标量字段整体替换；operators 字段出现时（包括空列表）删除全部现有分配后重新插入，
    未出现时保留现有分配。
    """
    db_plan = db.get(WorkPlan, work_plan_id)
    if not db_plan:
        raise NotFoundError("Work plan", work_plan_id)

    replace_operators_set = "operators" in plan.model_fields_set
    with transaction(db):
        for field, value in _scalar_fields(plan).items():
            setattr(db_plan, field, value)
        if replace_operators_set:
            db.query(WorkPlanOperator).filter(WorkPlanOperator.work_plan_id == work_plan_id).delete(
                synchronize_session=False
            )
            _add_operators(db, work_plan_id, plan.operators or [])
    logger.info("Updated work plan %s (operators replaced: %s)", work_plan_id, replace_operators_set)
    return get_work_plan(db, work_plan_id)


def replace_operators(db: Session, work_plan_id: int, operators: List[OperatorRef]):
    """以给定集合整体替换工作计划的操作员分配"""
    if not db.get(WorkPlan, work_plan_id):
        raise NotFoundError("Work plan", work_plan_id)
    with transaction(db):
        db.query(WorkPlanOperator).filter(WorkPlanOperator.work_plan_id == work_plan_id).delete(
            synchronize_session=False
        )
        _add_operators(db, work_plan_id, operators)
    logger.info("Replaced operators of work plan %s with %d operator(s)", work_plan_id, len(operators))
    return get_work_plan(db, work_plan_id)


def delete_work_plan(db: Session, work_plan_id: int) -> bool:
    """删除工作计划；先删除完工标记和操作员分配以满足外键约束

    返回是否真正删除了工作计划行。事件日志由外键级联删除。
    """
    with transaction(db):
        db.query(FinishedFlag).filter(FinishedFlag.work_plan_id == work_plan_id).delete(
            synchronize_session=False
        )
        db.query(WorkPlanOperator).filter(WorkPlanOperator.work_plan_id == work_plan_id).delete(
            synchronize_session=False
        )
        deleted = db.query(WorkPlan).filter(WorkPlan.id == work_plan_id).delete(synchronize_session=False)
    if deleted:
        logger.info("Deleted work plan %s", work_plan_id)
    return deleted > 0


def _set_finished(db: Session, work_plan_id: int, finished: bool):
    now = datetime.now()
    with transaction(db):
        flag = db.get(FinishedFlag, work_plan_id)
        if flag is None:
            db.add(FinishedFlag(work_plan_id=work_plan_id, is_finished=finished, updated_at=now))
        else:
            flag.is_finished = finished
            flag.updated_at = now
    logger.info("Work plan %s marked as %s", work_plan_id, "finished" if finished else "unfinished")


def mark_finished(db: Session, work_plan_id: int):
    """标记工作计划为已完工（幂等）"""
    _set_finished(db, work_plan_id, True)


def mark_unfinished(db: Session, work_plan_id: int):
    """标记工作计划为未完工（幂等）"""
    _set_finished(db, work_plan_id, False)


def to_read_models(db: Session, plans: List[WorkPlan]) -> List[WorkPlanRead]:
    """转换为读取模型，附带操作员姓名与编码"""
    names = resolve_operator_names(db, (op for plan in plans for op in plan.operators))
    results = []
    for plan in plans:
        operators = [
            {"id": op.id, "user_id": op.user_id, "id_code": op.id_code, "name": names.get(op.id)}
            for op in plan.operators
        ]
        results.append(
            WorkPlanRead(
                id=plan.id,
                production_date=plan.production_date,
                job_code=plan.job_code,
                job_name=plan.job_name,
                start_time=plan.start_time,
                end_time=plan.end_time,
                is_finished=plan.is_finished,
                finished_at=plan.finished_at,
                operators=operators,
                operator_names=sorted({o["name"] for o in operators if o["name"]}),
                operator_codes=sorted({o["id_code"] for o in operators if o["id_code"]}),
            )
        )
    return results


def to_read_model(db: Session, plan: WorkPlan) -> WorkPlanRead:
    return to_read_models(db, [plan])[0]
