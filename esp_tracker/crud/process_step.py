"""工序目录数据操作

工序目录是以读为主的参考数据，按作业批量导入。
核心层通过 get_job_name / get_process_description 查询作业名称和工序描述。
"""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..core.exceptions import NotFoundError
from ..database.connection import transaction
from ..models import ProcessStep
from ..schemas import BulkStep, ProcessStepCreate, ProcessStepUpdate

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 10


def list_process_steps(db: Session, job_code: Optional[str] = None, date_recorded: Optional[date] = None):
    """获取工序列表，可按作业编码和录入日期过滤"""
    query = db.query(ProcessStep)
    if job_code:
        query = query.filter(ProcessStep.job_code == job_code)
    if date_recorded:
        query = query.filter(ProcessStep.date_recorded == date_recorded)
    return query.order_by(ProcessStep.job_code, ProcessStep.process_number).all()


def get_process_steps_by_job_code(db: Session, job_code: str):
    """获取某作业的全部工序（按工序号排序）"""
    return (
        db.query(ProcessStep)
        .filter(ProcessStep.job_code == job_code)
        .order_by(ProcessStep.process_number)
        .all()
    )


def get_process_step(db: Session, step_id: int):
    """根据ID获取工序"""
    return db.get(ProcessStep, step_id)


def create_process_step(db: Session, step: ProcessStepCreate):
    """创建工序"""
    db_step = ProcessStep(**step.model_dump())
    with transaction(db):
        db.add(db_step)
    db.refresh(db_step)
    return db_step


def update_process_step(db: Session, step_id: int, step_update: ProcessStepUpdate):
    """更新工序"""
    db_step = get_process_step(db, step_id)
    if not db_step:
        raise NotFoundError("Process step", step_id)
    with transaction(db):
        for field, value in step_update.model_dump(exclude_unset=True).items():
            setattr(db_step, field, value)
    db.refresh(db_step)
    return db_step


def delete_process_step(db: Session, step_id: int) -> bool:
    """删除工序"""
    db_step = get_process_step(db, step_id)
    if not db_step:
        return False
    with transaction(db):
        db.delete(db_step)
    return True


def create_process_steps_bulk(
    db: Session,
    job_code: str,
    job_name: str,
    date_recorded: Optional[date],
    steps: List[BulkStep],
):
    """批量创建某作业的工序，全部成功或全部回滚"""
    created = [
        ProcessStep(
            job_code=job_code,
            job_name=job_name,
            date_recorded=date_recorded,
            worker_count=step.worker_count,
            process_number=step.process_number,
            process_description=step.process_description,
        )
        for step in steps
    ]
    with transaction(db):
        db.add_all(created)
    for db_step in created:
        db.refresh(db_step)
    logger.info("Loaded %d process steps for job %s", len(created), job_code)
    return created


def list_job_codes(db: Session):
    """获取所有不重复的 (job_code, job_name)"""
    return (
        db.query(ProcessStep.job_code, ProcessStep.job_name)
        .distinct()
        .order_by(ProcessStep.job_code)
        .all()
    )


def search_jobs(db: Session, query: str, limit: int = SEARCH_LIMIT):
    """按作业编码或名称模糊搜索作业，空查询返回空列表"""
    if not query:
        return []
    term = f"%{query}%"
    return (
        db.query(ProcessStep.job_code, ProcessStep.job_name)
        .filter(or_(ProcessStep.job_code.like(term), ProcessStep.job_name.like(term)))
        .distinct()
        .order_by(ProcessStep.job_code)
        .limit(limit)
        .all()
    )


def get_job_name(db: Session, job_code: str) -> Optional[str]:
    """查询作业名称，目录中不存在时返回 None"""
    row = (
        db.query(ProcessStep.job_name)
        .filter(ProcessStep.job_code == job_code)
        .order_by(ProcessStep.id)
        .first()
    )
    return row.job_name if row else None


def get_process_description(db: Session, job_code: str, process_number: int) -> Optional[str]:
    """查询工序描述，目录中不存在时返回 None"""
    row = (
        db.query(ProcessStep.process_description)
        .filter(ProcessStep.job_code == job_code, ProcessStep.process_number == process_number)
        .order_by(ProcessStep.id)
        .first()
    )
    return row.process_description if row else None
