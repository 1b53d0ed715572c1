"""工序状态与生产汇总推导

只读取事件日志，从不写入。

当前状态 = 每个工序号最后追加（id 最大）的事件。
不能使用 MAX(timestamp)：时钟偏差或补录的时间戳会得到与“实际最后发生的操作”不同的结果。
开始/停止的先后顺序不做校验，日志记录的是操作员意图而不是经过校验的状态机。
"""

from datetime import date
from typing import List

from sqlalchemy import and_, case, distinct, func, select
from sqlalchemy.orm import Session

from ..models import Log, LogStatus, ProcessStep, WorkPlan
from ..schemas import ProcessStatusRead, ProductionSummaryRead
from ..utils.helpers import day_bounds


def _first_catalog_entries():
    # 目录中 (job_code, process_number) 不唯一时只取最早录入的一条，保证每个工序号一行
    return (
        select(func.min(ProcessStep.id))
        .group_by(ProcessStep.job_code, ProcessStep.process_number)
        .correlate(None)
    )


def current_status(db: Session, work_plan_id: int) -> List[ProcessStatusRead]:
    """获取工作计划每个工序号的当前状态，按工序号升序

    工作计划不存在（或已删除）时返回空列表。
    """
    latest_ids = (
        select(func.max(Log.id))
        .where(Log.work_plan_id == work_plan_id)
        .group_by(Log.process_number)
        .correlate(None)
    )
    rows = (
        db.query(Log.process_number, Log.status, Log.timestamp, ProcessStep.process_description)
        .select_from(Log)
        .join(WorkPlan, Log.work_plan_id == WorkPlan.id)
        .outerjoin(
            ProcessStep,
            and_(
                ProcessStep.job_code == WorkPlan.job_code,
                ProcessStep.process_number == Log.process_number,
                ProcessStep.id.in_(_first_catalog_entries()),
            ),
        )
        .filter(Log.id.in_(latest_ids))
        .order_by(Log.process_number)
        .all()
    )
    return [
        ProcessStatusRead(
            process_number=row.process_number,
            status=row.status,
            timestamp=row.timestamp,
            process_description=row.process_description,
        )
        for row in rows
    ]


def production_summary(db: Session, day: date) -> List[ProductionSummaryRead]:
    """按作业汇总某日的事件

    - processes_started: 当日至少有一次开始事件的不同工序号数量
    - total_starts / total_stops: 按状态统计的原始事件数
    - first_start: 当日最早的事件时间（任意状态，名称沿用历史）
    - last_activity: 当日最晚的事件时间
    当日没有事件的作业不出现在结果中。
    """
    start, end = day_bounds(day)
    is_start = Log.status == LogStatus.start
    is_stop = Log.status == LogStatus.stop
    rows = (
        db.query(
            WorkPlan.job_code,
            WorkPlan.job_name,
            func.count(distinct(case((is_start, Log.process_number)))).label("processes_started"),
            func.sum(case((is_start, 1), else_=0)).label("total_starts"),
            func.sum(case((is_stop, 1), else_=0)).label("total_stops"),
            func.min(Log.timestamp).label("first_start"),
            func.max(Log.timestamp).label("last_activity"),
        )
        .select_from(Log)
        .join(WorkPlan, Log.work_plan_id == WorkPlan.id)
        .filter(Log.timestamp >= start, Log.timestamp < end)
        .group_by(WorkPlan.job_code, WorkPlan.job_name)
        .order_by(WorkPlan.job_code)
        .all()
    )
    return [
        ProductionSummaryRead(
            job_code=row.job_code,
            job_name=row.job_name,
            processes_started=int(row.processes_started or 0),
            total_starts=int(row.total_starts or 0),
            total_stops=int(row.total_stops or 0),
            first_start=row.first_start,
            last_activity=row.last_activity,
        )
        for row in rows
    ]
