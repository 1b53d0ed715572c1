"""用户数据操作

定义对用户目录的增删改查操作，以及管理员账号的查询。
用户目录是参考数据：工作计划通过 user_id 或 id_code 引用操作员。
"""

import logging
from datetime import date
from typing import Dict, Iterable, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from ..config.settings import settings
from ..core.exceptions import ConflictError, NotFoundError
from ..database.connection import transaction
from ..models import Admin, User, WorkPlan, WorkPlanOperator
from ..schemas import UserCreate, UserUpdate
from ..security import get_password_hash, verify_password

logger = logging.getLogger(__name__)


def list_users(db: Session):
    """获取用户列表（排除系统/测试账号），按姓名排序"""
    query = db.query(User)
    if settings.EXCLUDED_ID_CODES:
        query = query.filter(User.id_code.notin_(settings.EXCLUDED_ID_CODES))
    return query.order_by(User.name).all()


def get_user(db: Session, user_id: int):
    """根据ID获取用户"""
    return db.get(User, user_id)


def get_user_by_id_code(db: Session, id_code: str):
    """根据员工编码获取用户"""
    return db.query(User).filter(User.id_code == id_code).first()


def id_code_exists(db: Session, id_code: str, exclude_id: Optional[int] = None) -> bool:
    query = db.query(User.id).filter(User.id_code == id_code)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def create_user(db: Session, user: UserCreate):
    """创建用户，员工编码重复时抛出 ConflictError"""
    if id_code_exists(db, user.id_code):
        raise ConflictError("ID code already exists", {"id_code": user.id_code})
    db_user = User(id_code=user.id_code, name=user.name)
    with transaction(db):
        db.add(db_user)
    db.refresh(db_user)
    logger.info("Created user %s (%s)", db_user.id, db_user.id_code)
    return db_user


def update_user(db: Session, user_id: int, user_update: UserUpdate):
    """更新用户"""
    db_user = get_user(db, user_id)
    if not db_user:
        raise NotFoundError("User", user_id)

    update_data = user_update.model_dump(exclude_unset=True)
    new_code = update_data.get("id_code")
    if new_code and id_code_exists(db, new_code, exclude_id=user_id):
        raise ConflictError("ID code already exists", {"id_code": new_code})

    with transaction(db):
        for field, value in update_data.items():
            setattr(db_user, field, value)
    db.refresh(db_user)
    return db_user


def delete_user(db: Session, user_id: int) -> bool:
    """删除用户"""
    db_user = get_user(db, user_id)
    if not db_user:
        return False
    with transaction(db):
        db.delete(db_user)
    logger.info("Deleted user %s", user_id)
    return True


def _user_work_plans(db: Session, condition, production_date: Optional[date]):
    query = (
        db.query(WorkPlan)
        .options(joinedload(WorkPlan.finished_flag))
        .join(WorkPlanOperator, WorkPlanOperator.work_plan_id == WorkPlan.id)
        .filter(condition)
    )
    if production_date:
        query = query.filter(WorkPlan.production_date == production_date)
    return (
        query.distinct()
        .order_by(WorkPlan.production_date.desc(), WorkPlan.start_time.asc())
        .all()
    )


def get_user_work_plans(db: Session, user_id: int, production_date: Optional[date] = None):
    """获取分配给某用户（按 user_id）的工作计划"""
    return _user_work_plans(db, WorkPlanOperator.user_id == user_id, production_date)


def get_user_work_plans_by_id_code(db: Session, id_code: str, production_date: Optional[date] = None):
    """获取分配给某员工编码的工作计划"""
    return _user_work_plans(db, WorkPlanOperator.id_code == id_code, production_date)


def resolve_operator_names(db: Session, operators: Iterable[WorkPlanOperator]) -> Dict[int, Optional[str]]:
    """批量解析操作员显示姓名：user_id 或 id_code 任一匹配即可

    返回 {分配记录id: 姓名或None}，未录入目录的员工编码姓名为 None。
    """
    operators = list(operators)
    user_ids = {op.user_id for op in operators if op.user_id is not None}
    id_codes = {op.id_code for op in operators if op.id_code is not None}
    if not user_ids and not id_codes:
        return {}

    users = db.query(User).filter(or_(User.id.in_(user_ids), User.id_code.in_(id_codes))).all()
    by_id = {u.id: u for u in users}
    by_code = {u.id_code: u for u in users}

    names = {}
    for op in operators:
        user = by_id.get(op.user_id) if op.user_id is not None else by_code.get(op.id_code)
        names[op.id] = user.name if user else None
    return names


def resolve_operator_name(db: Session, user_id: Optional[int] = None, id_code: Optional[str] = None) -> Optional[str]:
    """解析单个操作员的显示姓名，不存在时返回 None"""
    user = None
    if user_id is not None:
        user = get_user(db, user_id)
    elif id_code is not None:
        user = get_user_by_id_code(db, id_code)
    return user.name if user else None


# Admin helpers
def create_admin(db: Session, username: str, password: str, name: str = None):
    """创建管理员账户"""
    db_admin = Admin(username=username, hashed_password=get_password_hash(password), name=name)
    with transaction(db):
        db.add(db_admin)
    db.refresh(db_admin)
    return db_admin


def get_admin_by_username(db: Session, username: str):
    """根据用户名获取管理员"""
    return db.query(Admin).filter(Admin.username == username).first()


def verify_admin_credentials(db: Session, username: str, password: str):
    """验证管理员凭据，成功时返回管理员对象"""
    admin = get_admin_by_username(db, username)
    if not admin or not verify_password(password, admin.hashed_password):
        return None
    return admin
