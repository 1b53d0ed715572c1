"""用户目录API路由

定义操作员目录的增删改查端点
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...crud import work_plan as work_plan_crud
from ...database.connection import get_db

router = APIRouter(tags=["users"])


@router.get("/users", response_model=List[schemas.UserRead])
def list_users(db: Session = Depends(get_db)):
    """获取用户列表（不含系统/测试账号）"""
    return crud.list_users(db)


@router.get("/users/code/{id_code}", response_model=schemas.UserRead)
def get_user_by_id_code(id_code: str, db: Session = Depends(get_db)):
    user = crud.get_user_by_id_code(db, id_code)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/users/code/{id_code}/work-plans", response_model=List[schemas.WorkPlanRead])
def get_work_plans_by_id_code(
    id_code: str,
    production_date: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    """获取分配给某员工编码的工作计划"""
    plans = crud.get_user_work_plans_by_id_code(db, id_code, production_date)
    return work_plan_crud.to_read_models(db, plans)


@router.get("/users/{user_id}", response_model=schemas.UserRead)
def get_user(user_id: int, db: Session = Depends(get_db)):
    user = crud.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/users/{user_id}/work-plans", response_model=List[schemas.WorkPlanRead])
def get_user_work_plans(
    user_id: int,
    production_date: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    """获取分配给某用户的工作计划"""
    if not crud.get_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    plans = crud.get_user_work_plans(db, user_id, production_date)
    return work_plan_crud.to_read_models(db, plans)


@router.post("/users", response_model=schemas.UserRead, status_code=201)
def create_user(user: schemas.UserCreate, db: Session = Depends(get_db)):
    return crud.create_user(db, user)


@router.put("/users/{user_id}", response_model=schemas.UserRead)
def update_user(user_id: int, user_update: schemas.UserUpdate, db: Session = Depends(get_db)):
    return crud.update_user(db, user_id, user_update)


@router.delete("/users/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db)):
    if not crud.delete_user(db, user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return {"success": True, "message": "User deleted successfully"}
