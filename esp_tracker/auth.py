"""认证模块

管理员 JWT 令牌的生成与校验。只有事件日志的管理性更正接口需要管理员身份，
车间的开始/停止操作不需要认证。
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from .config.settings import settings
from .crud import user as user_crud
from .database.connection import get_db

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token")


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """创建JWT访问令牌"""
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str) -> Optional[str]:
    """验证JWT令牌，返回用户名；无效时返回 None"""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    return payload.get("sub")


def authenticate_admin(db: Session, username: str, password: str):
    """验证管理员用户凭据"""
    admin = user_crud.verify_admin_credentials(db, username, password)
    if not admin:
        logger.warning("Failed admin login for %s", username)
    return admin


def require_admin(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)):
    """依赖项：要求请求携带有效的管理员令牌"""
    credentials_error = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    username = verify_token(token)
    if username is None:
        raise credentials_error
    admin = user_crud.get_admin_by_username(db, username)
    if admin is None:
        raise credentials_error
    return admin
