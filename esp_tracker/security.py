"""安全模块：管理员密码哈希与校验

- 使用 Passlib 管理密码哈希，采用 pbkdf2_sha256。
- 哈希格式无法识别或损坏时视为校验失败。
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    """对明文密码进行哈希并返回哈希字符串"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """验证明文密码与哈希是否匹配"""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False
