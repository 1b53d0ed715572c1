"""应用配置模块

使用 Pydantic Settings 管理应用配置，支持从 .env 文件加载环境变量
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


DEFAULT_EXCLUDED_ID_CODES = [f"EMP00{i}" for i in range(1, 10)]


class Settings(BaseSettings):
    """应用配置类"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # JWT配置
    SECRET_KEY: str = "your-secret-key-here"  # 默认值，生产环境请通过环境变量设置
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # 应用配置
    APP_TITLE: str = "ESP Tracker"
    APP_DESCRIPTION: str = "Production work plan and process status API"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # 用户目录中隐藏的系统/测试账号
    EXCLUDED_ID_CODES: List[str] = DEFAULT_EXCLUDED_ID_CODES

    # MySQL 配置
    MYSQL_USER: Optional[str] = None
    MYSQL_PASSWORD: Optional[str] = None
    MYSQL_HOST: str = "127.0.0.1"
    MYSQL_PORT: int = 3306
    MYSQL_DB: str = "esp_tracker"

    # 数据库配置 - 优先使用DATABASE_URL，否则从MySQL配置构建
    DATABASE_URL: str = ""
    ECHO_SQL: bool = False  # 是否打印SQL日志

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not self.DATABASE_URL:
            if self.MYSQL_USER and self.MYSQL_PASSWORD:
                self.DATABASE_URL = (
                    f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}"
                    f"@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}"
                )
            else:
                # 本地开发回退到 sqlite
                self.DATABASE_URL = "sqlite:///./dev.db"


# 创建全局配置实例
settings = Settings()
