"""
应用配置管理

使用 pydantic-settings 管理环境变量和配置
"""

from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    应用配置类

    自动从环境变量和 .env 文件读取配置
    """

    # ========== 应用环境 ==========
    app_env: Literal["test", "dev", "staging", "prod"] = "dev"
    debug: bool = False

    # ========== 数据库配置 ==========
    # 开发环境（SQLite）
    dev_db_path: str = "data/dev.db"

    # Staging 环境
    staging_database_url: str = ""

    # 生产环境
    prod_database_url: str = ""

    # ========== 日志配置 ==========
    log_level: str = "INFO"
    log_file: str = "logs/app.log"

    # ========== 收件箱配置 ==========
    # 对应配置名 InboxRefresh / EmailInbox / EmailPassword / EmailServer
    inbox_refresh: bool = False
    email_inbox: str = ""
    email_password: str = ""
    email_server: str = ""

    # 邮件服务器连接超时（秒）
    mail_timeout: float = 30.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # 忽略未定义的环境变量
    )

    @property
    def is_test(self) -> bool:
        """是否为测试环境"""
        return self.app_env == "test"

    @property
    def is_dev(self) -> bool:
        """是否为开发环境"""
        return self.app_env == "dev"

    @property
    def is_staging(self) -> bool:
        """是否为 staging 环境"""
        return self.app_env == "staging"

    @property
    def is_prod(self) -> bool:
        """是否为生产环境"""
        return self.app_env == "prod"

    @property
    def database_url(self) -> str:
        """获取当前环境的数据库 URL"""
        if self.is_test:
            return "sqlite:///:memory:"
        elif self.is_dev:
            return f"sqlite:///{self.dev_db_path}"
        elif self.is_staging:
            return self.staging_database_url
        else:  # prod
            return self.prod_database_url


# 全局配置实例（单例）
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    获取配置实例（单例模式）

    Returns:
        Settings 实例
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
