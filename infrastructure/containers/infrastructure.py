"""
基础设施容器（InfraContainer）

管理所有基础设施组件：数据库、配置读取、收件箱表管理、邮件传输等。
依赖 ConfigContainer 获取配置。
"""

from dependency_injector import containers, providers
from sqlalchemy import Engine

from infrastructure.database.database_factory import DatabaseFactory
from infrastructure.config.settings_configuration_manager import SettingsConfigurationManager
from infrastructure.inbox.repositories.sqlalchemy_inbox_mail_db_manager import SqlAlchemyInboxMailDbManager
from infrastructure.inbox.services.pop3_mail_manager_impl import Pop3MailManagerImpl


class InfraContainer(containers.DeclarativeContainer):
    """基础设施容器 - 管理技术实现"""

    # 依赖配置容器
    config = providers.DependenciesContainer()

    # ============ 数据库 ============

    # 数据库引擎（单例）
    db_engine: providers.Singleton[Engine] = providers.Singleton(
        DatabaseFactory.create_engine,
        database_url=config.settings.provided.database_url,
        echo=config.settings.provided.debug,
    )

    # ============ 配置读取 ============

    configuration_manager = providers.Singleton(
        SettingsConfigurationManager,
        settings=config.settings,
    )

    # ============ 收件箱 ============

    # 收件箱表管理
    inbox_mail_db_manager = providers.Factory(
        SqlAlchemyInboxMailDbManager,
        engine=db_engine,
    )

    # POP3 邮件传输服务（每次刷新新实例，会话不跨刷新共享）
    mail_manager = providers.Factory(
        Pop3MailManagerImpl,
        timeout=config.settings.provided.mail_timeout,
    )
