"""
应用容器（AppContainer）

管理应用层组件：应用服务、命令处理器。
依赖 InfraContainer 获取基础设施。
"""

from dependency_injector import containers, providers

from application.inbox.services.inbox_mail_service import InboxMailService
from application.handlers.inbox.refresh_inbox_handler import RefreshInboxHandler


class AppContainer(containers.DeclarativeContainer):
    """应用容器 - 管理应用层服务"""

    # 依赖基础设施容器
    infra = providers.DependenciesContainer()

    # ============ 应用服务 ============

    # 收件箱刷新服务
    inbox_mail_service = providers.Factory(
        InboxMailService,
        configuration_manager=infra.configuration_manager,
        inbox_mail_db_manager=infra.inbox_mail_db_manager,
        mail_manager=infra.mail_manager,
    )

    # ============ 命令处理器 ============

    refresh_inbox_handler = providers.Factory(
        RefreshInboxHandler,
        inbox_mail_service=inbox_mail_service,
    )
