"""
依赖注入容器

使用示例：
    from infrastructure.containers import bootstrap

    boot = bootstrap()
    handler = boot.app.refresh_inbox_handler()
"""

from dataclasses import dataclass
from typing import Optional

from infrastructure.config.settings import Settings
from .config import ConfigContainer
from .infrastructure import InfraContainer
from .application import AppContainer


@dataclass
class Bootstrap:
    """容器集合"""

    config: ConfigContainer
    infra: InfraContainer
    app: AppContainer


def bootstrap(settings: Optional[Settings] = None) -> Bootstrap:
    """
    创建并连接所有容器

    Args:
        settings: 可选的配置实例，不提供则使用全局 Settings

    Returns:
        Bootstrap 容器集合
    """
    config = ConfigContainer()
    if settings is not None:
        config.settings.override(settings)

    infra = InfraContainer(config=config)
    app = AppContainer(infra=infra)

    return Bootstrap(config=config, infra=infra, app=app)


__all__ = [
    "Bootstrap",
    "bootstrap",
    "ConfigContainer",
    "InfraContainer",
    "AppContainer",
]
