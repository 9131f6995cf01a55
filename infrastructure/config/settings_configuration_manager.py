"""基于 Settings 的配置读取服务实现"""

import re
from typing import Any, Type, TypeVar

from domain.configuration.services.configuration_manager import ConfigurationManager
from domain.common.exceptions import ConfigurationReadException
from infrastructure.config.settings import Settings

T = TypeVar("T")

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off", ""}


class SettingsConfigurationManager(ConfigurationManager):
    """
    基于 Settings 的配置读取服务

    配置名使用 PascalCase（如 "EmailServer"），
    映射到 Settings 中对应的 snake_case 字段（email_server）。
    """

    def __init__(self, settings: Settings):
        """
        初始化配置读取服务

        Args:
            settings: 应用配置
        """
        self._settings = settings

    def read(self, name: str, value_type: Type[T]) -> T:
        """读取配置值，不存在时返回该类型的空值"""
        field_name = self.to_field_name(name)
        value = getattr(self._settings, field_name, None)

        if value is None:
            return value_type()

        return self._convert(name, value, value_type)

    @staticmethod
    def to_field_name(name: str) -> str:
        """将 PascalCase 配置名转换为 snake_case 字段名"""
        return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()

    def _convert(self, name: str, value: Any, value_type: Type[T]) -> T:
        """将配置值转换为指定类型"""
        if isinstance(value, value_type):
            return value

        if value_type is bool:
            if isinstance(value, str):
                normalized = value.strip().lower()
                if normalized in _TRUE_VALUES:
                    return True  # type: ignore[return-value]
                if normalized in _FALSE_VALUES:
                    return False  # type: ignore[return-value]
            raise ConfigurationReadException(
                name=name,
                reason=f"Cannot convert {value!r} to bool"
            )

        if value_type is str:
            return str(value)  # type: ignore[return-value]

        try:
            return value_type(value)  # type: ignore[call-arg]
        except (TypeError, ValueError) as e:
            raise ConfigurationReadException(
                name=name,
                reason=f"Cannot convert {value!r} to {value_type.__name__}: {e}"
            )
