"""配置读取服务接口"""

from abc import ABC, abstractmethod
from typing import Type, TypeVar

T = TypeVar("T")


class ConfigurationManager(ABC):
    """
    配置读取服务接口

    只读的键值访问器，按名称返回指定类型的配置值。
    具体的配置来源（环境变量、.env 文件等）在基础设施层实现。
    """

    @abstractmethod
    def read(self, name: str, value_type: Type[T]) -> T:
        """
        读取配置值

        Args:
            name: 配置名称（如 "InboxRefresh"）
            value_type: 期望的值类型，至少支持 bool 和 str

        Returns:
            配置值；配置不存在时返回该类型的空值（False / ""）

        Raises:
            ConfigurationReadException: 配置值无法转换为指定类型
        """
        raise NotImplementedError
