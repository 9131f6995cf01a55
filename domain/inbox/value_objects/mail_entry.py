"""邮件列表条目值对象"""

from dataclasses import dataclass

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException


@dataclass(frozen=True)
class MailEntry(BaseValueObject):
    """
    邮件列表条目

    服务器列出邮件时返回的轻量条目，只用于驱动后续的单封邮件获取，
    不会在一次刷新周期之外保留。

    Attributes:
        id: 邮件编号（在同一次列表结果内唯一）
        size: 邮件大小（字节），未知时为 0
    """

    id: int
    size: int = 0

    def validate(self) -> None:
        """验证条目的有效性"""
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 1:
            raise InvalidValueObjectException(
                value_object_type="MailEntry",
                value=self.id,
                reason="Mail id must be a positive integer"
            )

        if self.size < 0:
            raise InvalidValueObjectException(
                value_object_type="MailEntry",
                value=self.size,
                reason="Mail size cannot be negative"
            )
