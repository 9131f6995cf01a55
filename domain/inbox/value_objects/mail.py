"""邮件值对象"""

from dataclasses import dataclass

from domain.common.base_value_object import BaseValueObject
from domain.common.exceptions import InvalidValueObjectException
from domain.inbox.value_objects.sender import Sender


@dataclass(frozen=True)
class Mail(BaseValueObject):
    """
    完整获取的邮件

    只保留邮件编号与头部信息，正文不做解析。

    Attributes:
        id: 邮件编号（来自同一会话的列表结果）
        sender: 发件人
        subject: 邮件主题
    """

    id: int
    sender: Sender
    subject: str = ""

    def validate(self) -> None:
        """验证邮件的有效性"""
        if self.id < 1:
            raise InvalidValueObjectException(
                value_object_type="Mail",
                value=self.id,
                reason="Mail id must be a positive integer"
            )
