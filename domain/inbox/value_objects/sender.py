"""发件人值对象"""

from dataclasses import dataclass

from domain.common.base_value_object import BaseValueObject


@dataclass(frozen=True)
class Sender(BaseValueObject):
    """
    发件人值对象

    Attributes:
        name: 显示名称（可能为空）
        address: 邮件地址
    """

    name: str = ""
    address: str = ""

    @property
    def display(self) -> str:
        """返回 "名称 <地址>" 形式，没有名称时只返回地址"""
        if self.name:
            return f"{self.name} <{self.address}>"
        return self.address
