"""邮件传输服务接口"""

from abc import ABC, abstractmethod
from typing import List

from domain.inbox.value_objects.mail import Mail
from domain.inbox.value_objects.mail_entry import MailEntry


class MailManager(ABC):
    """
    邮件传输服务接口

    定义连接邮件服务器、列出邮件、按编号获取邮件的契约。
    具体协议（POP3 等）在基础设施层实现。
    """

    @abstractmethod
    def connect(self, server: str, port: int, user_name: str, password: str) -> bool:
        """
        连接并登录邮件服务器

        普通的连接或认证失败不抛出异常，而是返回 False。

        Args:
            server: 服务器地址
            port: 服务器端口
            user_name: 邮箱用户名
            password: 邮箱密码

        Returns:
            True 如果连接并认证成功，否则 False
        """
        raise NotImplementedError

    @abstractmethod
    def get_mails(self) -> List[MailEntry]:
        """
        列出邮箱中的邮件

        Returns:
            调用时刻邮箱状态的邮件条目列表，顺序与服务器返回一致
        """
        raise NotImplementedError

    @abstractmethod
    def get_message(self, mail_id: int) -> Mail:
        """
        获取单封邮件

        Args:
            mail_id: 邮件编号，必须来自同一会话中 get_mails() 的结果

        Returns:
            邮件
        """
        raise NotImplementedError

    def disconnect(self) -> None:
        """关闭当前会话（默认无操作）"""
        return None
