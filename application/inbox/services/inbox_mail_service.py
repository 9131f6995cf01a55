"""收件箱刷新服务"""

import logging
from typing import Optional

from domain.configuration.services.configuration_manager import ConfigurationManager
from domain.inbox.repositories.inbox_mail_db_manager import InboxMailDbManager
from domain.inbox.services.mail_manager import MailManager
from domain.common.exceptions import (
    InboxConfigurationInvalidException,
    InboxConnectionFailedException,
)


class InboxMailService:
    """
    收件箱刷新服务

    业务流程：
    1. 读取 InboxRefresh 开关，关闭时直接返回
    2. 读取邮箱、密码、服务器三项配置并校验
    3. 删除并重建本地收件箱表
    4. 连接邮件服务器（端口 110）
    5. 列出邮件
    6. 按列表顺序逐封获取邮件

    注意：
    - 收件箱表在连接结果确定之前就已重建，连接失败时本地数据同样丢失
    - 获取到的邮件目前不写入收件箱表
    - 单封邮件获取失败时中止本次刷新，异常原样抛出
    - 不做任何重试，由调用方决定是否重新执行整个刷新
    """

    REFRESH_SETTING = "InboxRefresh"
    INBOX_SETTING = "EmailInbox"
    PASSWORD_SETTING = "EmailPassword"
    SERVER_SETTING = "EmailServer"

    MAIL_PORT = 110

    def __init__(
        self,
        configuration_manager: ConfigurationManager,
        inbox_mail_db_manager: InboxMailDbManager,
        mail_manager: MailManager,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化收件箱刷新服务

        Args:
            configuration_manager: 配置读取服务
            inbox_mail_db_manager: 收件箱表管理服务
            mail_manager: 邮件传输服务
            logger: 可选的日志记录器

        Raises:
            ValueError: 任一依赖为 None
        """
        if configuration_manager is None:
            raise ValueError("configuration_manager is required")
        if inbox_mail_db_manager is None:
            raise ValueError("inbox_mail_db_manager is required")
        if mail_manager is None:
            raise ValueError("mail_manager is required")

        self._configuration_manager = configuration_manager
        self._inbox_mail_db_manager = inbox_mail_db_manager
        self._mail_manager = mail_manager
        self._logger = logger or logging.getLogger(__name__)

    def refresh_inbox(self) -> bool:
        """
        刷新收件箱

        Returns:
            True 如果完成了一次刷新，False 如果刷新开关关闭

        Raises:
            InboxConfigurationInvalidException: 邮箱、密码或服务器配置为空
            InboxConnectionFailedException: 邮件服务器连接失败
        """
        refresh_mail = self._configuration_manager.read(self.REFRESH_SETTING, bool)

        if not refresh_mail:
            self._logger.debug("Inbox refresh disabled, skipping")
            return False

        mail_box = self._configuration_manager.read(self.INBOX_SETTING, str)
        mail_password = self._configuration_manager.read(self.PASSWORD_SETTING, str)
        mail_server = self._configuration_manager.read(self.SERVER_SETTING, str)

        if _is_blank(mail_box) or _is_blank(mail_password) or _is_blank(mail_server):
            self._logger.warning("Inbox refresh aborted: mail settings are incomplete")
            raise InboxConfigurationInvalidException()

        self._inbox_mail_db_manager.delete_and_create_inbox_table()
        self._logger.info("Inbox table recreated")

        connected = self._mail_manager.connect(
            server=mail_server,
            port=self.MAIL_PORT,
            user_name=mail_box,
            password=mail_password,
        )

        if not connected:
            self._logger.error(
                f"Failed to connect to {mail_server}:{self.MAIL_PORT} as {mail_box}"
            )
            raise InboxConnectionFailedException(server=mail_server, port=self.MAIL_PORT)

        self._logger.info(f"Connected to {mail_server}:{self.MAIL_PORT} as {mail_box}")

        try:
            mail_list = self._mail_manager.get_mails()
            self._logger.info(f"Found {len(mail_list)} mail(s) in {mail_box}")

            for mail_entry in mail_list:
                self._mail_manager.get_message(mail_entry.id)

            self._logger.info(f"Inbox refresh complete: {len(mail_list)} mail(s) fetched")
        finally:
            self._mail_manager.disconnect()

        return True


def _is_blank(value: Optional[str]) -> bool:
    """空字符串、纯空白或 None 都视为未配置"""
    return value is None or not str(value).strip()
