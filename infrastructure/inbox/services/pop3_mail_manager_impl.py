"""POP3 邮件传输服务实现"""

import email
import logging
import poplib
from email.header import decode_header
from email.utils import parseaddr
from typing import List, Optional

from domain.inbox.services.mail_manager import MailManager
from domain.inbox.value_objects.mail import Mail
from domain.inbox.value_objects.mail_entry import MailEntry
from domain.inbox.value_objects.sender import Sender
from domain.common.exceptions import MailManagerNotConnectedException


class Pop3MailManagerImpl(MailManager):
    """
    POP3 邮件传输服务实现

    使用 Python 标准库 poplib 实现，支持：
    - 明文 POP3 连接（端口 110）与 USER/PASS 认证
    - LIST 列出邮件编号和大小
    - RETR 获取单封邮件并解析头部（发件人、主题）
    """

    DEFAULT_TIMEOUT = 30.0  # 秒

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化 POP3 邮件传输服务

        Args:
            timeout: 连接超时时间（秒），默认 30 秒
            logger: 可选的日志记录器
        """
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)
        self._pop: Optional[poplib.POP3] = None

    @property
    def is_connected(self) -> bool:
        """是否已建立会话"""
        return self._pop is not None

    def connect(self, server: str, port: int, user_name: str, password: str) -> bool:
        """
        连接并登录 POP3 服务器

        Args:
            server: 服务器地址
            port: 服务器端口
            user_name: 邮箱用户名
            password: 邮箱密码

        Returns:
            True 如果连接并认证成功，否则 False
        """
        if self._pop is not None:
            self.disconnect()

        try:
            self._logger.debug(f"Connecting to {server}:{port}")
            pop = poplib.POP3(server, port, timeout=self._timeout)
        except OSError as e:
            self._logger.warning(f"Failed to connect to {server}:{port} - {e}")
            return False

        try:
            self._logger.debug(f"Authenticating as {user_name}")
            pop.user(user_name)
            pop.pass_(password)
        except (poplib.error_proto, OSError) as e:
            self._logger.warning(f"Authentication failed for {user_name} - {e}")
            self._close(pop)
            return False

        self._pop = pop
        self._logger.info(f"Successfully connected to {server}:{port}")
        return True

    def get_mails(self) -> List[MailEntry]:
        """
        列出邮箱中的邮件

        Returns:
            邮件条目列表，顺序与服务器 LIST 响应一致

        Raises:
            MailManagerNotConnectedException: 未建立会话
        """
        pop = self._require_connection("list mails")

        _, listings, _ = pop.list()

        entries: List[MailEntry] = []
        for listing in listings:
            parts = listing.split()
            size = int(parts[1]) if len(parts) > 1 else 0
            entries.append(MailEntry(id=int(parts[0]), size=size))

        self._logger.debug(f"Listed {len(entries)} mail(s)")
        return entries

    def get_message(self, mail_id: int) -> Mail:
        """
        获取单封邮件

        Args:
            mail_id: 邮件编号

        Returns:
            邮件（发件人和主题）

        Raises:
            MailManagerNotConnectedException: 未建立会话
            poplib.error_proto: 服务器拒绝 RETR 请求
        """
        pop = self._require_connection("fetch mail")

        _, lines, _ = pop.retr(mail_id)
        # 头部可能直接使用 UTF-8（RFC 6532）
        raw_text = b"\r\n".join(lines).decode("utf-8", errors="replace")
        msg = email.message_from_string(raw_text)

        sender_name, sender_address = parseaddr(msg.get("From", ""))
        sender = Sender(
            name=self._decode_header_value(sender_name),
            address=sender_address,
        )
        subject = self._decode_header_value(msg.get("Subject", ""))

        self._logger.debug(f"Fetched mail {mail_id} from {sender.display}")

        return Mail(id=mail_id, sender=sender, subject=subject)

    def disconnect(self) -> None:
        """发送 QUIT 并关闭会话"""
        if self._pop is None:
            return

        pop, self._pop = self._pop, None
        self._close(pop)

    def _require_connection(self, operation: str) -> poplib.POP3:
        """返回当前会话，未连接时抛出异常"""
        if self._pop is None:
            raise MailManagerNotConnectedException(operation=operation)
        return self._pop

    def _close(self, pop: poplib.POP3) -> None:
        """关闭 POP3 连接，忽略关闭过程中的错误"""
        try:
            pop.quit()
        except (poplib.error_proto, OSError) as e:
            self._logger.debug(f"Error during quit: {e}")
            try:
                pop.close()
            except OSError as e:
                self._logger.debug(f"Error during close: {e}")

    def _decode_header_value(self, value: Optional[str]) -> str:
        """
        解码邮件头部值（处理编码）

        Args:
            value: 原始头部值

        Returns:
            解码后的字符串
        """
        if not value:
            return ""

        result_parts = []

        for part, charset in decode_header(value):
            if isinstance(part, bytes):
                try:
                    decoded = part.decode(charset or "utf-8", errors="replace")
                except (LookupError, UnicodeDecodeError):
                    decoded = part.decode("utf-8", errors="replace")
                result_parts.append(decoded)
            else:
                result_parts.append(part)

        return "".join(result_parts)
