"""刷新收件箱处理器"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from application.commands.inbox.refresh_inbox import RefreshInboxCommand
from application.inbox.services.inbox_mail_service import InboxMailService
from domain.common.exceptions import InboxMailServiceException


@dataclass
class RefreshInboxResult:
    """
    刷新收件箱结果

    Attributes:
        success: 是否成功
        refreshed: 是否实际执行了刷新（开关关闭时为 False）
        message: 结果消息
        error_code: 错误代码（失败时）
    """

    success: bool
    refreshed: bool = False
    message: str = ""
    error_code: Optional[str] = None


class RefreshInboxHandler:
    """
    刷新收件箱处理器

    在线程中执行同步的 InboxMailService，避免阻塞事件循环，
    并将领域异常转换为结果对象。异常消息原样返回给调用方。
    """

    def __init__(
        self,
        inbox_mail_service: InboxMailService,
        logger: Optional[logging.Logger] = None,
    ):
        """
        初始化处理器

        Args:
            inbox_mail_service: 收件箱刷新服务
            logger: 可选的日志记录器
        """
        self._inbox_mail_service = inbox_mail_service
        self._logger = logger or logging.getLogger(__name__)

    async def handle(self, command: RefreshInboxCommand) -> RefreshInboxResult:
        """
        处理刷新收件箱命令

        Args:
            command: 刷新收件箱命令

        Returns:
            RefreshInboxResult 处理结果
        """
        try:
            refreshed = await asyncio.to_thread(self._inbox_mail_service.refresh_inbox)

        except InboxMailServiceException as e:
            return RefreshInboxResult(
                success=False,
                message=e.message,
                error_code=e.code,
            )
        except Exception as e:
            self._logger.exception("Unexpected error during inbox refresh")
            return RefreshInboxResult(
                success=False,
                message=f"Unexpected error: {str(e)}",
                error_code="INTERNAL_ERROR",
            )

        if not refreshed:
            return RefreshInboxResult(
                success=True,
                refreshed=False,
                message="Inbox refresh is disabled",
            )

        return RefreshInboxResult(
            success=True,
            refreshed=True,
            message="Inbox refreshed successfully",
        )
