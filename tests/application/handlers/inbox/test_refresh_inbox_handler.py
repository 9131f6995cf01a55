"""RefreshInboxHandler 单元测试"""

import pytest
from unittest.mock import Mock

from application.commands.inbox.refresh_inbox import RefreshInboxCommand
from application.handlers.inbox.refresh_inbox_handler import (
    RefreshInboxHandler,
    RefreshInboxResult,
)
from application.inbox.services.inbox_mail_service import InboxMailService
from domain.common.exceptions import (
    InboxConfigurationInvalidException,
    InboxConnectionFailedException,
)


@pytest.fixture
def mock_service() -> Mock:
    """创建 Mock 收件箱刷新服务"""
    return Mock(spec=InboxMailService)


@pytest.fixture
def handler(mock_service: Mock) -> RefreshInboxHandler:
    """创建处理器实例"""
    return RefreshInboxHandler(inbox_mail_service=mock_service)


class TestRefreshInboxHandlerSuccess:
    """成功场景测试"""

    @pytest.mark.asyncio
    async def test_refresh_completed(self, handler: RefreshInboxHandler, mock_service: Mock):
        """测试完成一次刷新"""
        mock_service.refresh_inbox.return_value = True

        result = await handler.handle(RefreshInboxCommand())

        assert isinstance(result, RefreshInboxResult)
        assert result.success is True
        assert result.refreshed is True
        assert result.error_code is None
        mock_service.refresh_inbox.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_refresh_disabled(self, handler: RefreshInboxHandler, mock_service: Mock):
        """测试开关关闭时返回成功但未刷新"""
        mock_service.refresh_inbox.return_value = False

        result = await handler.handle(RefreshInboxCommand())

        assert result.success is True
        assert result.refreshed is False
        assert result.message == "Inbox refresh is disabled"


class TestRefreshInboxHandlerFailure:
    """失败场景测试"""

    @pytest.mark.asyncio
    async def test_configuration_invalid(self, handler: RefreshInboxHandler, mock_service: Mock):
        """测试配置无效时返回原样的错误信息"""
        mock_service.refresh_inbox.side_effect = InboxConfigurationInvalidException()

        result = await handler.handle(RefreshInboxCommand())

        assert result.success is False
        assert result.refreshed is False
        assert result.error_code == "INBOX_CONFIGURATION_INVALID"
        assert result.message == (
            "Unable to connect to Email Server.  Please check your connection settings."
        )

    @pytest.mark.asyncio
    async def test_connection_failed(self, handler: RefreshInboxHandler, mock_service: Mock):
        """测试连接失败时返回原样的错误信息"""
        mock_service.refresh_inbox.side_effect = InboxConnectionFailedException(
            server="pop.example.com", port=110
        )

        result = await handler.handle(RefreshInboxCommand())

        assert result.success is False
        assert result.error_code == "INBOX_CONNECTION_FAILED"
        assert result.message == (
            "Unable to connect to Email Server.  Please check and verify connection settings."
        )

    @pytest.mark.asyncio
    async def test_unexpected_error(self, handler: RefreshInboxHandler, mock_service: Mock):
        """测试未预期异常转换为内部错误"""
        mock_service.refresh_inbox.side_effect = RuntimeError("database locked")

        result = await handler.handle(RefreshInboxCommand())

        assert result.success is False
        assert result.error_code == "INTERNAL_ERROR"
        assert "database locked" in result.message
