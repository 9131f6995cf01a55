"""收件箱处理器模块"""

from application.handlers.inbox.refresh_inbox_handler import (
    RefreshInboxHandler,
    RefreshInboxResult,
)

__all__ = [
    "RefreshInboxHandler",
    "RefreshInboxResult",
]
