"""收件箱命令模块"""

from application.commands.inbox.refresh_inbox import RefreshInboxCommand

__all__ = ["RefreshInboxCommand"]
