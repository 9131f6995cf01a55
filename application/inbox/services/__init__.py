"""收件箱应用服务"""

from application.inbox.services.inbox_mail_service import InboxMailService

__all__ = ["InboxMailService"]
