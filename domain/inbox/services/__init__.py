"""收件箱领域服务模块"""

from domain.inbox.services.mail_manager import MailManager

__all__ = ["MailManager"]
