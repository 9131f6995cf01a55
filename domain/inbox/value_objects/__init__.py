"""收件箱值对象模块"""

from domain.inbox.value_objects.mail_entry import MailEntry
from domain.inbox.value_objects.sender import Sender
from domain.inbox.value_objects.mail import Mail

__all__ = ["MailEntry", "Sender", "Mail"]
