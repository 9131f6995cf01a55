"""领域异常定义"""

from typing import Any


class DomainException(Exception):
    """
    领域异常基类

    Attributes:
        message: 错误消息（可直接展示给调用方）
        code: 错误代码
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidValueObjectException(DomainException):
    """值对象无效"""

    def __init__(self, value_object_type: str, value: Any, reason: str):
        self.value_object_type = value_object_type
        self.value = value
        self.reason = reason
        super().__init__(
            message=f"Invalid {value_object_type} ({value!r}): {reason}",
            code="INVALID_VALUE_OBJECT",
        )


class ConfigurationReadException(DomainException):
    """配置项读取失败（类型无法转换）"""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(
            message=f"Failed to read configuration '{name}': {reason}",
            code="CONFIGURATION_READ_ERROR",
        )


class MailManagerNotConnectedException(DomainException):
    """邮件服务器会话未建立"""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            message=f"Cannot {operation}: not connected to a mail server",
            code="MAIL_MANAGER_NOT_CONNECTED",
        )


class InboxMailServiceException(DomainException):
    """收件箱刷新失败"""

    def __init__(self, message: str, code: str = "INBOX_REFRESH_FAILED"):
        super().__init__(message=message, code=code)


class InboxConfigurationInvalidException(InboxMailServiceException):
    """收件箱连接配置缺失或为空"""

    MESSAGE = "Unable to connect to Email Server.  Please check your connection settings."

    def __init__(self) -> None:
        super().__init__(message=self.MESSAGE, code="INBOX_CONFIGURATION_INVALID")


class InboxConnectionFailedException(InboxMailServiceException):
    """邮件服务器拒绝连接或认证失败"""

    MESSAGE = "Unable to connect to Email Server.  Please check and verify connection settings."

    def __init__(self, server: str, port: int):
        self.server = server
        self.port = port
        super().__init__(message=self.MESSAGE, code="INBOX_CONNECTION_FAILED")
