"""
收件箱刷新集成测试

使用真实的 Settings、SQLAlchemy 收件箱表管理和内存数据库，
只替换邮件服务器连接。
"""

from datetime import datetime, timezone
from typing import Dict, List

import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from application.inbox.services.inbox_mail_service import InboxMailService
from domain.inbox.services.mail_manager import MailManager
from domain.inbox.value_objects import Mail, MailEntry, Sender
from domain.common.exceptions import (
    InboxConfigurationInvalidException,
    InboxConnectionFailedException,
)
from infrastructure.config.settings import Settings
from infrastructure.config.settings_configuration_manager import SettingsConfigurationManager
from infrastructure.database.database_factory import DatabaseFactory
from infrastructure.inbox.models.inbox_mail_model import InboxMailModel
from infrastructure.inbox.repositories.sqlalchemy_inbox_mail_db_manager import (
    SqlAlchemyInboxMailDbManager,
)


class InMemoryMailManager(MailManager):
    """内存邮件服务器"""

    def __init__(self, mails: Dict[int, Mail], password: str):
        self._mails = mails
        self._password = password
        self.connected = False
        self.connect_calls: List[tuple] = []
        self.fetched: List[int] = []

    def connect(self, server: str, port: int, user_name: str, password: str) -> bool:
        self.connect_calls.append((server, port, user_name, password))
        self.connected = password == self._password
        return self.connected

    def get_mails(self) -> List[MailEntry]:
        return [MailEntry(id=mail_id) for mail_id in self._mails]

    def get_message(self, mail_id: int) -> Mail:
        self.fetched.append(mail_id)
        return self._mails[mail_id]

    def disconnect(self) -> None:
        self.connected = False


@pytest.fixture
def engine():
    """内存数据库引擎"""
    engine = DatabaseFactory.create_engine("sqlite:///:memory:")
    yield engine
    engine.dispose()


@pytest.fixture
def mail_manager():
    """包含两封邮件的内存邮件服务器"""
    return InMemoryMailManager(
        mails={
            1234: Mail(id=1234, sender=Sender(name="Ranga", address="ranga@gmail.com")),
            5678: Mail(id=5678, sender=Sender(address="noreply@example.com")),
        },
        password="pw",
    )


def create_service(engine, mail_manager, **settings) -> InboxMailService:
    """使用真实配置和收件箱表管理创建服务"""
    values = {
        "inbox_refresh": True,
        "email_inbox": "inbox",
        "email_password": "pw",
        "email_server": "192.168.1.1",
    }
    values.update(settings)
    return InboxMailService(
        configuration_manager=SettingsConfigurationManager(
            Settings(_env_file=None, app_env="test", **values)
        ),
        inbox_mail_db_manager=SqlAlchemyInboxMailDbManager(engine),
        mail_manager=mail_manager,
    )


def seed_inbox(engine) -> None:
    """写入一条旧的收件箱记录"""
    InboxMailModel.__table__.create(engine, checkfirst=True)
    with Session(engine) as session:
        session.add(InboxMailModel(message_number=1, created_at=datetime.now(timezone.utc)))
        session.commit()


def count_rows(engine) -> int:
    with Session(engine) as session:
        return session.scalar(select(func.count()).select_from(InboxMailModel))


class TestInboxRefreshFlow:
    """端到端刷新流程"""

    def test_full_refresh(self, engine, mail_manager):
        """测试完整刷新：重建表、连接、逐封获取"""
        seed_inbox(engine)
        service = create_service(engine, mail_manager)

        assert service.refresh_inbox() is True

        assert count_rows(engine) == 0
        assert mail_manager.connect_calls == [("192.168.1.1", 110, "inbox", "pw")]
        assert mail_manager.fetched == [1234, 5678]
        assert mail_manager.connected is False

    def test_disabled_refresh_keeps_existing_rows(self, engine, mail_manager):
        """测试开关关闭时保留已有数据"""
        seed_inbox(engine)
        service = create_service(engine, mail_manager, inbox_refresh=False)

        assert service.refresh_inbox() is False

        assert count_rows(engine) == 1
        assert mail_manager.connect_calls == []

    def test_blank_server_keeps_existing_rows(self, engine, mail_manager):
        """测试服务器配置为空时不重建收件箱表"""
        seed_inbox(engine)
        service = create_service(engine, mail_manager, email_server="  ")

        with pytest.raises(InboxConfigurationInvalidException):
            service.refresh_inbox()

        assert count_rows(engine) == 1
        assert mail_manager.connect_calls == []

    def test_connection_failure_after_table_reset(self, engine, mail_manager):
        """测试连接失败时收件箱表已被清空"""
        seed_inbox(engine)
        service = create_service(engine, mail_manager, email_password="wrong")

        with pytest.raises(InboxConnectionFailedException):
            service.refresh_inbox()

        assert count_rows(engine) == 0
        assert mail_manager.fetched == []
