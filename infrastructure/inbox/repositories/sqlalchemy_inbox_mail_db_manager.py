"""收件箱表 SQLAlchemy 管理实现"""

import logging
from typing import Optional

from sqlalchemy import Engine

from domain.inbox.repositories.inbox_mail_db_manager import InboxMailDbManager
from infrastructure.inbox.models.inbox_mail_model import InboxMailModel


class SqlAlchemyInboxMailDbManager(InboxMailDbManager):
    """
    收件箱表 SQLAlchemy 管理实现

    只操作 tblEmailInbox 一张表，不影响同一数据库中的其他表。
    """

    def __init__(self, engine: Engine, logger: Optional[logging.Logger] = None):
        """
        初始化管理器

        Args:
            engine: 数据库引擎
            logger: 可选的日志记录器
        """
        self._engine = engine
        self._logger = logger or logging.getLogger(__name__)

    def delete_and_create_inbox_table(self) -> None:
        """删除并重建收件箱表"""
        table = InboxMailModel.__table__

        with self._engine.begin() as connection:
            table.drop(connection, checkfirst=True)
            table.create(connection)

        self._logger.debug(f"Table {table.name} dropped and recreated")
