"""数据库引擎工厂"""

import os

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool


class DatabaseFactory:
    """
    数据库工厂

    根据数据库 URL 创建 SQLAlchemy 引擎。
    """

    @staticmethod
    def create_engine(database_url: str, echo: bool = False) -> Engine:
        """
        创建数据库引擎

        SQLite 连接允许跨线程使用；内存数据库使用 StaticPool，
        保证所有连接看到同一个数据库；文件数据库自动创建所在目录。

        Args:
            database_url: 数据库 URL
            echo: 是否输出 SQL 日志

        Returns:
            Engine 实例
        """
        url = make_url(database_url)

        if url.get_backend_name() != "sqlite":
            return create_engine(url, echo=echo, pool_pre_ping=True)

        connect_args = {"check_same_thread": False}

        if not url.database or url.database == ":memory:":
            return create_engine(
                url,
                echo=echo,
                connect_args=connect_args,
                poolclass=StaticPool,
            )

        db_dir = os.path.dirname(url.database)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

        return create_engine(url, echo=echo, connect_args=connect_args)
