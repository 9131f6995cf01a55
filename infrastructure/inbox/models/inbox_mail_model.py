"""收件箱 SQLAlchemy 数据模型"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy 声明式基类"""
    pass


class InboxMailModel(Base):
    """
    收件箱数据库模型

    本地收件箱镜像表，每次刷新前整表重建
    """

    __tablename__ = "tblEmailInbox"

    # 主键
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # 服务器上的邮件编号
    message_number: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    # 发件人
    sender_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    sender_address: Mapped[str] = mapped_column(String(512), nullable=False, default="")

    # 邮件主题
    subject: Mapped[str] = mapped_column(String(1024), nullable=False, default="")

    # 时间戳
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    def __repr__(self) -> str:
        subject_display = (self.subject[:30] + "...") if self.subject and len(self.subject) > 30 else (self.subject or "")
        return f"<InboxMailModel(id={self.id}, message_number={self.message_number}, subject={subject_display})>"
