"""收件箱表管理接口"""

from abc import ABC, abstractmethod


class InboxMailDbManager(ABC):
    """
    收件箱表管理接口

    负责本地收件箱镜像表的维护，具体实现在基础设施层。
    """

    @abstractmethod
    def delete_and_create_inbox_table(self) -> None:
        """
        删除并重建收件箱表

        破坏性操作：清除已有的全部记录（或整张表），
        并创建一张空表以接收新数据。重复调用结果相同。
        """
        raise NotImplementedError
