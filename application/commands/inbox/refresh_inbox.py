"""刷新收件箱命令"""

from dataclasses import dataclass


@dataclass
class RefreshInboxCommand:
    """
    刷新收件箱命令

    所有输入都来自配置，命令本身不携带参数。
    """
