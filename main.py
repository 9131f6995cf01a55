"""
Inbox Refresh - 收件箱刷新入口

运行：
    uv run python main.py

配置通过环境变量或 .env 文件提供：
    INBOX_REFRESH=true
    EMAIL_INBOX=inbox
    EMAIL_PASSWORD=secret
    EMAIL_SERVER=pop.example.com
"""

import asyncio
import logging
import sys

from application.commands.inbox.refresh_inbox import RefreshInboxCommand
from infrastructure.config.logging_config import configure_logging
from infrastructure.containers import bootstrap

logger = logging.getLogger("inbox_refresh")


async def run() -> int:
    """执行一次收件箱刷新，返回进程退出码"""
    boot = bootstrap()
    configure_logging(boot.config.settings())

    handler = boot.app.refresh_inbox_handler()
    result = await handler.handle(RefreshInboxCommand())

    if not result.success:
        logger.error(f"{result.message} ({result.error_code})")
        return 1

    logger.info(result.message)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(run()))
