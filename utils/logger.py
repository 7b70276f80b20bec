import logging
import sys
from contextlib import contextmanager

import allure

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"


def build_logger(name: str, level: str = "INFO") -> logging.Logger:
    """
    每个场景一个独立 logger，级别在构造时显式传入
    - 不修改 root logger，不依赖全局环境变量
    - 重复调用同名 logger 不会重复添加 handler
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


@contextmanager
def log_step(logger: logging.Logger, title: str):
    """
    用例步骤：allure step + 日志
    失败时记录 ERROR（含堆栈）后继续抛出，不改变用例结果
    """
    with allure.step(title):
        logger.info(f"▶ {title}")
        try:
            yield
        except BaseException:  # pytest.fail / KeyboardInterrupt 也要记录
            logger.error(f"✘ {title}", exc_info=True)
            raise
        logger.info(f"✔ {title}")
