import os

HEADLESS = bool(os.getenv("CI", False) or os.getenv("HEADLESS", False))  # CI特殊配置

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# 页面状态稳定等待（替代固定sleep），单位ms
SETTLE_TIMEOUT_MS = int(os.getenv("SETTLE_TIMEOUT_MS", "5000"))
