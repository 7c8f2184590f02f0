import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """配置根日志，重复调用不会叠加 handler"""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())
    return logging.getLogger("gqlrelay")


def mask_key(api_key: str) -> str:
    if not api_key:
        return ""
    return api_key[:3] + "..."
