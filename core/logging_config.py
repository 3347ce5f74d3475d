import logging

from .config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once; DEBUG in development, INFO in production"""
    level = logging.INFO if settings.is_production else logging.DEBUG
    root = logging.getLogger()
    root.setLevel(level)

    if not any(getattr(h, "_interview_prep", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._interview_prep = True
        root.addHandler(handler)

    # third-party clients are noisy at DEBUG
    for name in ("httpx", "httpcore", "openai", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)


def mask_secret(value) -> str:
    if not value:
        return "None"
    return f"****{value[-4:]}"
