import logging


def setup_logging(log_level: str | None = None) -> None:
    """Configure console logging for an application embedding eventedit.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
            Defaults to ``Settings.log_level`` (``EVENTEDIT_LOG_LEVEL``).
    """
    if log_level is None:
        from eventedit.config import get_settings

        log_level = get_settings().log_level

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Exact type check avoids matching subclasses (FileHandler, etc.)
    if not any(type(h) is logging.StreamHandler for h in root_logger.handlers):
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        root_logger.addHandler(console)
