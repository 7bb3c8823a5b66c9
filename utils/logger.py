import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

CART_LOGGER = "cartcore"


def setup_logger(name=CART_LOGGER, log_dir="data/logs", level=logging.INFO, backup_days=7):
    """
    Attach file + console output to a cart logger for a host application.

    The cart modules only log through children of "cartcore" ("cartcore.cart",
    "cartcore.pricing") and never attach handlers themselves. A host that only
    wants cart mutations can pass name="cartcore.cart"; the file is then
    <log_dir>/cartcore.cart.log.

    Calling it again for the same name only updates the level.
    """
    if name != CART_LOGGER and not name.startswith(CART_LOGGER + "."):
        raise ValueError(f"Not a cart logger: {name}")

    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # one file per day, rotated at midnight
    file_handler = TimedRotatingFileHandler(
        filename=log_dir / f"{name}.log",
        when="midnight",
        backupCount=backup_days,
        encoding="utf-8"
    )
    console_handler = logging.StreamHandler()
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Cart logging to {log_dir} at {logging.getLevelName(level)}")
    return logger
