import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the root logger once for the process.

    Calling it again (e.g. one app per test) only adjusts the level.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    else:
        root.setLevel(level.upper())
    return logging.getLogger("app")
