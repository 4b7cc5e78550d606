import logging, sys

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# chatty third-party loggers; they only follow the app level when debugging
NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO", fmt: str = DEFAULT_FORMAT) -> None:
    """One stdout handler on the root logger; uvicorn and httpx propagate to it."""
    level = level.upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if level == "DEBUG" else "WARNING")
