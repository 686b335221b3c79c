# product_api/logging_setup.py
import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger.

    Safe to call more than once (the app factory and the lifespan both may);
    only the level is updated after the first call.
    """
    global _configured
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logging.root.addHandler(handler)
        _configured = True
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
