import logging
import sys

logger = logging.getLogger("matrixsdk")
_handler: logging.Handler | None = None


def setup_logging(should_debug: bool = False) -> None:
    global _handler

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        logger.addHandler(_handler)
        logger.propagate = False

    logger.setLevel(logging.DEBUG if should_debug else logging.WARNING)
