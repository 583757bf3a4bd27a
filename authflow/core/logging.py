import logging
from pythonjsonlogger import jsonlogger
from authflow.core.config import settings

def setup_logging(level: str | None = None):
    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    root.handlers = [handler]
    # asyncio debug chatter is not useful next to flow events
    logging.getLogger("asyncio").setLevel(logging.WARNING)
