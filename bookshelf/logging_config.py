import logging
import time

from asgi_correlation_id import CorrelationIdFilter

from bookshelf.config import LOG_LEVEL


class UTCFormatter(logging.Formatter):
    converter = time.gmtime

    def formatTime(self, record, datefmt=None):
        return time.strftime("%Y-%m-%dT%H:%M:%S+0000", self.converter(record.created))


def configure_logging(level: str = LOG_LEVEL):
    formatter = UTCFormatter("%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s")

    # Clear any existing handlers on the root logger
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # Console handler tagged with the request's correlation ID
    console_handler = logging.StreamHandler()
    console_handler.addFilter(CorrelationIdFilter(uuid_length=8))
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)
