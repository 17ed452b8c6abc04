import logging
import sys
from logging.handlers import QueueHandler, QueueListener
from queue import Queue
from pythonjsonlogger import jsonlogger
from ratingz_api.core.trace import get_trace_id
from ratingz_api.core.config import settings


class TraceContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # проставляем поля ДО записи в поток
        record.trace_id = (getattr(record, "trace_id", None)
                           or get_trace_id() or "-")
        record.service = getattr(record, "service", None) or settings.app_name
        record.env = getattr(record, "env", None) or settings.env
        return True


_listener: QueueListener | None = None


def setup_json_logging(service: str = "ratingz_service",
                       level: str | None = None) -> None:
    global _listener

    if _listener is not None:
        # повторный вызов (тесты, reload): не плодим листенеры
        return

    root = logging.getLogger()
    root.setLevel(level or settings.log_level)

    fmt = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s"
        " %(message)s %(pathname)s %(lineno)d "
        "%(trace_id)s %(service)s %(env)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(fmt)
    stream_handler.addFilter(TraceContextFilter())

    q: Queue = Queue(-1)
    queue_handler = QueueHandler(q)
    # обогащаем record до помещения в очередь: contextvar trace_id
    # в потоке листенера уже недоступен
    queue_handler.addFilter(TraceContextFilter())

    _listener = QueueListener(q, stream_handler, respect_handler_level=True)
    _listener.start()

    root.handlers = [queue_handler]

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).handlers = []
        logging.getLogger(name).propagate = True

    # драйвер монги болтлив на DEBUG
    logging.getLogger("pymongo").setLevel("WARNING")

    logging.getLogger(__name__).info(
        "logger_initialized",
        extra={"service": service})


def shutdown_logging() -> None:
    """Аккуратно остановить listener при выключении приложения."""
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
