import uuid
from contextvars import ContextVar

TRACE_HEADER = "X-Request-Id"

_trace_id: ContextVar[str] = ContextVar("trace_id", default="-")


def get_trace_id() -> str:
    return _trace_id.get()


def set_trace_id(value: str) -> None:
    _trace_id.set(value)


def trace_id_from(header_value: str | None) -> str:
    """Reuse an upstream request id when it is sane, otherwise mint one."""
    if header_value and 0 < len(header_value) <= 128:
        return header_value
    return str(uuid.uuid4())
