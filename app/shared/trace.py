import uuid
from contextvars import ContextVar

trace_id_ctx: ContextVar[str | None] = ContextVar("trace_id_ctx", default=None)

TRACE_HEADER = "X-Request-Id"


def new_trace_id(incoming: str | None = None) -> str:
    incoming = (incoming or "").strip()
    # ignora valores absurdos vindos do cliente
    if incoming and len(incoming) <= 128:
        return incoming
    return uuid.uuid4().hex


def set_trace_id(trace_id: str | None) -> None:
    trace_id_ctx.set(trace_id)


def get_trace_id() -> str | None:
    return trace_id_ctx.get()
