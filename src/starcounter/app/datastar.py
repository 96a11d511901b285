from typing import Optional

from datastar_py import ServerSentEventGenerator as SSE
from starlette.requests import Request


def is_datastar_request(request: Optional[Request]) -> bool:
    """Datastar actions (`@post(...)`) send a Datastar-Request header."""
    return request is not None and "Datastar-Request" in request.headers


def signals_event(signals: dict) -> str:
    return SSE.merge_signals(signals)


def fragment_event(fragment: str, selector: Optional[str] = None, merge_mode: str = "morph") -> str:
    """SSE event merging one rendered HTML fragment into the page."""
    if selector:
        return SSE.merge_fragments(fragment, selector=selector, merge_mode=merge_mode)
    return SSE.merge_fragments(fragment, merge_mode=merge_mode)
