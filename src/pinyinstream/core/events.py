"""
事件模型（Event Model）

轉換過濾器不會直接輸出到 stdout，也不會把 lookup 的格式錯誤拋給下游。
若需要得知「哪些詞元被降級為只輸出原詞元」，請使用事件回呼（event handler）。

設計原則：
- 允許降級，但不允許「默默」降級：每次降級都會記錄 warning 並送出事件。
"""

from __future__ import annotations

from typing import Callable, Literal, Optional, TypedDict

from pinyinstream.utils.logger import get_logger

_logger = get_logger("events")


class TransformEvent(TypedDict, total=False):
    type: Literal["degraded"]
    engine: str

    # token
    term: str

    # pipeline / diagnostics
    stage: Literal["lookup"]
    fallback: Literal["original_only"]
    degrade_reason: str
    exception_type: str
    exception_message: str


TransformEventHandler = Callable[[TransformEvent], None]


def emit_event(handler: Optional[TransformEventHandler], event: TransformEvent) -> None:
    """送出事件；handler 本身出錯只記錄，不影響串流"""
    if handler is None:
        return
    try:
        handler(event)
    except Exception:
        _logger.exception("event handler failed for %s event", event.get("type"))
