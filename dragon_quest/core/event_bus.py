"""
Dragon's Quest Core - Event Bus
===============================
엔진이 한 턴 동안 일어난 일을 구독자에게 알린다.

[규칙]
1. 이벤트 data에는 player_id, template_id 같은 식별자와 단순 값만 담는다
2. 핸들러가 다시 발행하는 연쇄는 MAX_DEPTH 단계에서 끊는다
3. 한 턴 안에서 같은 source의 같은 event_type은 한 번만 전달된다
4. 턴 로그는 구독자 유무와 상관없이 발행 순서대로 남는다
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, DefaultDict, Dict, List, Optional, Set, Tuple

from dragon_quest.core.logging import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 5


@dataclass
class GameEvent:
    """버스로 전달되는 이벤트 1건"""

    event_type: str  # EventTypes 상수
    data: Dict[str, Any]
    source: str  # 발행 컴포넌트 ("engine")

    # 발행 시 버스가 채운다
    _depth: int = field(default=0, repr=False)


EventHandler = Callable[[GameEvent], None]


class EventBus:
    """턴 단위 동기 이벤트 버스

    engine.perform() 한 번이 한 턴이다. 엔진은 턴이 끝나면 reset_chain()을 부른다.
    """

    def __init__(self) -> None:
        self._subscribers: DefaultDict[str, List[EventHandler]] = defaultdict(list)
        self._depth = 0
        self._delivered: Set[Tuple[str, str]] = set()
        self._turn_log: List[GameEvent] = []

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        self._subscribers[event_type].append(handler)
        logger.debug("Subscribed %s to %s", handler.__qualname__, event_type)

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        handlers = self._subscribers.get(event_type)
        if not handlers or handler not in handlers:
            logger.warning(
                "Unsubscribe ignored, %s not subscribed to %s",
                handler.__qualname__,
                event_type,
            )
            return
        handlers.remove(handler)

    def _rejection(self, event: GameEvent) -> Optional[str]:
        """전달하면 안 되는 이유. 전달 가능하면 None."""
        if self._depth >= MAX_DEPTH:
            return f"depth limit {MAX_DEPTH} reached"
        if (event.source, event.event_type) in self._delivered:
            return "already emitted this turn"
        return None

    def emit(self, event: GameEvent) -> None:
        """핸들러를 등록 순서대로 동기 호출한다.

        핸들러 예외는 로그만 남기고 다음 핸들러로 넘어간다.
        """
        reason = self._rejection(event)
        if reason:
            logger.warning("Dropped %s:%s (%s)", event.source, event.event_type, reason)
            return

        self._delivered.add((event.source, event.event_type))
        event._depth = self._depth
        self._turn_log.append(event)

        handlers = list(self._subscribers.get(event.event_type, ()))
        logger.debug(
            "Emit %s from %s (depth=%d, handlers=%d)",
            event.event_type,
            event.source,
            self._depth,
            len(handlers),
        )

        self._depth += 1
        try:
            for handler in handlers:
                try:
                    handler(event)
                except Exception:
                    logger.exception(
                        "Handler %s failed on %s", handler.__qualname__, event.event_type
                    )
        finally:
            self._depth -= 1

    @property
    def turn_events(self) -> List[GameEvent]:
        """이번 턴에 전달된 이벤트 (발행 순서, 복사본)"""
        return list(self._turn_log)

    def reset_chain(self) -> None:
        """턴 경계. 중복 기록과 턴 로그를 비운다."""
        self._delivered.clear()
        self._turn_log.clear()
        self._depth = 0

