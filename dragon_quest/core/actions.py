"""셸 → 코어 행동 요청과 결과

셸(HTTP/터미널)은 이미 검증된 행동만 넘긴다. 코어는 원문 입력을 파싱하지 않는다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, List, Optional, Union

from dragon_quest.core.errors import GameError
from dragon_quest.core.locations import Location


class ActionType(str, Enum):
    MOVE = "move"
    STATUS = "status"
    USE = "use"
    BUY = "buy"
    HELP = "help"
    QUIT = "quit"


@dataclass(frozen=True)
class Move:
    target: Location
    action_type: ClassVar[ActionType] = ActionType.MOVE


@dataclass(frozen=True)
class CheckStatus:
    action_type: ClassVar[ActionType] = ActionType.STATUS


@dataclass(frozen=True)
class UseItem:
    item_index: Optional[int] = None  # 0-based. None = 취소
    action_type: ClassVar[ActionType] = ActionType.USE


@dataclass(frozen=True)
class Purchase:
    template_id: str
    action_type: ClassVar[ActionType] = ActionType.BUY


@dataclass(frozen=True)
class ShowHelp:
    action_type: ClassVar[ActionType] = ActionType.HELP


@dataclass(frozen=True)
class Quit:
    action_type: ClassVar[ActionType] = ActionType.QUIT


GameAction = Union[Move, CheckStatus, UseItem, Purchase, ShowHelp, Quit]


@dataclass
class ActionResult:
    """행동 결과

    lines: 렌더링용 서술 (순서대로 출력)
    error: 규칙 위반 시 코드. 이 경우 상태는 바뀌지 않았다
    """

    success: bool
    action_type: str
    message: str
    lines: List[str] = field(default_factory=list)
    error: Optional[GameError] = None
    data: Optional[dict] = None

    def to_dict(self) -> dict:
        result: dict[str, Any] = {
            "success": self.success,
            "action": self.action_type,
            "message": self.message,
            "lines": list(self.lines),
        }
        if self.error:
            result["error"] = self.error.value
        if self.data:
            result["data"] = self.data
        return result
