"""API request/response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, Field


# === Request Schemas ===


class RegisterRequest(BaseModel):
    """플레이어 등록 요청"""

    player_id: str = Field(..., min_length=1, max_length=50, description="플레이어 ID")
    name: Optional[str] = Field(
        None, max_length=50, description="표시 이름 (생략 시 player_id)"
    )


class ActionRequest(BaseModel):
    """게임 액션 요청"""

    player_id: str = Field(..., description="플레이어 ID")
    action: str = Field(..., description="액션 타입: move, status, use, buy, help, quit")
    params: dict[str, Any] = Field(default_factory=dict, description="액션 파라미터")


class ChoiceRequest(BaseModel):
    """메뉴 번호 선택 요청"""

    player_id: str = Field(..., description="플레이어 ID")
    choice: int = Field(..., ge=1, description="메뉴 번호 (1부터)")
    item_index: Optional[int] = Field(
        None, ge=1, description="'Use item' 선택 시 아이템 번호 (1부터, 생략 시 취소)"
    )


# === Response Schemas ===


class ItemInfo(BaseModel):
    """인벤토리 아이템 정보"""

    number: int
    instance_id: str
    template_id: str
    name: str
    category: str
    effect: int
    description: str


class PlayerInfo(BaseModel):
    """플레이어 정보"""

    player_id: str
    name: str
    health: int
    gold: int
    location: str
    inventory: list[ItemInfo] = []
    best_weapon: Optional[str] = None
    best_armor: Optional[str] = None
    status: str


class LocationInfo(BaseModel):
    """위치 정보"""

    location_id: str
    title: str
    description: str


class MenuOptionInfo(BaseModel):
    """메뉴 항목"""

    number: int
    label: str
    action: str


class GameStateResponse(BaseModel):
    """게임 상태 응답"""

    success: bool
    player: PlayerInfo
    location: LocationInfo
    menu: list[MenuOptionInfo] = []


class ActionResponse(BaseModel):
    """액션 실행 응답"""

    success: bool
    action: str
    message: str
    lines: list[str] = []
    error: Optional[str] = None
    data: Optional[dict[str, Any]] = None
    player: Optional[PlayerInfo] = None


class ErrorResponse(BaseModel):
    """에러 응답"""

    success: bool = False
    error: str
    detail: Optional[str] = None
