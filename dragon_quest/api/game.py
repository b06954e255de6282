"""Game API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from dragon_quest.api.schemas import (
    ActionRequest,
    ActionResponse,
    ChoiceRequest,
    ErrorResponse,
    GameStateResponse,
    ItemInfo,
    LocationInfo,
    MenuOptionInfo,
    PlayerInfo,
    RegisterRequest,
)
from dragon_quest.core.actions import (
    ActionResult,
    CheckStatus,
    GameAction,
    Move,
    Purchase,
    Quit,
    ShowHelp,
    UseItem,
)
from dragon_quest.core.engine import GameEngine
from dragon_quest.core.item.models import ItemCategory
from dragon_quest.core.locations import Location
from dragon_quest.core.logging import get_logger
from dragon_quest.core.menu import MenuOption
from dragon_quest.core.player import PlayerState

logger = get_logger(__name__)

router = APIRouter(prefix="/game", tags=["game"])

VALID_ACTIONS = "move, status, use, buy, help, quit"


def get_engine() -> GameEngine:
    """엔진 인스턴스 반환 (의존성 주입)"""
    from dragon_quest.main import get_game_engine

    return get_game_engine()


def _build_player_info(player: PlayerState) -> PlayerInfo:
    """PlayerState를 PlayerInfo로 변환"""
    weapon = player.inventory.best_item(ItemCategory.WEAPON)
    armor = player.inventory.best_item(ItemCategory.ARMOR)
    return PlayerInfo(
        player_id=player.player_id,
        name=player.name,
        health=player.health,
        gold=player.gold,
        location=player.location.key,
        inventory=[
            ItemInfo(
                number=number,
                instance_id=item.instance_id,
                template_id=item.template_id,
                name=item.name,
                category=item.category.value,
                effect=item.effect,
                description=item.description,
            )
            for number, item in enumerate(player.inventory, start=1)
        ],
        best_weapon=weapon.name if weapon else None,
        best_armor=armor.name if armor else None,
        status=player.status.value,
    )


def _build_location_info(location: Location) -> LocationInfo:
    """Location을 LocationInfo로 변환"""
    return LocationInfo(
        location_id=location.key,
        title=location.title,
        description=location.description,
    )


def _build_menu_info(options: list[MenuOption]) -> list[MenuOptionInfo]:
    return [
        MenuOptionInfo(
            number=option.number,
            label=option.label,
            action=option.action.action_type.value,
        )
        for option in options
    ]


def _build_state(engine: GameEngine, player: PlayerState) -> GameStateResponse:
    return GameStateResponse(
        success=True,
        player=_build_player_info(player),
        location=_build_location_info(player.location),
        menu=_build_menu_info(engine.get_menu(player.player_id)),
    )


def _build_action_response(result: ActionResult, player: PlayerState) -> ActionResponse:
    return ActionResponse(
        success=result.success,
        action=result.action_type,
        message=result.message,
        lines=result.lines,
        error=result.error.value if result.error else None,
        data=result.data,
        player=_build_player_info(player),
    )


def _require_player(engine: GameEngine, player_id: str) -> PlayerState:
    player = engine.get_player(player_id)
    if not player:
        raise HTTPException(status_code=404, detail=f"Player not found: {player_id}")
    if player.is_over:
        raise HTTPException(
            status_code=409,
            detail=f"Game is over for {player_id} ({player.status.value})",
        )
    return player


def _parse_action(action: str, params: dict) -> GameAction:
    """요청 action/params → GameAction. 잘못된 파라미터는 400."""
    if action == "move":
        target_key = params.get("target", "")
        if not target_key:
            raise HTTPException(status_code=400, detail="Missing 'target' parameter")
        target = Location.from_key(str(target_key))
        if target is None:
            raise HTTPException(
                status_code=400, detail=f"Unknown location: {target_key}"
            )
        return Move(target)
    elif action == "status":
        return CheckStatus()
    elif action == "use":
        item_number = params.get("item_index")
        if item_number is None:
            return UseItem()
        # 정수 또는 정수 문자열만 (1.7, true 거부)
        if isinstance(item_number, bool) or not isinstance(item_number, (int, str)):
            raise HTTPException(
                status_code=400, detail="'item_index' must be an integer"
            )
        try:
            return UseItem(item_index=int(item_number) - 1)
        except ValueError:
            raise HTTPException(
                status_code=400, detail="'item_index' must be an integer"
            )
    elif action == "buy":
        item_id = params.get("item_id", "")
        if not item_id:
            raise HTTPException(status_code=400, detail="Missing 'item_id' parameter")
        return Purchase(str(item_id))
    elif action == "help":
        return ShowHelp()
    elif action == "quit":
        return Quit()
    raise HTTPException(
        status_code=400,
        detail=f"Unknown action: {action}. Valid actions: {VALID_ACTIONS}",
    )


@router.post("/register", response_model=GameStateResponse)
def register_player(
    request: RegisterRequest,
    engine: GameEngine = Depends(get_engine),
) -> GameStateResponse:
    """
    플레이어 등록

    새 플레이어를 village에서 시작시킵니다 (체력 100, 골드 20).
    이미 등록된 player_id면 기존 세션을 그대로 반환합니다.
    """
    try:
        player = engine.register_player(request.player_id, request.name)
        logger.info("Player registered: %s", request.player_id)
        return _build_state(engine, player)
    except Exception as e:
        logger.error("Failed to register player: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.get(
    "/state/{player_id}",
    response_model=GameStateResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_game_state(
    player_id: str,
    engine: GameEngine = Depends(get_engine),
) -> GameStateResponse:
    """
    현재 게임 상태 조회

    플레이어 상태, 현재 위치, 선택 가능한 메뉴를 반환합니다.
    종료된 게임도 조회할 수 있습니다.
    """
    player = engine.get_player(player_id)
    if not player:
        raise HTTPException(status_code=404, detail=f"Player not found: {player_id}")
    return _build_state(engine, player)


@router.post(
    "/action",
    response_model=ActionResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
def execute_action(
    request: ActionRequest,
    engine: GameEngine = Depends(get_engine),
) -> ActionResponse:
    """
    게임 액션 실행

    지원 액션:
    - move: 이동 (params: {target: "village"|"blacksmith"|"market"|"forest"|"mountains"})
    - status: 상태 확인
    - use: 아이템 사용 (params: {item_index: 1}, 생략 시 취소)
    - buy: 구매 (params: {item_id: "wpn_sword"})
    - help: 도움말
    - quit: 게임 종료

    규칙 위반(골드 부족, 불가능한 이동, 잘못된 아이템)은 200 + success=false로 응답합니다.
    """
    player = _require_player(engine, request.player_id)
    action = request.action.lower()
    game_action = _parse_action(action, request.params)

    try:
        result = engine.perform(request.player_id, game_action)
        logger.debug("Action executed: %s for %s", action, request.player_id)
        return _build_action_response(result, player)
    except Exception as e:
        logger.error("Action failed: %s - %s", action, e)
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/choose",
    response_model=ActionResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def choose_option(
    request: ChoiceRequest,
    engine: GameEngine = Depends(get_engine),
) -> ActionResponse:
    """
    메뉴 번호 선택

    현재 위치 메뉴의 번호로 행동합니다. 'Use item'은 item_index를 함께 보냅니다.
    """
    player = _require_player(engine, request.player_id)
    item_index = request.item_index - 1 if request.item_index is not None else None

    try:
        result = engine.choose(request.player_id, request.choice, item_index)
        return _build_action_response(result, player)
    except Exception as e:
        logger.error("Choice failed: %d - %s", request.choice, e)
        raise HTTPException(status_code=500, detail=str(e))
