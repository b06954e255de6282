"""규칙 위반 결과 코드

코어는 규칙 위반을 예외로 던지지 않는다. 상태를 바꾸지 않고 이 코드를 결과에 담아 돌려준다.
"""

from enum import Enum


class GameError(str, Enum):
    INSUFFICIENT_FUNDS = "insufficient_funds"  # 골드 부족 구매
    ILLEGAL_TRANSITION = "illegal_transition"  # 도달 불가 이동 / 장비 미달 산 진입
    INVALID_ITEM_SELECTION = "invalid_item_selection"  # 범위 밖 인덱스 / 취소 / 빈 인벤토리
    ITEM_NOT_SOLD_HERE = "item_not_sold_here"  # 현재 위치 상점에 없는 Template
    INVALID_CHOICE = "invalid_choice"  # 메뉴 번호 범위 밖
    PLAYER_NOT_FOUND = "player_not_found"
    GAME_OVER = "game_over"  # 종료된 세션에 대한 행동
