"""이벤트 유형 상수

GameEngine이 발행하는 도메인 이벤트.
"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # player
    PLAYER_REGISTERED = "player_registered"
    PLAYER_MOVED = "player_moved"

    # item
    ITEM_PURCHASED = "item_purchased"
    ITEM_USED = "item_used"

    # combat
    COMBAT_RESOLVED = "combat_resolved"

    # engine
    GAME_ENDED = "game_ended"
    TURN_PROCESSED = "turn_processed"
