"""아이템 시스템 Core - 순수 Python"""

from .models import ItemCategory, ItemTemplate, InventoryItem
from .registry import TemplateRegistry
from .catalog import (
    HEALTH_POTION,
    SWORD,
    STEEL_SWORD,
    WOODEN_SHIELD,
    IRON_SHIELD,
    build_default_registry,
)
from .inventory import Inventory

__all__ = [
    "ItemCategory",
    "ItemTemplate",
    "InventoryItem",
    "TemplateRegistry",
    "HEALTH_POTION",
    "SWORD",
    "STEEL_SWORD",
    "WOODEN_SHIELD",
    "IRON_SHIELD",
    "build_default_registry",
    "Inventory",
]
