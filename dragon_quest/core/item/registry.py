"""아이템 원형 저장소 - template_id 기반 조회"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .models import ItemTemplate

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """
    아이템 원형 저장소.
    등록 순서를 보존한다 (상점 메뉴 순서와 동일).
    """

    def __init__(self, templates: Iterable[ItemTemplate] = ()) -> None:
        self._templates: dict[str, ItemTemplate] = {}
        for template in templates:
            self.register(template)

    def register(self, template: ItemTemplate) -> None:
        """Template 등록.
        이미 존재하는 template_id면 경고 로그 후 덮어쓴다.
        """
        if template.template_id in self._templates:
            logger.warning("Overwriting existing template: %s", template.template_id)
        self._templates[template.template_id] = template

    def get(self, template_id: str) -> Optional[ItemTemplate]:
        """O(1) 조회. 없으면 None."""
        return self._templates.get(template_id)

    def count(self) -> int:
        """등록된 Template 수."""
        return len(self._templates)
