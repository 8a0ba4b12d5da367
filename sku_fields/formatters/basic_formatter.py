from typing import Any, Optional

from ..core.constants import priority
from ..core.constants.field_types import FieldProviderResponse
from ..core.models import ExtractValueRequest, Property
from .base_formatter import BaseFieldFormatter


class BasicFieldFormatter(BaseFieldFormatter):
    """他のフォーマッタが扱わなかった全フィールドのフォーマッタ"""

    @property
    def order(self) -> int:
        return priority.BASIC

    def can_handle(self, request: ExtractValueRequest, property: Property) -> bool:
        return True

    def extract(self, request: ExtractValueRequest, property: Property) -> FieldProviderResponse:
        getter_value = self._get_getter_value(request, property)
        property.value = self.format_value(request.requested_value, request)
        property.display_value = self.format_value(getter_value, request)
        return FieldProviderResponse.HANDLED_BREAK

    def format_value(self, value: Any, request: ExtractValueRequest) -> Optional[str]:
        if value is None:
            return None
        return self._format_plain(value, request)
