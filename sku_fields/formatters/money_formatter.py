from decimal import Decimal
from typing import Any, Optional

from babel import Locale

from ..core.constants import priority
from ..core.constants.field_types import FieldProviderResponse, SupportedFieldType
from ..core.models import ExtractValueRequest, Property
from ..core.types.currency import Currency
from ..core.types.money import Money
from .base_formatter import BaseFieldFormatter


class MoneyFieldFormatter(BaseFieldFormatter):
    """金額フィールドのフォーマッタ

    保存値は正規形式の数値文字列、表示値はロケールに応じた通貨表記になります。
    通貨はコンテキストのデフォルト通貨を使用します。
    """

    @property
    def order(self) -> int:
        return priority.MONEY

    def can_handle(self, request: ExtractValueRequest, property: Property) -> bool:
        return request.metadata.field_type is SupportedFieldType.MONEY

    def extract(self, request: ExtractValueRequest, property: Property) -> FieldProviderResponse:
        if not self.can_handle(request, property):
            return FieldProviderResponse.NOT_HANDLED

        getter_value = self._get_getter_value(request, property)
        property.value = self.format_value(request.requested_value, request, property)
        property.display_value = self.format_display_value(getter_value, request, property)
        return FieldProviderResponse.HANDLED_BREAK

    def format_value(self, value: Any, request: ExtractValueRequest, property: Property) -> Optional[str]:
        """
        保存用の正規形式にフォーマット

        Args:
            value: 金額（Decimal または Money）
            request: 値抽出リクエスト
            property: 対象プロパティ

        Returns:
            数値文字列（値がNoneの場合None）
        """
        if value is None:
            return None
        formatter = self._get_context(request).data_format_provider.get_decimal_formatter()
        return formatter.format(self._to_decimal(value))

    def format_display_value(self, value: Any, request: ExtractValueRequest, property: Property) -> Optional[str]:
        """
        表示用の通貨形式にフォーマット

        Args:
            value: 金額（Decimal または Money）
            request: 値抽出リクエスト
            property: 対象プロパティ

        Returns:
            通貨表記の文字列（値がNoneの場合None）
        """
        if value is None:
            return None
        currency = self.get_currency(request, property)
        locale = self.get_locale(request, property)
        return currency.format_amount(self._to_decimal(value), locale=locale)

    def get_locale(self, request: ExtractValueRequest, property: Property) -> Locale:
        """表示ロケールを取得"""
        return self._get_context(request).locale

    def get_currency(self, request: ExtractValueRequest, property: Property) -> Currency:
        """表示通貨を取得"""
        return self._get_context(request).default_currency

    @staticmethod
    def _to_decimal(value: Any) -> Decimal:
        """金額をDecimalに変換"""
        if isinstance(value, Money):
            return value.amount
        if isinstance(value, Decimal):
            return value
        return Decimal(str(value))
