"""
skuフィールドのフォーマッタ

skuに設定された通貨を考慮して、価格などのフィールドを
管理画面向けの表示値にフォーマットします。
"""

from typing import Any, Optional

from ..core.constants import priority
from ..core.constants.field_types import (
    DEFAULT_SKU_PREFIX,
    MAP_FIELD_SEPARATOR,
    FieldProviderResponse,
    SupportedFieldType,
)
from ..core.interfaces import ISku, IProduct
from ..core.models import ExtractValueRequest, Property, SKU_TARGET_CLASSES
from ..core.types.currency import Currency
from .money_formatter import MoneyFieldFormatter


class SkuFieldFormatter(MoneyFieldFormatter):
    """skuで宣言された全フィールドを扱うフォーマッタ

    汎用の金額フォーマッタより先に実行され、sku単位の通貨解決を優先させます。
    """

    @property
    def order(self) -> int:
        return priority.MONEY - 1000

    def can_handle(self, request: ExtractValueRequest, property: Property) -> bool:
        """
        skuで宣言されたプロパティかを判定

        マップ型プロパティのサブフィールドは別のフォーマッタが扱うため対象外です。
        """
        return (
            request.metadata.target_class in SKU_TARGET_CLASSES
            and MAP_FIELD_SEPARATOR not in property.name
        )

    def extract(self, request: ExtractValueRequest, property: Property) -> FieldProviderResponse:
        if not self.can_handle(request, property):
            return FieldProviderResponse.NOT_HANDLED

        getter_value = self._get_getter_value(request, property)
        actual_value = request.requested_value

        property.value = self.format_value(actual_value, request, property)
        property.display_value = self.format_display_value(getter_value, request, property)
        self.logger.debug(f"skuフィールドをフォーマット: {property.name} -> {property.display_value}")

        return FieldProviderResponse.HANDLED_BREAK

    def format_value(self, value: Any, request: ExtractValueRequest, property: Property) -> Optional[str]:
        if value is None:
            return None
        if request.metadata.field_type is SupportedFieldType.MONEY:
            return super().format_value(self._to_decimal(value), request, property)
        return self._format_plain(value, request)

    def format_display_value(self, value: Any, request: ExtractValueRequest, property: Property) -> Optional[str]:
        if value is None:
            return None
        if request.metadata.field_type is SupportedFieldType.MONEY:
            return super().format_display_value(self._to_decimal(value), request, property)
        return self._format_plain(value, request)

    def is_default_sku_property(self, request: ExtractValueRequest, property: Property) -> bool:
        """Productのデフォルトskuを指すプロパティかを判定"""
        return property.name.startswith(DEFAULT_SKU_PREFIX)

    def get_currency(self, request: ExtractValueRequest, property: Property) -> Currency:
        """
        表示通貨を解決

        Productのデフォルトskuのプロパティであればそのskuの通貨、
        sku自身であればskuの通貨を使用し、未設定の場合はデフォルト通貨に戻ります。
        """
        entity = request.entity
        catalog_currency = None
        if isinstance(entity, IProduct) and self.is_default_sku_property(request, property):
            default_sku = entity.default_sku
            if default_sku is not None:
                catalog_currency = default_sku.currency
        elif isinstance(entity, ISku):
            catalog_currency = entity.currency

        if catalog_currency is None:
            self.logger.debug(f"通貨が未設定のためデフォルト通貨を使用: {property.name}")
            return self._get_context(request).default_currency
        return Currency.get_instance(catalog_currency.currency_code)
