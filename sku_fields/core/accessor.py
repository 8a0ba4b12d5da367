"""
エンティティのプロパティ値を取得するアクセサレジストリ

管理画面のプロパティ名（``retailPrice`` や ``defaultSku.retailPrice`` など）を
エンティティ型ごとに登録されたゲッターへ対応付けます。
"""

import logging
from operator import attrgetter
from typing import Any, Callable, Dict, Optional

from .error import FieldAccessError
from .models import Sku, Product

Getter = Callable[[Any], Any]

PATH_SEPARATOR = '.'


class FieldAccessorRegistry:
    """エンティティ型とプロパティ名をキーにしたゲッターの登録簿"""

    def __init__(self) -> None:
        self._accessors: Dict[type, Dict[str, Getter]] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

    def register(self, entity_type: type, name: str, getter: Getter) -> None:
        """
        ゲッターを登録

        Args:
            entity_type: エンティティ型
            name: プロパティ名
            getter: エンティティを受け取り値を返す関数
        """
        self._accessors.setdefault(entity_type, {})[name] = getter

    def register_attributes(self, entity_type: type, mapping: Dict[str, str]) -> None:
        """プロパティ名と属性名の対応をまとめて登録"""
        for name, attribute in mapping.items():
            self.register(entity_type, name, attrgetter(attribute))

    def find_getter(self, entity_type: type, name: str) -> Optional[Getter]:
        """MROを辿ってゲッターを検索"""
        for klass in entity_type.__mro__:
            getter = self._accessors.get(klass, {}).get(name)
            if getter is not None:
                return getter
        return None

    def get_value(self, entity: Any, property_name: str) -> Any:
        """
        エンティティからプロパティ値を取得

        ドット区切りの名前はセグメントごとに解決し、
        途中の値がNoneの場合はNoneを返します。

        Args:
            entity: 対象エンティティ
            property_name: プロパティ名

        Returns:
            プロパティ値

        Raises:
            FieldAccessError: ゲッターが見つからない、または取得に失敗した場合
        """
        current = entity
        for segment in property_name.split(PATH_SEPARATOR):
            if current is None:
                return None
            current = self._get_segment(current, segment, property_name)
        return current

    def _get_segment(self, entity: Any, segment: str, property_name: str) -> Any:
        entity_type = type(entity)
        getter = self.find_getter(entity_type, segment)
        if getter is None:
            raise FieldAccessError(
                f"プロパティのゲッターが見つかりません: {segment}",
                entity_type.__name__,
                property_name,
            )

        try:
            return getter(entity)
        except Exception as e:
            self.logger.error(f"プロパティ値の取得中にエラー: {entity_type.__name__}.{segment}: {e}")
            raise FieldAccessError(
                f"プロパティ値の取得に失敗: {segment}",
                entity_type.__name__,
                property_name,
            ) from e


SKU_PROPERTIES = {
    'id': 'id',
    'name': 'name',
    'description': 'description',
    'currency': 'currency',
    'retailPrice': 'retail_price',
    'salePrice': 'sale_price',
    'cost': 'cost',
    'activeStartDate': 'active_start_date',
    'activeEndDate': 'active_end_date',
    'quantityAvailable': 'quantity_available',
    'taxable': 'taxable',
}

PRODUCT_PROPERTIES = {
    'id': 'id',
    'name': 'name',
    'manufacturer': 'manufacturer',
    'defaultSku': 'default_sku',
}


def default_registry() -> FieldAccessorRegistry:
    """Sku・Product用のゲッターを登録済みのレジストリを作成"""
    registry = FieldAccessorRegistry()
    registry.register_attributes(Sku, SKU_PROPERTIES)
    registry.register_attributes(Product, PRODUCT_PROPERTIES)
    return registry
