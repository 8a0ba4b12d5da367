from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, TYPE_CHECKING

from .constants.field_types import SupportedFieldType
from .interfaces import ISku, IProduct
from .types.money import Money

if TYPE_CHECKING:
    from ..app.context import FormattingContext


def qualified_name(cls: type) -> str:
    """クラスの完全修飾名を取得"""
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass
class CatalogCurrency:
    """永続化された通貨情報"""
    currency_code: str
    friendly_name: Optional[str] = None
    default_flag: bool = False


@dataclass
class Sku(ISku):
    """商品バリエーション（sku）を表すデータクラス"""
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    currency: Optional[CatalogCurrency] = None
    retail_price: Optional[Money] = None
    sale_price: Optional[Money] = None
    cost: Optional[Money] = None
    active_start_date: Optional[datetime] = None
    active_end_date: Optional[datetime] = None
    quantity_available: Optional[int] = None
    taxable: Optional[bool] = None
    attributes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Product(IProduct):
    """商品を表すデータクラス"""
    id: Optional[int] = None
    name: Optional[str] = None
    manufacturer: Optional[str] = None
    default_sku: Optional[Sku] = None


@dataclass(frozen=True)
class FieldMetadata:
    """プロパティのメタデータ"""
    field_type: SupportedFieldType = SupportedFieldType.GENERIC
    target_class: Optional[str] = None


@dataclass
class Property:
    """管理画面に表示するプロパティ

    フォーマッタは value と display_value のみを書き込みます。
    """
    name: str
    value: Optional[str] = None
    display_value: Optional[str] = None


@dataclass
class ExtractValueRequest:
    """値抽出リクエスト"""
    entity: Any
    requested_value: Any
    metadata: FieldMetadata
    context: Optional['FormattingContext'] = None


SKU_TARGET_CLASSES = frozenset({qualified_name(Sku), qualified_name(ISku)})
