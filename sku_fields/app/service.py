# app/service.py

import logging
from typing import Any, Optional, Union

from babel import Locale

from ..core.accessor import FieldAccessorRegistry, default_registry
from ..core.constants.field_types import DEFAULT_SKU_PREFIX, SupportedFieldType
from ..core.interfaces import IProduct
from ..core.models import ExtractValueRequest, FieldMetadata, Property, Sku, qualified_name
from ..core.types.money import Money
from ..formatters.chain import FormatterChain, default_chain
from .config import ConfigManager
from .context import FormattingContext


class FieldFormattingService:
    """
    フィールドフォーマット処理の窓口となるクラス

    このクラスは以下の責務を持ちます：
    - 設定からのコンテキスト・アクセサ・フォーマッタチェーンの構築
    - プロパティ単位の抽出リクエストの組み立てと実行
    """

    def __init__(
        self,
        config: Optional[ConfigManager] = None,
        accessors: Optional[FieldAccessorRegistry] = None,
        chain: Optional[FormatterChain] = None
    ) -> None:
        """
        サービスを初期化

        Args:
            config: 設定マネージャ（省略時はデフォルト設定）
            accessors: アクセサレジストリ
            chain: フォーマッタチェーン
        """
        self.config = config or ConfigManager()
        Money.set_default_currency(self.config.default_currency)
        self.accessors = accessors or default_registry()
        self.chain = chain or default_chain(self.accessors)
        self.context = FormattingContext.from_config(self.config)
        self.logger = logging.getLogger(self.__class__.__name__)
        self.logger.debug(f"フォーマッタチェーン: {self.chain.formatters}")

    def format_property(
        self,
        entity: Any,
        property_name: str,
        requested_value: Any,
        field_type: Union[SupportedFieldType, str] = SupportedFieldType.GENERIC,
        target_class: Optional[str] = None,
        locale: Optional[Union[Locale, str]] = None
    ) -> Property:
        """
        エンティティのプロパティをフォーマット

        Args:
            entity: 対象エンティティ
            property_name: プロパティ名
            requested_value: 保存予定の値
            field_type: フィールド型
            target_class: プロパティを宣言したクラスの完全修飾名
            locale: リクエスト単位で上書きするロケール

        Returns:
            value と display_value が設定されたプロパティ

        Raises:
            PersistenceError: プロパティ値の取得に失敗した場合
        """
        if isinstance(field_type, str):
            field_type = SupportedFieldType.from_str(field_type)

        metadata = FieldMetadata(
            field_type=field_type,
            target_class=target_class or self._resolve_target_class(entity, property_name),
        )
        request = ExtractValueRequest(
            entity=entity,
            requested_value=requested_value,
            metadata=metadata,
            context=self.context.for_locale(locale),
        )
        property = Property(name=property_name)

        response = self.chain.extract(request, property)
        self.logger.debug(
            f"{type(entity).__name__}.{property_name}: {response.name} "
            f"(value={property.value!r}, display_value={property.display_value!r})"
        )
        return property

    @staticmethod
    def _resolve_target_class(entity: Any, property_name: str) -> str:
        """プロパティを宣言したクラスを推定"""
        if isinstance(entity, IProduct) and property_name.startswith(DEFAULT_SKU_PREFIX):
            return qualified_name(Sku)
        return qualified_name(type(entity))
