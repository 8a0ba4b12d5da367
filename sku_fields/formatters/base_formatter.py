from abc import ABC, abstractmethod
from typing import Any, Optional
import logging

from ..app.context import FormattingContext
from ..core.accessor import FieldAccessorRegistry, default_registry
from ..core.constants.field_types import FieldProviderResponse
from ..core.error import FieldAccessError, FormattingContextError, PersistenceError
from ..core.models import ExtractValueRequest, Property
from ..utils.date import is_date_like


class BaseFieldFormatter(ABC):
    """フィールド値フォーマッタの基底クラス

    全ての具象フォーマッタはこのクラスを継承し、
    対象判定と値の抽出を実装します。

    Attributes:
        accessors: プロパティ値の取得に使用するアクセサレジストリ
        logger: ロガーインスタンス
    """

    def __init__(self, accessors: Optional[FieldAccessorRegistry] = None) -> None:
        self.accessors = accessors or default_registry()
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def order(self) -> int:
        """実行順序（小さい値ほど先に実行）"""
        pass

    @abstractmethod
    def can_handle(self, request: ExtractValueRequest, property: Property) -> bool:
        """このフォーマッタが対象とするプロパティかを判定"""
        pass

    @abstractmethod
    def extract(self, request: ExtractValueRequest, property: Property) -> FieldProviderResponse:
        """
        プロパティの値と表示値を抽出

        Args:
            request: 値抽出リクエスト
            property: 書き込み先のプロパティ

        Returns:
            処理結果

        Raises:
            PersistenceError: 値の取得に失敗した場合
        """
        pass

    def _get_context(self, request: ExtractValueRequest) -> FormattingContext:
        """リクエストのコンテキストを取得"""
        if request.context is None:
            raise FormattingContextError(
                "フォーマットコンテキストが設定されていません",
                {'entity': type(request.entity).__name__},
            )
        return request.context

    def _format_plain(self, value: Any, request: ExtractValueRequest) -> str:
        """金額以外の値をフォーマット"""
        if isinstance(value, bool):
            return str(value).lower()
        if is_date_like(value):
            formatter = self._get_context(request).data_format_provider.get_simple_date_formatter()
            return formatter.format(value)
        return str(value)

    def _get_getter_value(self, request: ExtractValueRequest, property: Property) -> Any:
        """エンティティの現在値を取得"""
        try:
            return self.accessors.get_value(request.entity, property.name)
        except FieldAccessError as e:
            self.logger.error(f"プロパティ値の取得に失敗: {property.name}: {e}")
            raise PersistenceError(
                f"プロパティ値の取得に失敗: {property.name}",
                {'entity_type': e.entity_type, 'property_name': e.property_name},
            ) from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(order={self.order})"
