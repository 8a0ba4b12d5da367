import logging
from typing import Iterable, List, Optional

from ..core.accessor import FieldAccessorRegistry, default_registry
from ..core.constants.field_types import FieldProviderResponse
from ..core.models import ExtractValueRequest, Property
from .base_formatter import BaseFieldFormatter
from .basic_formatter import BasicFieldFormatter
from .money_formatter import MoneyFieldFormatter
from .sku_formatter import SkuFieldFormatter


class FormatterChain:
    """順序付きのフォーマッタリスト

    order の昇順で実行し、同順位は登録順を保ちます。
    HANDLED_BREAK を返したフォーマッタで処理を打ち切ります。
    """

    def __init__(self, formatters: Iterable[BaseFieldFormatter]) -> None:
        # sorted は安定ソート
        self._formatters: List[BaseFieldFormatter] = sorted(formatters, key=lambda f: f.order)
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def formatters(self) -> List[BaseFieldFormatter]:
        """実行順のフォーマッタ一覧"""
        return list(self._formatters)

    def extract(self, request: ExtractValueRequest, property: Property) -> FieldProviderResponse:
        """
        フォーマッタを順に実行してプロパティ値を抽出

        Args:
            request: 値抽出リクエスト
            property: 書き込み先のプロパティ

        Returns:
            最後に得られた処理結果（誰も処理しなかった場合NOT_HANDLED）
        """
        response = FieldProviderResponse.NOT_HANDLED
        for formatter in self._formatters:
            result = formatter.extract(request, property)
            if result is FieldProviderResponse.NOT_HANDLED:
                continue

            response = result
            if result is FieldProviderResponse.HANDLED_BREAK:
                self.logger.debug(f"{property.name} を {formatter!r} が処理")
                break
        return response


def default_chain(accessors: Optional[FieldAccessorRegistry] = None) -> FormatterChain:
    """標準のフォーマッタチェーンを作成"""
    accessors = accessors or default_registry()
    return FormatterChain([
        SkuFieldFormatter(accessors),
        MoneyFieldFormatter(accessors),
        BasicFieldFormatter(accessors),
    ])
