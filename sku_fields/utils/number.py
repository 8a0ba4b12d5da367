from decimal import Decimal
from typing import Any, Union

from babel import Locale
from babel.numbers import format_decimal

from ..core.interfaces import IDecimalFormatter

DEFAULT_DECIMAL_FORMAT = '0.########'

# 正規形式はロケールに依存させない
CANONICAL_LOCALE = 'en_US'

class DecimalFormatter(IDecimalFormatter):
    """CLDRパターンで数値を正規形式の文字列にフォーマット"""

    def __init__(
        self,
        pattern: str = DEFAULT_DECIMAL_FORMAT,
        locale: Union[Locale, str] = CANONICAL_LOCALE
    ) -> None:
        self.pattern = pattern
        self.locale = locale

    def format(self, value: Any) -> str:
        """数値を文字列に変換"""
        decimal_value = value if isinstance(value, Decimal) else Decimal(str(value))
        return format_decimal(decimal_value, format=self.pattern, locale=self.locale)

    def __repr__(self) -> str:
        return f"DecimalFormatter({self.pattern!r})"
