# app/context.py

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from babel import Locale

from ..core.types.currency import Currency
from ..core.types.money import Money
from ..utils.date import DateFormatter, DEFAULT_DATE_FORMAT
from ..utils.number import DecimalFormatter, DEFAULT_DECIMAL_FORMAT
from .config import ConfigManager


@dataclass(frozen=True)
class DataFormatProvider:
    """日付・数値フォーマッタを提供するクラス"""
    date_pattern: str = DEFAULT_DATE_FORMAT
    decimal_pattern: str = DEFAULT_DECIMAL_FORMAT

    def get_simple_date_formatter(self) -> DateFormatter:
        """日付フォーマッタを取得"""
        return DateFormatter(self.date_pattern)

    def get_decimal_formatter(self) -> DecimalFormatter:
        """正規形式の数値フォーマッタを取得"""
        return DecimalFormatter(self.decimal_pattern)


@dataclass(frozen=True)
class FormattingContext:
    """
    リクエスト単位のフォーマットコンテキスト

    ロケール、デフォルト通貨、フォーマッタを保持し、
    抽出リクエストと共に明示的に受け渡されます。
    """
    locale: Locale = field(default_factory=lambda: Locale.parse('en_US'))
    default_currency: Currency = field(default_factory=Money.default_currency)
    data_format_provider: DataFormatProvider = field(default_factory=DataFormatProvider)

    @classmethod
    def from_config(cls, config: ConfigManager) -> 'FormattingContext':
        """
        設定からコンテキストを作成

        Args:
            config: 設定マネージャ

        Returns:
            作成したコンテキスト
        """
        return cls(
            locale=config.locale,
            default_currency=config.default_currency,
            data_format_provider=DataFormatProvider(
                date_pattern=config.date_format,
                decimal_pattern=config.decimal_format,
            ),
        )

    def for_locale(self, locale: Optional[Union[Locale, str]]) -> 'FormattingContext':
        """ロケールだけを差し替えたコンテキストを返す"""
        if locale is None:
            return self
        if not isinstance(locale, Locale):
            locale = Locale.parse(locale)
        return replace(self, locale=locale)
