# core/types/currency.py

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Dict, Optional, Union

from babel import Locale
from babel.numbers import format_currency, is_currency

from ..error import CurrencyError


@dataclass(frozen=True)
class Currency:
    """実行時の通貨インスタンスを表すイミュータブルなデータクラス

    インスタンスは get_instance() で取得し、通貨コードごとに共有されます。
    """
    code: str

    _instances: ClassVar[Dict[str, 'Currency']] = {}

    @classmethod
    def get_instance(cls, code: Optional[str]) -> 'Currency':
        """
        通貨コードから通貨インスタンスを取得

        Args:
            code: ISO 4217 通貨コード

        Returns:
            対応する通貨インスタンス

        Raises:
            CurrencyError: 通貨コードが不正な場合
        """
        if not code:
            raise CurrencyError("通貨コードが指定されていません", code)

        normalized = code.upper().strip()
        cached = cls._instances.get(normalized)
        if cached is not None:
            return cached

        if not is_currency(normalized):
            raise CurrencyError("未知の通貨コードです", code)

        instance = cls(code=normalized)
        cls._instances[normalized] = instance
        return instance

    def format_amount(
        self,
        amount: Union[Decimal, float, int],
        locale: Union[Locale, str] = 'en_US'
    ) -> str:
        """
        金額をロケールの通貨形式でフォーマット

        Args:
            amount: フォーマットする金額
            locale: 表示ロケール

        Returns:
            フォーマットされた金額文字列
        """
        try:
            decimal_amount = amount if isinstance(amount, Decimal) else Decimal(str(amount))
            return format_currency(decimal_amount, self.code, locale=locale)
        except (TypeError, ValueError, ArithmeticError) as e:
            raise CurrencyError(f"金額のフォーマットに失敗: {amount}", self.code) from e

    def __str__(self) -> str:
        """通貨コードを文字列として返す"""
        return self.code

    def __repr__(self) -> str:
        """開発者向けの文字列表現"""
        return f"Currency({self.code})"
