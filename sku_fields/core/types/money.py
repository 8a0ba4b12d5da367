from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Optional, Union

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額を表すイミュータブルなデータクラス"""
    amount: Decimal
    currency: Optional[Currency] = None

    _default_currency_code: ClassVar[str] = 'USD'

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))
        if self.currency is None:
            object.__setattr__(self, 'currency', Money.default_currency())

    @classmethod
    def default_currency(cls) -> Currency:
        """プロセス全体のデフォルト通貨を取得"""
        return Currency.get_instance(cls._default_currency_code)

    @classmethod
    def set_default_currency(cls, currency: Union[Currency, str]) -> None:
        """プロセス全体のデフォルト通貨を設定"""
        code = currency.code if isinstance(currency, Currency) else currency
        # 不正なコードはここで弾く
        cls._default_currency_code = Currency.get_instance(code).code

    def __repr__(self) -> str:
        """文字列表現"""
        return f"{self.currency} {self.amount:,.2f}"
