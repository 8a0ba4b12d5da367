from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Optional, Any

class ISku(ABC):
    """skuエンティティの基本インターフェース"""

    @property
    @abstractmethod
    def currency(self) -> Optional[Any]:
        """skuに設定された通貨（未設定の場合None）"""
        pass

class IProduct(ABC):
    """商品エンティティの基本インターフェース"""

    @property
    @abstractmethod
    def default_sku(self) -> Optional[ISku]:
        """商品のデフォルトsku"""
        pass

class IDateFormatter(ABC):
    """日付フォーマッタの基本インターフェース"""

    @abstractmethod
    def format(self, value: date) -> str:
        """日付を文字列に変換"""
        pass

class IDecimalFormatter(ABC):
    """数値フォーマッタの基本インターフェース"""

    @abstractmethod
    def format(self, value: Decimal) -> str:
        """数値を正規形式の文字列に変換"""
        pass
