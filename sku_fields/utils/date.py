from datetime import date, datetime
from typing import Any

from ..core.interfaces import IDateFormatter


DEFAULT_DATE_FORMAT = '%Y.%m.%d %H:%M:%S'

def is_date_like(value: Any) -> bool:
    """
    日付・日時として扱う値かを判定

    Args:
        value: 判定対象の値

    Returns:
        date / datetime の場合True
    """
    return isinstance(value, (date, datetime))

class DateFormatter(IDateFormatter):
    """strftime形式のパターンで日付をフォーマット"""

    def __init__(self, pattern: str = DEFAULT_DATE_FORMAT) -> None:
        self.pattern = pattern

    def format(self, value: Any) -> str:
        """
        日付を文字列に変換

        Args:
            value: date / datetime

        Returns:
            フォーマットされた日付文字列

        Raises:
            TypeError: 日付以外の値が渡された場合
        """
        if not is_date_like(value):
            raise TypeError(f"日付型ではありません: {type(value).__name__}")
        return value.strftime(self.pattern)

    def __repr__(self) -> str:
        return f"DateFormatter({self.pattern!r})"
