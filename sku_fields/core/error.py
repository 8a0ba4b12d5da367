from typing import Optional, Dict, Any


class FieldFormattingError(Exception):
    """
    フィールドフォーマット処理の基本例外クラス

    パッケージ固有の全ての例外の基底クラスとして機能し、
    エラーの詳細情報を構造化された形で保持します。
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """
        例外を初期化

        Args:
            message: エラーメッセージ
            details: エラーの詳細情報（オプション）
        """
        super().__init__(message)
        self.details = details or {}


class PersistenceError(FieldFormattingError):
    """
    フォーマッタ処理の例外

    値の取得に失敗した場合など、フォーマッタ単位のエラーを
    一律にこの例外で表現します。元の例外は __cause__ に保持されます。
    """

    pass


class FieldAccessError(FieldFormattingError):
    """
    フィールドアクセスの例外

    エンティティからのプロパティ値の取得に関するエラーを
    表現します。
    """

    def __init__(
        self,
        message: str,
        entity_type: str,
        property_name: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        例外を初期化

        Args:
            message: エラーメッセージ
            entity_type: 対象エンティティの型名
            property_name: 取得しようとしたプロパティ名
            details: エラーの詳細情報（オプション）
        """
        super().__init__(message, details)
        self.entity_type = entity_type
        self.property_name = property_name


class CurrencyError(FieldFormattingError):
    """
    通貨関連の例外

    通貨コードの解決に失敗した場合のエラーを表現します。
    """

    def __init__(self, message: str, currency_code: Optional[str], details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details)
        self.currency_code = currency_code

    def __str__(self) -> str:
        """エラーの文字列表現を返す"""
        return f"{super().__str__()} [{self.currency_code}]"


class FormattingContextError(FieldFormattingError):
    """フォーマットコンテキストが設定されていない場合の例外"""

    pass


class ConfigurationError(FieldFormattingError):
    """
    設定関連の例外

    設定の読み込みや検証時に発生するエラーを
    表現します。
    """

    pass
