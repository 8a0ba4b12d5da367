from enum import Enum, unique


# マップ型プロパティのサブフィールドを区切るトークン
MAP_FIELD_SEPARATOR = '---'

# Productのデフォルトskuを指すプロパティ名の接頭辞
DEFAULT_SKU_PREFIX = 'defaultSku'


@unique
class SupportedFieldType(Enum):
    """管理画面でサポートするフィールド型"""
    MONEY = 'MONEY'
    DATE = 'DATE'
    TIMESTAMP = 'TIMESTAMP'
    STRING = 'STRING'
    INTEGER = 'INTEGER'
    DECIMAL = 'DECIMAL'
    BOOLEAN = 'BOOLEAN'
    GENERIC = 'GENERIC'

    @classmethod
    def from_str(cls, value: str) -> 'SupportedFieldType':
        """文字列からフィールド型を取得（不明な場合はGENERIC）"""
        try:
            return cls[value.upper().strip()]
        except (KeyError, AttributeError):
            return cls.GENERIC


@unique
class FieldProviderResponse(Enum):
    """フォーマッタの処理結果"""
    HANDLED = 'HANDLED'
    NOT_HANDLED = 'NOT_HANDLED'
    HANDLED_BREAK = 'HANDLED_BREAK'
