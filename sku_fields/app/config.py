import os
import logging
import logging.config
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field
from functools import cached_property

import yaml
from babel import Locale, UnknownLocaleError

from ..core.error import ConfigurationError, CurrencyError
from ..core.types.currency import Currency
from ..utils.date import DEFAULT_DATE_FORMAT
from ..utils.number import DEFAULT_DECIMAL_FORMAT


@dataclass
class ConfigOptions:
    """設定オプションのデフォルト値と検証を管理"""
    debug: bool = False

    # 表示設定
    locale: str = 'en_US'
    default_currency: str = 'USD'
    date_format: str = DEFAULT_DATE_FORMAT
    decimal_format: str = DEFAULT_DECIMAL_FORMAT

    # ロギング設定
    logging_config: Dict[str, str] = field(default_factory=lambda: {
        'console_level': 'ERROR',
        'file_level': 'DEBUG',
        'log_dir': 'output/logs',
        'log_file': 'sku_fields.log',
        'log_format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    })


class ConfigManager:
    """フォーマット設定の管理クラス"""

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        env_prefix: str = 'SKU_FIELDS_'
    ):
        """
        設定マネージャを初期化

        Args:
            config_path: 設定ファイルのパス
            env_prefix: 環境変数の接頭辞

        Raises:
            ConfigurationError: 設定の読み込みまたは検証に失敗した場合
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.env_prefix = env_prefix

        # デフォルトの設定
        self._config_options = ConfigOptions()

        # 設定ファイルのロード
        if config_path:
            self._load_config_file(config_path)

        # 環境変数での上書き
        self._override_from_env()

        # 設定の検証
        self._validate_config()

    def _load_config_file(self, config_path: Union[str, Path]) -> None:
        """
        設定ファイルから設定をロード

        Args:
            config_path: 設定ファイルのパス
        """
        path = Path(config_path)
        if not path.exists():
            self.logger.warning(f"設定ファイルが見つかりません: {path}")
            return

        try:
            with path.open('r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"設定ファイルの読み込み中にエラー: {e}")
            raise ConfigurationError(f"設定ファイルの読み込みに失敗: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigurationError(f"設定ファイルの形式が不正です: {path}")
        self._merge_config(file_config)

    def _merge_config(self, file_config: Dict[str, Any]) -> None:
        """
        ファイルからの設定とデフォルト設定をマージ

        Args:
            file_config: ファイルから読み込んだ設定
        """
        if 'debug' in file_config:
            self._config_options.debug = bool(file_config['debug'])

        # 表示設定
        for key in ('locale', 'default_currency', 'date_format', 'decimal_format'):
            if key in file_config:
                setattr(self._config_options, key, str(file_config[key]))

        # ロギング設定
        if 'logging' in file_config:
            logging_config = file_config['logging'] or {}
            self._config_options.logging_config.update({
                k: v for k, v in logging_config.items()
                if k in self._config_options.logging_config
            })

    def _override_from_env(self) -> None:
        """
        環境変数による設定の上書き
        """
        debug_env = os.getenv(f'{self.env_prefix}DEBUG')
        if debug_env is not None:
            self._config_options.debug = debug_env.lower() in ['true', '1', 'yes']

        locale_env = os.getenv(f'{self.env_prefix}LOCALE')
        if locale_env:
            self._config_options.locale = locale_env

        currency_env = os.getenv(f'{self.env_prefix}DEFAULT_CURRENCY')
        if currency_env:
            self._config_options.default_currency = currency_env

        date_format_env = os.getenv(f'{self.env_prefix}DATE_FORMAT')
        if date_format_env:
            self._config_options.date_format = date_format_env

    def _validate_config(self) -> None:
        """
        設定の検証

        Raises:
            ConfigurationError: ロケールまたは通貨が不正な場合
        """
        try:
            Locale.parse(self._config_options.locale)
        except (ValueError, UnknownLocaleError) as e:
            raise ConfigurationError(f"ロケールが不正です: {self._config_options.locale}") from e

        try:
            Currency.get_instance(self._config_options.default_currency)
        except CurrencyError as e:
            raise ConfigurationError(
                f"デフォルト通貨が不正です: {self._config_options.default_currency}"
            ) from e

    @property
    def debug(self) -> bool:
        """デバッグモードのプロパティ"""
        return self._config_options.debug

    @property
    def locale(self) -> Locale:
        """表示ロケール"""
        return Locale.parse(self._config_options.locale)

    @property
    def default_currency(self) -> Currency:
        """デフォルト通貨"""
        return Currency.get_instance(self._config_options.default_currency)

    @property
    def date_format(self) -> str:
        """日付フォーマット"""
        return self._config_options.date_format

    @property
    def decimal_format(self) -> str:
        """数値フォーマット"""
        return self._config_options.decimal_format

    @cached_property
    def logging_config(self) -> Dict[str, str]:
        """ロギング設定"""
        return dict(self._config_options.logging_config)

    def create_logging_config(self) -> Dict[str, Any]:
        """
        ロギング設定を生成

        Returns:
            ロギング設定の辞書
        """
        file_level = 'DEBUG' if self.debug else self.logging_config['file_level']
        return {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'detailed': {
                    'format': self.logging_config['log_format']
                }
            },
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'detailed',
                    'level': self.logging_config['console_level']
                },
                'file': {
                    'class': 'logging.FileHandler',
                    'filename': str(Path(self.logging_config['log_dir']) / self.logging_config['log_file']),
                    'formatter': 'detailed',
                    'level': file_level
                }
            },
            'root': {
                'handlers': ['console', 'file'],
                'level': file_level
            }
        }

    def configure_logging(self) -> None:
        """ロギング設定を適用"""
        Path(self.logging_config['log_dir']).mkdir(parents=True, exist_ok=True)
        logging.config.dictConfig(self.create_logging_config())
