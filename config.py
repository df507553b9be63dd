#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MindfulSpace Bot - Configuration
Centralized environment-driven configuration with validation
"""

import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import pytz


class Environment(Enum):
    """Runtime environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(Enum):
    """Logging levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class StorageConfig:
    """Per-user JSON storage"""
    data_dir: Path
    backup_dir: Path
    mood_history_limit: int = 30
    journal_limit: int = 50


@dataclass
class TelegramConfig:
    """Telegram bot"""
    bot_token: str
    flood_interval: float = 1.0


@dataclass
class WellnessConfig:
    """Mood check-in behaviour"""
    timezone: str = "Asia/Kolkata"
    history_days: int = 7


@dataclass
class ServerConfig:
    """Health check server"""
    host: str = "0.0.0.0"
    port: int = 8080
    health_check_enabled: bool = False


def _env_bool(key: str, default: str) -> bool:
    return os.getenv(key, default).lower() == 'true'


class BotConfig:
    """Main configuration object"""

    def __init__(self):
        self._errors = []
        self.environment = self._parse(Environment, 'ENVIRONMENT', 'development')
        self._load_config()
        self._validate_config()

    def _load_config(self):
        """Load configuration from environment variables"""

        self.telegram = TelegramConfig(
            bot_token=self._get_required_env('BOT_TOKEN'),
            flood_interval=self._number(float, 'FLOOD_INTERVAL', 1.0)
        )

        self.log_dir = Path(os.getenv('LOG_DIR', 'logs'))

        self.storage = StorageConfig(
            data_dir=Path(os.getenv('DATA_DIR', 'data')),
            backup_dir=Path(os.getenv('BACKUP_DIR', 'backups')),
            mood_history_limit=self._number(int, 'MOOD_HISTORY_LIMIT', 30),
            journal_limit=self._number(int, 'JOURNAL_LIMIT', 50)
        )

        self.wellness = WellnessConfig(
            timezone=os.getenv('TIMEZONE', 'Asia/Kolkata'),
            history_days=self._number(int, 'HISTORY_DAYS', 7)
        )

        self.server = ServerConfig(
            host=os.getenv('HOST', '0.0.0.0'),
            port=self._number(int, 'PORT', 8080),
            health_check_enabled=_env_bool('HEALTH_CHECK', 'false')
        )

        self.log_level = self._parse(LogLevel, 'LOG_LEVEL', 'INFO')
        self.log_to_file = _env_bool('LOG_TO_FILE', 'true')
        self.log_format = os.getenv(
            'LOG_FORMAT',
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        )

    def _get_required_env(self, key: str) -> str:
        value = os.getenv(key)
        if not value:
            self._errors.append(f"Required environment variable {key} is not set")
            return ""
        return value

    def _number(self, cast, key: str, default):
        raw = os.getenv(key)
        if raw is None:
            return default
        try:
            return cast(raw)
        except ValueError:
            self._errors.append(f"{key} must be a number, got {raw!r}")
            return default

    def _parse(self, enum_cls, key: str, default: str):
        raw = os.getenv(key, default)
        try:
            return enum_cls(raw)
        except ValueError:
            self._errors.append(f"{key} has unsupported value {raw!r}")
            return enum_cls(default)

    def _validate_config(self):
        errors = self._errors

        if self.wellness.timezone not in pytz.all_timezones_set:
            errors.append(f"Unknown TIMEZONE {self.wellness.timezone!r}")

        if self.storage.mood_history_limit < 1:
            errors.append("MOOD_HISTORY_LIMIT must be positive")
        if self.storage.journal_limit < 1:
            errors.append("JOURNAL_LIMIT must be positive")
        if not 1 <= self.wellness.history_days <= self.storage.mood_history_limit:
            errors.append("HISTORY_DAYS must be between 1 and MOOD_HISTORY_LIMIT")
        if self.telegram.flood_interval < 0:
            errors.append("FLOOD_INTERVAL must not be negative")

        if self.server.health_check_enabled and not 1024 <= self.server.port <= 65535:
            errors.append(f"Port {self.server.port} is out of range (1024-65535)")

        if errors:
            raise ValueError("Configuration errors:\n" + "\n".join(f"• {error}" for error in errors))

    def ensure_directories(self):
        for directory in [self.storage.data_dir, self.storage.backup_dir, self.log_dir]:
            directory.mkdir(parents=True, exist_ok=True)

    def get_logging_config(self) -> Dict[str, Any]:
        """dictConfig mapping for logging.config"""
        handlers = ['console']
        if self.log_to_file:
            handlers.append('file')

        config: Dict[str, Any] = {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': self.log_format,
                    'datefmt': '%Y-%m-%d %H:%M:%S'
                }
            },
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'level': self.log_level.value,
                    'formatter': 'default',
                    'stream': sys.stdout
                }
            },
            'loggers': {
                '': {
                    'level': self.log_level.value,
                    'handlers': handlers
                },
                'httpx': {
                    'level': 'WARNING'
                },
                'telegram': {
                    'level': 'WARNING'
                }
            }
        }
        if self.log_to_file:
            config['handlers']['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': self.log_level.value,
                'formatter': 'default',
                'filename': str(self.log_dir / f"bot_{self.environment.value}.log"),
                'maxBytes': 10485760,  # 10MB
                'backupCount': 5,
                'encoding': 'utf-8'
            }
        return config

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def to_dict(self) -> Dict[str, Any]:
        """Configuration summary without secrets"""
        return {
            'environment': self.environment.value,
            'bot_token': self.telegram.bot_token[:10] + "...",
            'data_dir': str(self.storage.data_dir),
            'timezone': self.wellness.timezone,
            'mood_history_limit': self.storage.mood_history_limit,
            'journal_limit': self.storage.journal_limit,
            'health_check': self.server.health_check_enabled,
            'log_level': self.log_level.value
        }


_config: Optional[BotConfig] = None


def get_config() -> BotConfig:
    """Lazily created process-wide configuration"""
    global _config
    if _config is None:
        _config = BotConfig()
    return _config


__all__ = [
    'BotConfig',
    'get_config',
    'Environment',
    'LogLevel',
    'StorageConfig',
    'TelegramConfig',
    'WellnessConfig',
    'ServerConfig'
]
