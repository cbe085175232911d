"""
Configuration for the text chunking engine.

Settings are loaded from environment variables (and a local .env file)
with defaults per environment. Explicit constructor arguments passed to
TextChunker always win over these values.
"""

import os
from typing import Dict, Any, Optional
from dataclasses import dataclass
from enum import Enum

from dotenv import load_dotenv

from textchunker.exceptions import ConfigurationError

load_dotenv()

# Environment-based configuration
class Environment(Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


VALID_STRATEGIES = ("soft", "hard")


def _get_env_value(*keys: str, default: Optional[str] = None) -> Optional[str]:
    """Return the first non-empty environment variable value from the provided keys."""
    for key in keys:
        value = os.getenv(key)
        if value is not None:
            return value
    return default


def _env_bool(*keys: str, default: bool = False) -> bool:
    """Fetch a boolean flag from env."""
    raw = _get_env_value(*keys)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_strategy(*keys: str, default: str = "soft") -> str:
    """Fetch a chunking strategy name from env, rejecting unknown values."""
    raw = _get_env_value(*keys)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value not in VALID_STRATEGIES:
        raise ConfigurationError(
            f"Unknown chunking strategy '{raw}', expected one of {', '.join(VALID_STRATEGIES)}",
            config_key=keys[0],
        )
    return value


@dataclass
class ChunkerConfig:
    """
    Central configuration for the chunking engine: locale defaults, the
    default boundary policy and segmentation/debug switches.
    """

    # Environment
    environment: Environment = Environment.DEVELOPMENT

    # Logging
    log_level: str = "INFO"

    # Chunking
    default_locale: str = "en"
    default_strategy: str = "soft"  # "soft" or "hard"
    use_locale_segmenter: bool = True
    debug_chunking: bool = False

    @classmethod
    def from_environment(cls) -> 'ChunkerConfig':
        """Load configuration from environment variables"""

        env_name = _get_env_value(
            'TEXTCHUNKER_ENV', 'ENVIRONMENT', default='development'
        ).lower()
        try:
            environment = Environment(env_name)
        except ValueError:
            environment = Environment.DEVELOPMENT

        if environment == Environment.PRODUCTION:
            return cls._production_config()
        elif environment == Environment.TESTING:
            return cls._testing_config()
        else:
            return cls._development_config()

    @classmethod
    def _development_config(cls) -> 'ChunkerConfig':
        """Development environment configuration"""
        return cls(
            environment=Environment.DEVELOPMENT,
            log_level=_get_env_value('LOG_LEVEL', default='INFO'),
            default_locale=_get_env_value('TEXTCHUNKER_LOCALE', default=cls.default_locale),
            default_strategy=_env_strategy('TEXTCHUNKER_STRATEGY', default=cls.default_strategy),
            use_locale_segmenter=_env_bool('TEXTCHUNKER_USE_LOCALE_SEGMENTER', default=True),
            debug_chunking=_env_bool('DEBUG_CHUNKING', default=False),
        )

    @classmethod
    def _testing_config(cls) -> 'ChunkerConfig':
        """Testing environment configuration"""
        return cls(
            environment=Environment.TESTING,
            log_level="WARNING",
            default_locale="en",
            default_strategy="soft",
            use_locale_segmenter=_env_bool('TEXTCHUNKER_USE_LOCALE_SEGMENTER', default=True),
            debug_chunking=False,
        )

    @classmethod
    def _production_config(cls) -> 'ChunkerConfig':
        """Production environment configuration"""
        return cls(
            environment=Environment.PRODUCTION,
            log_level=_get_env_value('LOG_LEVEL', default='WARNING'),
            default_locale=_get_env_value('TEXTCHUNKER_LOCALE', default=cls.default_locale),
            default_strategy=_env_strategy('TEXTCHUNKER_STRATEGY', default=cls.default_strategy),
            use_locale_segmenter=_env_bool('TEXTCHUNKER_USE_LOCALE_SEGMENTER', default=True),
            debug_chunking=_env_bool('DEBUG_CHUNKING', default=False),
        )

    def get_chunking_config(self) -> Dict[str, Any]:
        """Get all chunking-related configuration."""
        return {
            'locale': self.default_locale,
            'strategy': self.default_strategy,
            'use_locale_segmenter': self.use_locale_segmenter,
            'debug_chunking': self.debug_chunking,
        }


# Global configuration instance
_config_instance: Optional[ChunkerConfig] = None


def get_config() -> ChunkerConfig:
    """Get the global configuration instance"""
    global _config_instance
    if _config_instance is None:
        _config_instance = ChunkerConfig.from_environment()
    return _config_instance


def reload_config() -> ChunkerConfig:
    """Reload configuration from environment"""
    global _config_instance
    _config_instance = ChunkerConfig.from_environment()
    return _config_instance


__all__ = [
    'ChunkerConfig',
    'get_config',
    'reload_config',
    'Environment'
]
