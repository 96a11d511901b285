"""
Configuration Management for StarCounter Applications

Dataclass-based configuration with environment presets and STARCOUNTER_*
environment variable overrides.
"""

import logging
import os
from dataclasses import dataclass, field, asdict
from enum import Enum
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from .core.state import DEFAULT_MAX_COUNT


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class CounterConfig:
    """Counter bounds"""
    max_count: int = DEFAULT_MAX_COUNT


@dataclass
class PersistenceConfig:
    """Session persistence configuration"""
    session_ttl: Optional[int] = None  # seconds, None keeps sessions for the process lifetime
    cleanup_interval: int = 300
    auto_cleanup: bool = True


@dataclass
class WebConfig:
    """Web server configuration"""
    host: str = "localhost"
    port: int = 5001
    debug: bool = False
    live: bool = False
    secret_key: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class ApplicationConfig:
    """Complete application configuration"""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    counter: CounterConfig = field(default_factory=CounterConfig)
    persistence: PersistenceConfig = field(default_factory=PersistenceConfig)
    web: WebConfig = field(default_factory=WebConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> 'ApplicationConfig':
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.debug = True
            config.web.debug = True
            config.web.live = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.persistence.auto_cleanup = False
            config.web.secret_key = "starcounter-testing"
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.debug = False
            config.web.debug = False
            config.web.live = False
            config.persistence.session_ttl = 24 * 60 * 60
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ApplicationConfig':
        """Create configuration from dictionary, starting from the environment preset"""
        environment = Environment(config_dict.get("environment", Environment.DEVELOPMENT.value))
        config = cls.for_environment(environment)

        if "debug" in config_dict:
            config.debug = bool(config_dict["debug"])

        for section in ("counter", "persistence", "web", "logging"):
            target = getattr(config, section)
            for key, value in config_dict.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)

        config.validate()
        return config

    @classmethod
    def from_environment(cls) -> 'ApplicationConfig':
        """Create configuration from environment variables"""
        env_name = os.getenv('STARCOUNTER_ENV', 'development')
        config = cls.for_environment(Environment(env_name))

        if os.getenv('STARCOUNTER_DEBUG'):
            config.debug = os.getenv('STARCOUNTER_DEBUG').lower() == 'true'
            config.web.debug = config.debug

        if os.getenv('STARCOUNTER_MAX_COUNT'):
            config.counter.max_count = int(os.getenv('STARCOUNTER_MAX_COUNT'))

        if os.getenv('STARCOUNTER_SESSION_TTL'):
            config.persistence.session_ttl = int(os.getenv('STARCOUNTER_SESSION_TTL'))

        if os.getenv('STARCOUNTER_HOST'):
            config.web.host = os.getenv('STARCOUNTER_HOST')

        if os.getenv('STARCOUNTER_PORT'):
            config.web.port = int(os.getenv('STARCOUNTER_PORT'))

        if os.getenv('STARCOUNTER_SECRET_KEY'):
            config.web.secret_key = os.getenv('STARCOUNTER_SECRET_KEY')

        if os.getenv('STARCOUNTER_LOG_LEVEL'):
            config.logging.level = os.getenv('STARCOUNTER_LOG_LEVEL').upper()

        config.validate()
        return config

    def validate(self) -> None:
        """Reject settings the counter cannot run with."""
        if self.counter.max_count < 0:
            raise ValueError(f"counter.max_count must be >= 0, got {self.counter.max_count}")
        if self.persistence.session_ttl is not None and self.persistence.session_ttl <= 0:
            raise ValueError(f"persistence.session_ttl must be positive, got {self.persistence.session_ttl}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        data = asdict(self)
        data["environment"] = self.environment.value
        return data


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Configure the `starcounter` logger from a LoggingConfig."""
    logger = logging.getLogger("starcounter")
    logger.setLevel(config.level)

    formatter = logging.Formatter(config.format)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if config.file_path:
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# Global configuration management
_current_config: Optional[ApplicationConfig] = None

def set_config(config: ApplicationConfig):
    """Set the global configuration"""
    global _current_config
    _current_config = config

def get_config() -> ApplicationConfig:
    """Get the current global configuration, loading it from the environment on first use"""
    global _current_config
    if _current_config is None:
        _current_config = ApplicationConfig.from_environment()
    return _current_config

def reset_config():
    """Forget the global configuration so the next get_config() reloads it"""
    global _current_config
    _current_config = None
