from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path

from loguru import logger

from product_catalog.runtime.config.config_data import ConfigData
from product_catalog.runtime.config.config_template import load_templated_yaml

CONFIG_PATH = Path("config.yaml")


@dataclass
class AppContext:
    """Application context containing configuration and other app-wide state."""

    config: ConfigData


def _load_default_config() -> ConfigData:
    if not CONFIG_PATH.exists():
        logger.debug("No {} found; using default configuration", CONFIG_PATH)
        return ConfigData()
    return load_templated_yaml(CONFIG_PATH)


_default_context = AppContext(config=_load_default_config())

_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=_default_context
)


def get_context() -> AppContext:
    """Get the current application context."""
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    """Set the current application context.

    Args:
        context: AppContext instance to set as current.
    """
    return _app_context.set(context)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily replace the active configuration.

    The previous context is restored when the block exits, including when it
    exits with an exception.

    Example:
        test_config = ConfigData()
        test_config.database.url = "sqlite://"
        with with_context(test_config):
            assert get_config().database.url == "sqlite://"
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    token = set_context(replace(get_context(), config=config_override))
    try:
        yield
    finally:
        _app_context.reset(token)


def set_config(config: ConfigData) -> None:
    """Replace the entire current configuration with the provided one."""
    set_context(replace(get_context(), config=config))


def get_config() -> ConfigData:
    """Convenience function to get the current configuration."""
    return get_context().config
