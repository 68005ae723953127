import logging
import sys
from pathlib import Path

from loguru import logger

from product_catalog.runtime.context import get_config

PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Redirect standard 'logging' records (SQLAlchemy, drivers) to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # depth=2 skips this handler and the stdlib logging frame
        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def configure_logging() -> None:
    """Install Loguru sinks from the active LoggingConfig."""
    main_config = get_config()
    cfg = main_config.logging
    env = main_config.app.environment

    logger.remove()

    diagnose_on = env != "production"

    logger.add(
        sys.stderr,
        level=cfg.level,
        format=PLAIN_FORMAT,
        colorize=True,
        backtrace=diagnose_on,
        diagnose=diagnose_on,
    )

    if cfg.file:
        path = Path(cfg.file)
        path.parent.mkdir(parents=True, exist_ok=True)
        is_json_file = cfg.format == "json"
        logger.add(
            str(path),
            level=cfg.level,
            format="{message}" if is_json_file else PLAIN_FORMAT,
            serialize=is_json_file,
            rotation=f"{cfg.max_size_mb} MB",
            retention=cfg.backup_count,
            compression="zip",
            backtrace=diagnose_on,
            diagnose=diagnose_on,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # SQL echo is controlled by DatabaseConfig.echo, keep the rest quiet
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if main_config.database.echo else logging.WARNING
    )
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)

    logger.info(
        "Logging configured",
        app_level=cfg.level,
        app_format=cfg.format,
        app_file=cfg.file,
        environment=env,
    )
