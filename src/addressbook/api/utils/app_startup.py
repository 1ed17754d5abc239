import logging
import sys
from pathlib import Path

from loguru import logger

from src.addressbook.runtime.config.config_data import ConfigData, LoggingConfig

PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

# stdlib loggers forwarded into loguru, and the level each one is held at
STDLIB_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "passlib": logging.WARNING,
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.CRITICAL,
}


class InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # The request middleware writes its own access lines
        if record.name == "uvicorn.access":
            return

        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=2, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _add_file_sink(cfg: LoggingConfig, verbose_errors: bool) -> None:
    path = Path(cfg.file)
    path.parent.mkdir(parents=True, exist_ok=True)

    as_json = cfg.format == "json"
    logger.add(
        str(path),
        level=cfg.level,
        format="{message}" if as_json else PLAIN_FORMAT,
        serialize=as_json,
        rotation=f"{cfg.max_size_mb} MB",
        retention=cfg.backup_count,
        compression="zip",
        enqueue=True,
        backtrace=verbose_errors,
        diagnose=verbose_errors,
    )


def _route_stdlib_logging(sql_echo: bool) -> None:
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Loggers created before this point keep their own handlers unless cleared
    for name in list(logging.root.manager.loggerDict):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True

    for name, level in STDLIB_LEVELS.items():
        logging.getLogger(name).setLevel(level)

    if sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)


def configure_logging(config: ConfigData) -> None:
    """Install the loguru sinks described by ``config.logging``.

    The console always gets coloured plain text. When ``logging.file`` is set a
    rotating file sink is added as well, writing JSON lines if
    ``logging.format`` is ``json``. Records from the standard ``logging``
    module (uvicorn, SQLAlchemy, passlib) are routed through loguru. Tracebacks
    include local variables outside production.
    """
    cfg = config.logging
    env = config.app.environment
    verbose_errors = env != "production"

    logger.remove()
    logger.configure(extra={"request_id": "-"})

    logger.add(
        sys.stderr,
        level=cfg.level,
        format=PLAIN_FORMAT,
        colorize=True,
        backtrace=verbose_errors,
        diagnose=verbose_errors,
    )
    if cfg.file:
        _add_file_sink(cfg, verbose_errors)

    _route_stdlib_logging(config.database.echo)

    logger.bind(
        app_level=cfg.level,
        app_format=cfg.format,
        app_file=cfg.file,
        environment=env,
    ).info("Logging configured")
