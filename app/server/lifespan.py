from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging import (
    add_app_info,
    add_environment_info,
    configure_logging,
)
from infrastructure.services import get_settings, get_translator
from modules.greetings.dependencies import (
    get_greeting_resolver,
    get_greetings_config,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "greetings"


def _get_logger(settings: "Settings") -> BoundLogger:
    environment = "production" if settings.is_production else settings.PREFIX
    return configure_logging(
        settings=settings,
        extra_processors=[
            add_app_info(APP_NAME, settings.GIT_SHA),
            add_environment_info(environment),
        ],
    )


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _load_greetings(app: FastAPI, logger: BoundLogger) -> None:
    """Load the catalogs and fail fast if the default locale is incomplete."""
    try:
        config = get_greetings_config()
        translator = get_translator()
        app.state.translator = translator
        app.state.greetings_config = config
        app.state.greeting_resolver = get_greeting_resolver()
    except Exception as exc:
        logger.error("greetings_catalog_load_failed", error=str(exc))
        raise

    logger.info(
        "greetings_catalog_loaded",
        default_locale=config.default_locale.tag,
        locales=[locale.tag for locale in translator.get_available_locales()],
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    _load_greetings(app, logger)

    yield

    logger.info("application_shutdown")
