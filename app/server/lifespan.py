from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from api.dependencies import get_error_registry, get_translation_service
from core.config import get_settings
from core.logging import get_module_logger

if TYPE_CHECKING:
    from core.config import Settings


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


def _register_catalog(app: FastAPI, logger: BoundLogger) -> None:
    # Runs before any request, so the catalog is frozen before concurrent use
    translation = get_translation_service()
    app.state.translation = translation
    app.state.error_registry = get_error_registry()
    logger.info(
        "message_catalog_ready",
        locales=translation.get_available_locales(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = get_module_logger()

    app.state.settings = settings

    logger.info("application_startup")
    _list_configs(settings, logger)

    _register_catalog(app, logger)

    yield

    logger.info("application_shutdown")
