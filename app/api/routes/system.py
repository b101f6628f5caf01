from fastapi import APIRouter, Request
from api.dependencies import LanguageDep, SettingsDep, TranslationServiceDep
from api.dependencies.rate_limits import get_limiter

router = APIRouter(tags=["System"])
limiter = get_limiter()


# Healthchecks hit these endpoints frequently, so the limit is generous
@router.get("/version")
@limiter.limit("50/minute")
def get_version(
    request: Request,  # pylint: disable=unused-argument
    settings: SettingsDep,
    translation: TranslationServiceDep,
    language: LanguageDep,
):
    """Get the version of the application."""
    return {
        "version": settings.GIT_SHA,
        "message": translation.translate(
            language, "System.Version.Current", {"version": settings.GIT_SHA}
        ),
    }


@router.get("/health")
@limiter.limit("50/minute")
def get_health(
    request: Request,  # pylint: disable=unused-argument
    translation: TranslationServiceDep,
    language: LanguageDep,
):
    """Healthcheck endpoint."""
    return {
        "status": "ok",
        "message": translation.translate(language, "System.Health.Ok"),
    }
