from fastapi import APIRouter, Request, status

from api.dependencies import ErrorRegistryDep, LanguageDep, TranslationServiceDep
from api.errors import MESSAGE_NOT_FOUND

router = APIRouter(tags=["Messages"])


@router.get("/messages/{message_id}")
def get_message(
    message_id: str,
    request: Request,
    translation: TranslationServiceDep,
    registry: ErrorRegistryDep,
    language: LanguageDep,
):
    """Render a catalog message in the request language.

    Query parameters are passed to the message template as data.
    """
    if not translation.has_message(language, message_id):
        raise registry.new_http_error(
            status.HTTP_404_NOT_FOUND, MESSAGE_NOT_FOUND, language
        ).with_description({"message_id": message_id, "locale": language})

    data = dict(request.query_params)
    return {
        "locale": language,
        "message_id": message_id,
        "text": translation.translate(language, message_id, data),
    }
