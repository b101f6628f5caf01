import pytest

from api.errors import ErrorRegistry
from tests.factories.catalog import make_translator

COMMON_MESSAGES = {
    "en-US": {
        "InternalError.Description": "Internal Server Error",
        "InternalError.Solution": "None",
        "InternalError.ErrorLink": "None",
        "TooManyRequests.Description": "Rate limit exceeded",
        "TooManyRequests.Solution": "Retry later",
        "TooManyRequests.ErrorLink": "None",
        "MessageNotFound.Description": "Message {{ message_id }} does not exist",
        "MessageNotFound.Solution": "Check the id",
        "MessageNotFound.ErrorLink": "None",
        "Order.NotFound.Description": "Order {{ order_id }} not found",
        "Order.NotFound.Solution": "Contact {{ team }}",
        "Order.NotFound.ErrorLink": "https://example.com/orders",
    },
    "zh-CN": {
        "InternalError.Description": "内部错误",
        "InternalError.Solution": "暂无",
        "InternalError.ErrorLink": "暂无",
        "TooManyRequests.Description": "请求过于频繁",
        "TooManyRequests.Solution": "请稍后重试",
        "TooManyRequests.ErrorLink": "暂无",
        "MessageNotFound.Description": "消息 {{ message_id }} 不存在",
        "MessageNotFound.Solution": "请检查消息 ID",
        "MessageNotFound.ErrorLink": "暂无",
        "Order.NotFound.Description": "订单 {{ order_id }} 不存在",
        "Order.NotFound.Solution": "请联系 {{ team }}",
        "Order.NotFound.ErrorLink": "https://example.com/orders",
    },
}


@pytest.fixture
def api_translator():
    """Translator holding the common error codes and Order.NotFound."""
    return make_translator(COMMON_MESSAGES)


@pytest.fixture
def registry(api_translator):
    """ErrorRegistry defaulting to zh-CN."""
    return ErrorRegistry(
        translator=api_translator,
        languages=["zh-CN", "en-US"],
        default_language="zh-CN",
    )
