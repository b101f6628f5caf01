from core.logging import get_module_logger
from server import server

server_app = server.handler
logger = get_module_logger()

logger.info("server_app_created", routes=len(server_app.routes))
