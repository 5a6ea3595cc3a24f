import logging

from clickup_mcp.utils.logging import configure_logging
from clickup_mcp.config import Settings
from clickup_mcp.server import build_server

log = logging.getLogger(__name__)


def run():
    configure_logging()
    settings = Settings()
    server = build_server(settings)
    log.info("Starting ClickUp MCP server over %s", settings.transport)
    server.run(transport=settings.transport)


if __name__ == "__main__":
    run()
