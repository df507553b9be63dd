# services/health_check.py

import logging

from aiohttp import web

logger = logging.getLogger(__name__)

SERVICE_NAME = "mindfulspace-bot"


async def handle_health(request):
    return web.json_response({"status": "ok", "service": SERVICE_NAME})


def create_health_app() -> web.Application:
    app = web.Application()
    app.add_routes([web.get('/health', handle_health)])
    return app


async def start_health_server(host: str = "0.0.0.0", port: int = 8080) -> web.AppRunner:
    runner = web.AppRunner(create_health_app())
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()
    logger.info(f"🌐 Health check available on http://{host}:{port}/health")
    return runner
