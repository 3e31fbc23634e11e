"""Games bridge entry point

Runs the Discord bot and the HTTP API on a single event loop.
"""

import asyncio
import logging

import uvicorn

from .app import create_app
from .bot import GamesBridgeBot
from .core import AppState, Settings, get_settings, setup_logging

logger = logging.getLogger("games_bridge")


async def run(settings: Settings) -> None:
    """Start the bot and the HTTP server and wait until either stops"""
    state = AppState()
    bot = GamesBridgeBot(settings, state)
    app = create_app(settings, state, bot)

    server = uvicorn.Server(
        uvicorn.Config(app, host=settings.host, port=settings.port, log_config=None)
    )

    async with bot:
        logger.info(f"Server running at http://localhost:{settings.port}")
        await asyncio.gather(bot.start(settings.discord_token), server.serve())


def main() -> None:
    settings = get_settings()
    setup_logging(settings)

    try:
        asyncio.run(run(settings))
    except (KeyboardInterrupt, asyncio.CancelledError):
        logger.info("[yellow]Bridge stopped manually[/yellow]")
    except Exception as e:
        logger.error(f"[bold red]Bridge stopped with an error:[/bold red] {e}", exc_info=e)
        raise


if __name__ == "__main__":
    main()
