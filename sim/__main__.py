"""Run the SIM scenario against a local service."""

import asyncio
import os

from dotenv import load_dotenv

from meetbot.logging_config import setup_logging

from .sim import Sim


async def _run() -> None:
    api_host = os.getenv("API_HOST", "localhost")
    api_port = int(os.getenv("API_PORT", "8000"))
    sim = Sim(
        api_url=f"http://{api_host}:{api_port}",
        secret=os.getenv("WEBHOOK_SECRET", ""),
        bot_id=os.getenv("SIM_BOT_ID", "sim-bot"),
    )
    try:
        await sim.run_scenario()
    finally:
        await sim.close()


if __name__ == "__main__":
    load_dotenv()
    setup_logging()
    asyncio.run(_run())
