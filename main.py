#!/usr/bin/python3
import asyncio

from handlers import *  # noqa
from manager import manager

logger = manager.logger


async def main():
    manager.setup()

    # polling returns after SIGINT/SIGTERM
    await manager.start()

    logger.info(f"bot is stopped, {len(manager.verifications)} pending verifications dropped")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
