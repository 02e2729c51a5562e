"""Entry point: python -m services.spawnproof"""

import asyncio
import logging
import os
import signal

from services.spawnproof.server import SpawnProofServer


async def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    server = SpawnProofServer(os.environ.get("NATS_URL", "nats://localhost:4222"))
    loop = asyncio.get_running_loop()

    stop_event = asyncio.Event()

    def _signal_handler() -> None:
        logging.getLogger(__name__).info("Shutdown signal received")
        stop_event.set()

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, _signal_handler)

    await server.start()
    logging.getLogger(__name__).info(
        "SpawnProof server is running. Press Ctrl+C to stop."
    )

    await stop_event.wait()
    await server.stop()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
