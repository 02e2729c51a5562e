"""SpawnProofServer — tick clock, command handling and task event delivery."""

import asyncio
import logging
import os
import time

from pydantic import BaseModel

from spawnproof import (
    Envelope,
    MessageType,
    SpawnProofBusClient,
    Tick,
    Topics,
)
from spawnproof.placement import PROGRESS_INTERVAL, TICKS_PER_SECOND

from services.spawnproof.rules import process_command, process_join, process_tick
from services.spawnproof.state import DEFAULT_TICK_INTERVAL, ServerState

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


class SpawnProofServer:
    """Hosts spawn-proofing tasks for every joined player.

    Players join on `/spawnproof/square` and send commands on
    `/spawnproof/commands`. Replies and task events go to each player's
    inbox. Every tick, each live task is stepped once.
    """

    AGENT_ID = "server"

    def __init__(
        self,
        nats_url: str = "nats://localhost:4222",
        state: ServerState | None = None,
    ) -> None:
        self._bus = SpawnProofBusClient(nats_url, name=self.AGENT_ID)
        self._state = state or ServerState(
            progress_interval=int(
                os.environ.get("SPAWNPROOF_PROGRESS_INTERVAL", PROGRESS_INTERVAL)
            ),
            dedicated=_env_flag("SPAWNPROOF_DEDICATED", True),
        )
        self._tick_interval = float(
            os.environ.get("SPAWNPROOF_TICK_INTERVAL", DEFAULT_TICK_INTERVAL)
        )
        self._running = False
        self._tick_task: asyncio.Task[None] | None = None

    @property
    def state(self) -> ServerState:
        """Expose state for testing."""
        return self._state

    async def start(self) -> None:
        """Connect to NATS, subscribe to joins and commands, start the tick loop."""
        await self._bus.connect()
        logger.info("SpawnProof server connected to NATS")

        await self._bus.subscribe(Topics.SQUARE, self._on_square_message)
        logger.info("SpawnProof server subscribed to %s", Topics.SQUARE)

        await self._bus.subscribe(Topics.COMMANDS, self._on_command)
        logger.info("SpawnProof server subscribed to %s", Topics.COMMANDS)

        self._running = True
        self._tick_task = asyncio.create_task(self._tick_loop())
        logger.info(
            "SpawnProof server started (tick interval: %.3fs)", self._tick_interval
        )

    async def stop(self) -> None:
        """Clean shutdown. Running tasks are dropped with the process."""
        self._running = False
        if self._tick_task is not None:
            self._tick_task.cancel()
            try:
                await self._tick_task
            except asyncio.CancelledError:
                pass
        await self._bus.close()
        logger.info(
            "SpawnProof server stopped (%d tasks abandoned)", len(self._state.registry)
        )

    async def _tick_loop(self) -> None:
        """Step every live task once per tick."""
        while self._running:
            await self._do_tick()
            await asyncio.sleep(self._tick_interval)

    async def _do_tick(self) -> None:
        tick_number, events = process_tick(self._state)

        for event in events:
            await self._deliver(event.player_id, event)

        if tick_number % TICKS_PER_SECOND == 0:
            await self._bus.send(
                Topics.TICK,
                Tick(tick_number=tick_number, timestamp=time.time()),
                from_agent=self.AGENT_ID,
                tick=tick_number,
            )
            logger.debug(
                "[tick %d] %d active tasks", tick_number, len(self._state.registry)
            )

    async def _on_square_message(self, envelope: Envelope) -> None:
        """Handle player joins on /spawnproof/square."""
        if envelope.type != MessageType.JOIN:
            return

        errors = process_join(envelope, self._state)
        if errors:
            logger.warning(
                "[tick %d] JOIN from %s rejected: %s",
                self._state.current_tick,
                envelope.from_agent,
                "; ".join(errors),
            )
            return

        logger.info(
            "[tick %d] %s joined (%d players)",
            self._state.current_tick,
            envelope.from_agent,
            self._state.player_count(),
        )

    async def _on_command(self, envelope: Envelope) -> None:
        """Handle a /spawnproof command and reply to the sender's inbox."""
        # Scans are O(radius³), keep them off the tick loop
        result, extras = await asyncio.to_thread(process_command, envelope, self._state)

        await self._deliver(result.player_id, result)
        for payload in extras:
            await self._deliver(result.player_id, payload)

        logger.info(
            "[tick %d] %s %s from %s: code %d",
            self._state.current_tick,
            envelope.type,
            result.action,
            result.player_id,
            result.code,
        )

    async def _deliver(self, player_id: str, payload: BaseModel) -> None:
        await self._bus.send(
            Topics.player_inbox(player_id),
            payload,
            from_agent=self.AGENT_ID,
            tick=self._state.current_tick,
        )
