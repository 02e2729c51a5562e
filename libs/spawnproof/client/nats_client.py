"""SpawnProofBusClient — async wrapper around NATS JetStream for SpawnProof."""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

import nats
from nats.aio.client import Client as NATSClient
from nats.aio.msg import Msg
from nats.errors import Error as NATSError
from nats.js.api import DeliverPolicy
from nats.js.client import JetStreamContext
from nats.js.errors import NotFoundError
from pydantic import BaseModel

from spawnproof.helpers.factory import create_message
from spawnproof.models.envelope import Envelope
from spawnproof.models.topics import to_nats_subject

logger = logging.getLogger(__name__)

STREAM_NAME = "SPAWNPROOF"
STREAM_SUBJECTS = ["spawnproof.>", "player.>", "system.>"]

Handler = Callable[[Envelope], Coroutine[Any, Any, None]]


class SpawnProofBusClient:
    """Async NATS client for the SpawnProof message bus.

    Usage:
        client = SpawnProofBusClient("nats://localhost:4222")
        await client.connect()
        await client.subscribe(Topics.player_inbox("steve"), handler)
        await client.publish(Topics.COMMANDS, envelope)
        await client.close()
    """

    def __init__(self, url: str = "nats://localhost:4222", name: str = "spawnproof") -> None:
        self._url = url
        self._name = name
        self._nc: NATSClient | None = None
        self._js: JetStreamContext | None = None
        self._subscriptions: list[Any] = []
        self._consumers: list[asyncio.Task[None]] = []

    @property
    def is_connected(self) -> bool:
        return self._nc is not None and self._nc.is_connected

    async def connect(self) -> None:
        """Connect to NATS and make sure the SPAWNPROOF stream exists."""
        self._nc = await nats.connect(
            self._url,
            name=self._name,
            reconnected_cb=self._on_reconnect,
            disconnected_cb=self._on_disconnect,
            error_cb=self._on_error,
            max_reconnect_attempts=10,
            reconnect_time_wait=2,
        )
        self._js = self._nc.jetstream()

        try:
            await self._js.find_stream_name_by_subject(STREAM_SUBJECTS[0])
            logger.info("JetStream stream '%s' already exists", STREAM_NAME)
        except NotFoundError:
            await self._js.add_stream(name=STREAM_NAME, subjects=STREAM_SUBJECTS)
            logger.info("Created JetStream stream '%s'", STREAM_NAME)

    async def publish(self, topic: str, envelope: Envelope) -> None:
        """Publish an envelope to a topic via JetStream.

        Args:
            topic: Topic path (e.g., `/spawnproof/commands`).
            envelope: The message envelope to publish.
        """
        if self._js is None:
            raise RuntimeError("Not connected. Call connect() first.")

        subject = to_nats_subject(topic)
        data = envelope.model_dump_json(by_alias=True).encode()
        await self._js.publish(subject, data)
        logger.debug("Published %s to %s: %s", envelope.type, subject, envelope.id)

    async def send(
        self, topic: str, payload: BaseModel, *, from_agent: str, tick: int = 0
    ) -> Envelope:
        """Wrap a typed payload in an envelope, publish it, and return the envelope."""
        envelope = create_message(
            from_agent=from_agent, topic=topic, payload=payload, tick=tick
        )
        await self.publish(topic, envelope)
        return envelope

    async def subscribe(self, topic: str, handler: Handler, durable: str | None = None) -> None:
        """Subscribe to a topic. Tries JetStream first, falls back to core NATS.

        Args:
            topic: Topic path (e.g., `/player/steve/inbox`).
            handler: Async callback receiving an Envelope.
            durable: Optional durable consumer name for JetStream.
        """
        subject = to_nats_subject(topic)

        async def _msg_handler(msg: Msg) -> None:
            try:
                envelope = Envelope.model_validate_json(msg.data)
                await handler(envelope)
            except Exception:
                logger.exception("Error handling message on %s", subject)
            finally:
                await self._ack(msg)

        if self._js is not None:
            try:
                sub = await self._js.subscribe(
                    subject,
                    durable=durable,
                    manual_ack=True,
                    deliver_policy=DeliverPolicy.NEW if durable is None else None,
                )
            except NATSError:
                logger.debug("JetStream subscribe failed for %s, falling back to core", subject)
            else:
                self._subscriptions.append(sub)
                self._consumers.append(asyncio.create_task(self._consume(sub, _msg_handler)))
                logger.info("JetStream subscribed to %s", subject)
                return

        if self._nc is None:
            raise RuntimeError("Not connected. Call connect() first.")
        sub = await self._nc.subscribe(subject, cb=_msg_handler)
        self._subscriptions.append(sub)
        logger.info("Core NATS subscribed to %s", subject)

    async def _consume(self, sub: Any, handler: Callable[[Msg], Coroutine[Any, Any, None]]) -> None:
        """Feed messages from a JetStream push subscription to the handler."""
        try:
            async for msg in sub.messages:
                await handler(msg)
        except asyncio.CancelledError:
            raise
        except NATSError:
            logger.debug("Subscription consumer stopped")

    @staticmethod
    async def _ack(msg: Msg) -> None:
        # Core NATS messages have no reply subject to ack
        if not msg.reply or msg._ackd:
            return
        try:
            await msg.ack()
        except NATSError as e:
            logger.debug("Ack failed: %s", e)

    async def close(self) -> None:
        """Unsubscribe from all topics and disconnect."""
        for consumer in self._consumers:
            consumer.cancel()
        self._consumers.clear()

        for sub in self._subscriptions:
            try:
                await sub.unsubscribe()
            except NATSError as e:
                logger.debug("Unsubscribe failed: %s", e)
        self._subscriptions.clear()

        if self._nc is not None:
            await self._nc.drain()
            self._nc = None
            self._js = None
        logger.info("Disconnected from NATS")

    async def _on_reconnect(self, _: Any = None) -> None:
        logger.info("Reconnected to NATS at %s", self._url)

    async def _on_disconnect(self, _: Any = None) -> None:
        logger.warning("Disconnected from NATS")

    async def _on_error(self, e: Exception) -> None:
        logger.error("NATS error: %s", e)
