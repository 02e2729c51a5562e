"""Shared test fixtures."""

import os

import pytest
from spawnproof import Position, SpawnProofBusClient
from spawnproof.world import VoxelWorld


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def flat_world() -> VoxelWorld:
    """Flat world with the grass surface at y=63 and 3x3 chunks loaded."""
    return VoxelWorld.flat(surface_y=63, chunk_radius=1)


@pytest.fixture
def spawn_point() -> Position:
    return Position(0, 64, 0)


@pytest.fixture
def nats_url() -> str:
    return os.environ.get("NATS_URL", "nats://localhost:4222")


@pytest.fixture
async def bus_client(nats_url: str) -> SpawnProofBusClient:
    """Provide a connected SpawnProofBusClient, cleaned up after use."""
    client = SpawnProofBusClient(nats_url, name="test-client")
    await client.connect()
    yield client  # type: ignore[misc]
    await client.close()
