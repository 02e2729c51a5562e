"""SpawnProof player client — join the server and run one /spawnproof command.

Run with: python scripts/spawnproof_cli.py [preview|confirm|stop|help] [radius] [--fast]
Requires: NATS running and `python -m services.spawnproof`
"""

import argparse
import asyncio
import os
import sys

from pydantic import ValidationError

from spawnproof import (
    DEFAULT_RADIUS,
    Command,
    CommandAction,
    CommandResult,
    Envelope,
    Join,
    MessageType,
    SpawnProofBusClient,
    Topics,
    format_validation_error,
    parse_payload,
    render_lines,
)

TERMINAL_TYPES = {
    MessageType.TASK_COMPLETED,
    MessageType.TASK_EXHAUSTED,
    MessageType.TASK_CANCELLED,
}


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send a /spawnproof command.")
    parser.add_argument(
        "action",
        nargs="?",
        default=CommandAction.PREVIEW.value,
        choices=[a.value for a in CommandAction],
    )
    parser.add_argument("radius", nargs="?", type=int, default=DEFAULT_RADIUS)
    parser.add_argument("--fast", action="store_true", help="place 10 buttons per tick")
    parser.add_argument("--player", default=os.environ.get("SPAWNPROOF_PLAYER", "steve"))
    parser.add_argument("--pos", type=int, nargs=3, default=[0, 64, 0], metavar=("X", "Y", "Z"))
    parser.add_argument("--op", action="store_true", help="join as an operator (unlimited buttons)")
    parser.add_argument(
        "--buttons",
        type=int,
        default=640,
        help="stone buttons to carry when not an operator",
    )
    parser.add_argument("--timeout", type=float, default=600.0)
    return parser.parse_args(argv)


async def _join(client: SpawnProofBusClient, args: argparse.Namespace) -> None:
    """Announce the player. Rejoining replaces position and inventory."""
    await client.send(
        Topics.SQUARE,
        Join(
            player_id=args.player,
            name=args.player,
            position=list(args.pos),
            operator=args.op,
            inventory={} if args.op else {"stone_button": args.buttons},
        ),
        from_agent=args.player,
    )
    await asyncio.sleep(0.3)


async def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        command = Command(
            player_id=args.player,
            action=CommandAction(args.action),
            radius=args.radius,
            fast=args.fast,
        )
    except ValidationError as e:
        for line in format_validation_error(e, prefix="command"):
            print(line, file=sys.stderr)
        return 1

    nats_url = os.environ.get("NATS_URL", "nats://localhost:4222")
    client = SpawnProofBusClient(nats_url, name=args.player)
    await client.connect()

    done = asyncio.Event()
    exit_code = 1
    follow = command.action in (CommandAction.CONFIRM, CommandAction.STOP)

    async def on_inbox(env: Envelope) -> None:
        nonlocal exit_code
        payload = parse_payload(env)
        for line in render_lines(payload):
            print(line)
        if isinstance(payload, CommandResult):
            exit_code = 0 if payload.code == 1 else 1
            if payload.code == 0 or command.action == CommandAction.HELP:
                done.set()
        elif env.type == MessageType.PREVIEW:
            done.set()
        elif follow and env.type in TERMINAL_TYPES:
            done.set()

    await client.subscribe(Topics.player_inbox(args.player), on_inbox)
    await asyncio.sleep(0.3)

    # stop and help act on whatever the server already knows
    if command.action in (CommandAction.PREVIEW, CommandAction.CONFIRM):
        await _join(client, args)

    await client.send(Topics.COMMANDS, command, from_agent=args.player)

    try:
        await asyncio.wait_for(done.wait(), timeout=args.timeout)
    except asyncio.TimeoutError:
        print(f"Timed out after {args.timeout:.0f}s", file=sys.stderr)
        exit_code = 1

    await client.close()
    return exit_code


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
