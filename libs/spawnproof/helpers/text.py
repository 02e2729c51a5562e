"""Plain-text rendering of player-facing payloads."""

from pydantic import BaseModel

from spawnproof.models.catalogue import BUTTONS_PER_STACK
from spawnproof.models.messages import (
    DEFAULT_RADIUS,
    MAX_RADIUS,
    MIN_RADIUS,
    CommandResult,
    Preview,
    TaskCancelled,
    TaskCompleted,
    TaskExhausted,
    TaskProgress,
    TaskStarted,
)

HELP_LINES: list[str] = [
    "=== SpawnProof Commands ===",
    f"/spawnproof - Preview with default radius ({DEFAULT_RADIUS})",
    f"/spawnproof <radius> - Preview with custom radius ({MIN_RADIUS}-{MAX_RADIUS})",
    "/spawnproof confirm <radius> [fast] - Start placing buttons",
    "/spawnproof stop - Stop the current task",
    "/spawnproof help - Show this help",
    "",
    "=== How It Works ===",
    "1. Run /spawnproof to scan for spawnable blocks",
    "2. Run /spawnproof confirm <radius> (add 'fast' for fast mode) to begin",
    "3. Run /spawnproof stop to cancel",
    "",
    "=== Speed Modes ===",
    "Safe Mode: 10 buttons/sec (server-safe)",
    "Fast Mode: 200 buttons/sec (single-player only)",
    "",
    "Places stone buttons on spawnable surfaces.",
]


def format_stacks(count: int, per_stack: int = BUTTONS_PER_STACK) -> str:
    """`"40 buttons"`, `"2 stacks"`, `"1 stack + 8"`."""
    stacks, remainder = divmod(count, per_stack)
    if stacks == 0:
        return f"{remainder} buttons"
    label = f"{stacks} stack" + ("" if stacks == 1 else "s")
    if remainder == 0:
        return label
    return f"{label} + {remainder}"


def format_time(seconds: int) -> str:
    """`"45s"`, `"2m 5s"`, `"1h 3m"`."""
    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        mins, secs = divmod(seconds, 60)
        return f"{mins}m {secs}s" if secs > 0 else f"{mins}m"
    hours = seconds // 3600
    mins = (seconds % 3600) // 60
    return f"{hours}h {mins}m" if mins > 0 else f"{hours}h"


def _preview_lines(p: Preview) -> list[str]:
    lines = ["=== SpawnProof Preview ===", f"Radius: {p.radius} blocks"]
    if p.unlimited:
        lines += [
            "Mode: OP Mode (unlimited buttons)",
            "",
            f"Spawnable blocks found: {p.needed}",
            f"  ({format_stacks(p.needed)})",
        ]
    else:
        available = p.available or 0
        lines += [
            "Mode: Survival Mode (uses inventory)",
            "",
            f"Buttons needed: {p.needed}",
            f"  ({format_stacks(p.needed)})",
            "",
            f"Buttons in inventory: {available} (any type)",
            f"  ({format_stacks(available)})",
            "",
        ]
        if p.shortfall > 0:
            lines += [
                f"You may be short by ~{p.shortfall} buttons",
                f"  ({format_stacks(p.shortfall)})",
                "  Tip: Warped/Crimson buttons don't burn in the Nether!",
            ]
        else:
            lines.append("You have enough buttons!")
    lines += [
        "",
        "Estimated time:",
        f"  Safe mode: {format_time(p.safe_seconds)}",
        f"  Fast mode: {format_time(p.fast_seconds)}",
        "",
        f"Start: /spawnproof confirm {p.radius}   Fast: /spawnproof confirm {p.radius} fast",
    ]
    return lines


def render_lines(payload: BaseModel) -> list[str]:
    """Return the chat lines a player sees for `payload`.

    Raises:
        ValueError: If the payload type has no text form.
    """
    if isinstance(payload, Preview):
        return _preview_lines(payload)
    if isinstance(payload, TaskStarted):
        return [f"Found {payload.positions} spawnable blocks. Starting..."]
    if isinstance(payload, TaskProgress):
        return [f"Progress: {payload.placed} placed, {payload.remaining} remaining..."]
    if isinstance(payload, TaskCompleted):
        return [
            "SpawnProof complete!",
            f"  Buttons placed: {payload.placed}",
            f"  Time: {payload.elapsed_seconds:.1f} seconds",
        ]
    if isinstance(payload, TaskExhausted):
        return [
            "Ran out of buttons!",
            f"  Buttons placed: {payload.placed}",
            f"  Still needed: {payload.remaining} ({format_stacks(payload.remaining)})",
            "  Craft more buttons and run /spawnproof again.",
        ]
    if isinstance(payload, TaskCancelled):
        return [f"SpawnProof stopped. Placed {payload.placed} buttons."]
    if isinstance(payload, CommandResult):
        lines = list(payload.lines)
        if payload.code == 0 and payload.reason:
            lines.append(payload.reason)
        return lines
    raise ValueError(f"No text form for {type(payload).__name__}")
