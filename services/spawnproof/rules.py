"""SpawnProof server rules — pure functions for joins, commands and ticks.

Command handlers return a CommandResult (code 1 on success, 0 on failure)
plus any further payloads to deliver to the player. Rejected requests never
create a task.
"""

import logging

from pydantic import BaseModel, ValidationError

from spawnproof import (
    Command,
    CommandAction,
    CommandResult,
    Envelope,
    HELP_LINES,
    Join,
    MessageType,
    Position,
    Preview,
    TaskCancelled,
    TaskStarted,
    format_validation_error,
    validate_message,
)
from spawnproof.placement import (
    PlacementTask,
    Plan,
    TaskEvent,
    estimate_preview,
    pool_for,
    profile_for,
)
from spawnproof.world import Inventory

from services.spawnproof.state import Player, ServerState

logger = logging.getLogger(__name__)

NOT_A_PLAYER = "This command must be run by a player"
UNKNOWN_PLAYER = "Could not find player"
ALREADY_RUNNING = (
    "You already have a spawnproof task running! Use /spawnproof stop to cancel it."
)
NOTHING_TO_STOP = "No active spawnproof task to stop."
NO_BUTTONS = "You have no buttons in your inventory!"
NOTHING_FOUND = "No spawnable blocks found in the area!"
FAST_ON_DEDICATED = "Fast mode on dedicated server - may cause lag for other players"

CommandOutcome = tuple[CommandResult, list[BaseModel]]


def process_join(envelope: Envelope, state: ServerState) -> list[str]:
    """Register the sending player. Returns a list of errors, empty on success."""
    errors = validate_message(envelope)
    if errors:
        return errors

    payload = Join.model_validate(envelope.payload)
    if not envelope.is_from(payload.player_id):
        return [f"Join for '{payload.player_id}' sent by '{envelope.from_agent}'"]

    try:
        inventory = Inventory.from_counts(payload.inventory)
    except ValueError as e:
        return [str(e)]

    state.add_player(
        Player(
            player_id=payload.player_id,
            name=payload.name,
            position=Position.from_list(payload.position),
            operator=payload.operator,
            inventory=inventory,
        )
    )
    return []


def process_command(envelope: Envelope, state: ServerState) -> CommandOutcome:
    """Validate a command envelope and dispatch it to its handler."""
    player_id = str(envelope.payload.get("player_id") or envelope.from_agent)

    if envelope.type != MessageType.COMMAND:
        return _fail(envelope, player_id, "unknown", f"Not a command: {envelope.type}")

    try:
        command = Command.model_validate(envelope.payload)
    except ValidationError as e:
        action = str(envelope.payload.get("action", "unknown"))
        return _fail(envelope, player_id, action, "; ".join(format_validation_error(e)))

    if command.action == CommandAction.HELP:
        return process_help(envelope, command)

    if not envelope.is_from(command.player_id):
        return _fail(envelope, command.player_id, command.action, NOT_A_PLAYER)

    player = state.get_player(command.player_id)
    if player is None:
        return _fail(envelope, command.player_id, command.action, UNKNOWN_PLAYER)

    if command.action == CommandAction.PREVIEW:
        return process_preview(envelope, command, player, state)
    if command.action == CommandAction.CONFIRM:
        return process_confirm(envelope, command, player, state)
    return process_stop(envelope, command, state)


def scan_plan(state: ServerState, player: Player, radius: int) -> Plan:
    """Scan the sphere around the player for spawnable positions."""
    world = state.world
    return Plan.scan(
        player.position,
        radius,
        world.is_spawnable,
        min_y=world.bottom_y,
        max_y=world.top_y,
    )


def process_preview(
    envelope: Envelope, command: Command, player: Player, state: ServerState
) -> CommandOutcome:
    """Scan and report counts and time estimates. Creates no task."""
    if state.has_active_task(player.player_id):
        return _fail(envelope, player.player_id, command.action, ALREADY_RUNNING)

    plan = scan_plan(state, player, command.radius)
    available = pool_for(player.operator, player.inventory).available()
    estimate = estimate_preview(command.radius, len(plan), available)

    preview = Preview(
        radius=estimate.radius,
        unlimited=estimate.unlimited,
        needed=estimate.needed,
        available=estimate.available,
        shortfall=estimate.shortfall,
        safe_seconds=estimate.safe_seconds,
        fast_seconds=estimate.fast_seconds,
    )
    result = _ok(
        envelope, player.player_id, command.action, ["Scanning area for spawnable blocks..."]
    )
    return result, [preview]


def process_confirm(
    envelope: Envelope, command: Command, player: Player, state: ServerState
) -> CommandOutcome:
    """Scan and start a placement task for the player."""
    if state.has_active_task(player.player_id):
        return _fail(envelope, player.player_id, command.action, ALREADY_RUNNING)

    lines: list[str] = []
    if command.fast and state.dedicated:
        lines.append(FAST_ON_DEDICATED)

    pool = pool_for(player.operator, player.inventory)
    if not player.operator and pool.available() == 0:
        return _fail(envelope, player.player_id, command.action, NO_BUTTONS, lines)

    mode_text = "OP Mode" if player.operator else "Survival Mode"
    speed_text = "Fast" if command.fast else "Safe"
    lines.append(
        f"Starting SpawnProof with radius {command.radius}... ({mode_text}, {speed_text} speed)"
    )

    plan = scan_plan(state, player, command.radius)
    if len(plan) == 0:
        return _fail(envelope, player.player_id, command.action, NOTHING_FOUND, lines)

    world = state.world
    task = PlacementTask(
        owner=player.player_id,
        plan=plan,
        pool=pool,
        registry=state.registry,
        is_valid=world.is_spawnable,
        place=world.place_button,
        profile=profile_for(command.fast),
        progress_interval=state.progress_interval,
        clock=state.clock,
    )
    if not task.start():
        # Another confirm won the race between our check and registration
        return _fail(envelope, player.player_id, command.action, ALREADY_RUNNING)

    started = TaskStarted(
        player_id=player.player_id,
        radius=command.radius,
        positions=len(plan),
        unlimited=player.operator,
        fast=command.fast,
    )
    return _ok(envelope, player.player_id, command.action, lines), [started]


def process_stop(envelope: Envelope, command: Command, state: ServerState) -> CommandOutcome:
    """Cancel the player's task, if any."""
    task = state.registry.cancel(command.player_id)
    if task is None:
        return _fail(envelope, command.player_id, command.action, NOTHING_TO_STOP)

    cancelled = TaskCancelled(player_id=command.player_id, placed=task.placed_count)
    result = _ok(envelope, command.player_id, command.action, ["SpawnProof task stopped."])
    return result, [cancelled]


def process_help(envelope: Envelope, command: Command) -> CommandOutcome:
    """Usage text. Available to anyone."""
    return _ok(envelope, command.player_id, command.action, list(HELP_LINES)), []


def process_tick(state: ServerState) -> tuple[int, list[TaskEvent]]:
    """Advance the tick and step every live task once.

    Returns (tick_number, events) where each event names its player.
    """
    tick = state.advance_tick()
    events: list[TaskEvent] = []
    for task in state.registry.active_tasks():
        events.extend(task.step())
    return tick, events


# --- Result helpers ---


def _ok(
    envelope: Envelope, player_id: str, action: str, lines: list[str] | None = None
) -> CommandResult:
    return CommandResult(
        reference_msg_id=envelope.id,
        player_id=player_id,
        action=str(action),
        code=1,
        lines=lines or [],
    )


def _fail(
    envelope: Envelope,
    player_id: str,
    action: str,
    reason: str,
    lines: list[str] | None = None,
) -> CommandOutcome:
    logger.warning("%s from %s rejected: %s", action, player_id, reason)
    result = CommandResult(
        reference_msg_id=envelope.id,
        player_id=player_id,
        action=str(action),
        code=0,
        reason=reason,
        lines=lines or [],
    )
    return result, []
