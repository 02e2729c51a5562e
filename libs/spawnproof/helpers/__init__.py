from spawnproof.helpers.factory import create_message, parse_message, parse_payload
from spawnproof.helpers.text import HELP_LINES, format_stacks, format_time, render_lines
from spawnproof.helpers.validation import format_validation_error, validate_message

__all__ = [
    "HELP_LINES",
    "create_message",
    "format_stacks",
    "format_time",
    "format_validation_error",
    "parse_message",
    "parse_payload",
    "render_lines",
    "validate_message",
]
