"""
CLI-specific formatting functions for human-readable output.
"""


def format_bool(value: bool) -> str:
    """Render a boolean as a lowercase literal."""
    return "true" if value else "false"
