"""
Embed options parsing.

Users describe a rich message as a JSON object:
    {"content": "optional text", "embed": {"title": "...", "description": "..."}}
Anything that cannot be read becomes an error embed instead of a failure.
"""

from __future__ import annotations

import json

from pydantic import BaseModel, ValidationError

from src.engine.models import Embed


class MessageOptions(BaseModel):
    """What to send: optional text and an optional embed."""

    content: str | None = None
    embed: Embed | None = None


def error_embed(error: Exception | str) -> Embed:
    """An embed that shows an error message in a code block."""
    return Embed(title="Error", description=f"```\n{error}\n```")


def parse_options(text: str) -> MessageOptions:
    """Read message options from JSON text; errors come back as an error embed."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return MessageOptions(embed=error_embed(e))

    if not isinstance(data, dict):
        return MessageOptions(embed=error_embed("Options must be a JSON object"))

    try:
        return MessageOptions.model_validate(data)
    except ValidationError as e:
        return MessageOptions(embed=error_embed(e))
