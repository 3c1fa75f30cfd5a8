"""
Configuration document loading.

Reads the command and oracle documents as plain JSON data. Validation
happens later, in the alias registry and oracle catalog.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

from src.content.defaults import DEFAULT_COMMANDS, DEFAULT_ORACLES
from src.engine.models import BotConfig

logger = logging.getLogger(__name__)


def load_json_document(path: Path | str) -> Any:
    """
    Read one JSON document.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
    """
    path = Path(path)
    with path.open(encoding="utf-8-sig") as f:
        document = json.load(f)
    logger.debug("Loaded configuration document %s", path)
    return document


def _read_or_none(path: Path) -> Any:
    try:
        return load_json_document(path)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Could not read configuration document %s: %s", path, e)
        return None


def load_documents(config: BotConfig) -> tuple[Any, Any]:
    """
    Load the command and oracle documents named by the configuration.

    Falls back to the bundled defaults for any path that is not set. A
    document that cannot be read comes back as None, which the registry
    and catalog report as a diagnostic.

    Returns:
        (commands document, oracles document)
    """
    if config.commands_path is not None:
        commands = _read_or_none(config.commands_path)
    else:
        commands = copy.deepcopy(DEFAULT_COMMANDS)

    if config.oracles_path is not None:
        oracles = _read_or_none(config.oracles_path)
    else:
        oracles = copy.deepcopy(DEFAULT_ORACLES)

    return commands, oracles
