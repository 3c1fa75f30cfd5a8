"""
Startup wiring.

Builds the alias registry and oracle catalog from configuration
documents, reports every diagnostic in one place, and returns the
application context and dispatcher.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from src.engine.catalog import OracleCatalog
from src.engine.context import AppContext
from src.engine.dispatcher import Dispatcher
from src.engine.models import BotConfig
from src.engine.registry import AliasRegistry
from src.models.diagnostic import log_diagnostics
from src.services.commands import COMMAND_HANDLERS
from src.skills.dice import Roller, d

if TYPE_CHECKING:
    from src.transport.interfaces import MessageSender

logger = logging.getLogger(__name__)


def build_app_context(
    config: BotConfig,
    commands_document: Any,
    oracles_document: Any,
    sender: MessageSender,
    roller: Roller = d,
) -> AppContext:
    """
    Validate configuration and build the application context.

    Never raises on bad configuration: invalid entries are skipped and
    logged as diagnostics.
    """
    registry = AliasRegistry.build(commands_document, supported={k.value for k in COMMAND_HANDLERS})
    catalog = OracleCatalog.build(oracles_document)

    count = log_diagnostics([*registry.diagnostics, *catalog.diagnostics], logger)
    logger.info(
        "Loaded %d commands and %d oracle tables (%d diagnostics)",
        len(registry),
        len(catalog),
        count,
    )

    return AppContext(
        config=config,
        registry=registry,
        catalog=catalog,
        sender=sender,
        roller=roller,
    )


def create_dispatcher(app: AppContext) -> Dispatcher:
    """A dispatcher wired to every built-in command handler."""
    return Dispatcher(app, COMMAND_HANDLERS)
