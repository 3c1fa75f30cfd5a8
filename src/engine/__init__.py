"""
Core Engine for the oracle bot.

The engine turns configuration into a dispatch table and runs commands:
- Alias registry (command aliases -> command definitions)
- Oracle catalog (table aliases -> validated oracle tables)
- Dispatcher (one chat message -> one command handler)
- Oracle resolver (table + roll -> formatted outcome)

Startup wiring lives in src.engine.bootstrap.
"""

from __future__ import annotations

from src.engine.catalog import ConfigValidationError, OracleCatalog, parse_oracle_table
from src.engine.context import AppContext, FollowUpStore
from src.engine.dispatcher import PERMISSION_DENIED, Dispatcher
from src.engine.models import (
    Author,
    BotConfig,
    Channel,
    ChannelKind,
    DispatchStatus,
    Embed,
    MessageEvent,
    ParsedCommand,
    SentMessage,
)
from src.engine.registry import AliasRegistry
from src.engine.resolver import OracleResolver, OracleResult

__all__ = [
    # Configuration
    "AliasRegistry",
    "BotConfig",
    "ConfigValidationError",
    "OracleCatalog",
    "parse_oracle_table",
    # Runtime
    "AppContext",
    "Dispatcher",
    "DispatchStatus",
    "FollowUpStore",
    "PERMISSION_DENIED",
    # Oracles
    "OracleResolver",
    "OracleResult",
    # Models
    "Author",
    "Channel",
    "ChannelKind",
    "Embed",
    "MessageEvent",
    "ParsedCommand",
    "SentMessage",
]
