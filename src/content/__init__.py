"""
Content for the oracle bot: bundled configuration and the document loader.
"""

from src.content.defaults import DEFAULT_COMMANDS, DEFAULT_ORACLES
from src.content.loader import load_documents, load_json_document

__all__ = [
    "DEFAULT_COMMANDS",
    "DEFAULT_ORACLES",
    "load_documents",
    "load_json_document",
]
