"""Note parsing and vault enumeration."""

from lemon_rename.indexer.parser import NoteParser
from lemon_rename.indexer.vault import Vault

__all__ = ["NoteParser", "Vault"]
