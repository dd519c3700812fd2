"""Built-in rename suggestion strategies."""

from lemon_rename.suggest.strategies.folder import FolderNameStrategy
from lemon_rename.suggest.strategies.historical import (
    H1WithHistoricalPrefixStrategy,
    H1WithHistoricalSuffixStrategy,
)
from lemon_rename.suggest.strategies.keywords import KeywordExtractionStrategy
from lemon_rename.suggest.strategies.links import LinkRelationshipStrategy
from lemon_rename.suggest.strategies.path_context import PathContextStrategy
from lemon_rename.suggest.strategies.tags import TagDrivenStrategy
from lemon_rename.suggest.strategies.time_intelligence import TimeIntelligenceStrategy
from lemon_rename.suggest.strategies.title import H1TitleStrategy
from lemon_rename.suggest.strategies.version import SmartVersionStrategy

__all__ = [
    "FolderNameStrategy",
    "H1TitleStrategy",
    "H1WithHistoricalPrefixStrategy",
    "H1WithHistoricalSuffixStrategy",
    "KeywordExtractionStrategy",
    "LinkRelationshipStrategy",
    "PathContextStrategy",
    "SmartVersionStrategy",
    "TagDrivenStrategy",
    "TimeIntelligenceStrategy",
]
