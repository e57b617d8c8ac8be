"""Rulebooks: bundles of resources of several kinds shipped as one source."""

from .errors import (
    MissingRulebookMetadataError,
    RulebookError,
    RulebookParseError,
    RulebookReadError,
    RulebookValidationError,
)
from .loader import RULEBOOK_FILE_NAME, RULEBOOK_SCHEME, RulebookLoader, RulebookResolver, load_rulebooks_from_config
from .models import AIRulebook, DocRulebook, Rulebook, RulebookConfig, RulebookMetadata

__all__ = [
    "AIRulebook",
    "DocRulebook",
    "MissingRulebookMetadataError",
    "RULEBOOK_FILE_NAME",
    "RULEBOOK_SCHEME",
    "Rulebook",
    "RulebookConfig",
    "RulebookError",
    "RulebookLoader",
    "RulebookMetadata",
    "RulebookParseError",
    "RulebookReadError",
    "RulebookResolver",
    "RulebookValidationError",
    "load_rulebooks_from_config",
]
