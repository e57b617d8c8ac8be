"""Documentation standards."""

from .errors import (
    NoStandardsFoundError,
    StandardParseError,
    StandardReadError,
    StandardRepositoryError,
    StandardValidationError,
)
from .loader import STANDARDS_KIND, StandardLoader, load_standards_from_config
from .models import RenderConfig, Standard, StandardConfig, StandardMetadata
from .repository import StandardFsRepository, StandardRepository

__all__ = [
    "NoStandardsFoundError",
    "RenderConfig",
    "STANDARDS_KIND",
    "Standard",
    "StandardConfig",
    "StandardFsRepository",
    "StandardLoader",
    "StandardMetadata",
    "StandardParseError",
    "StandardReadError",
    "StandardRepository",
    "StandardRepositoryError",
    "StandardValidationError",
    "load_standards_from_config",
]
