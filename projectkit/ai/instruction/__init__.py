"""Instruction sets: categorized rules for coding agents."""

from .errors import (
    InstructionParseError,
    InstructionReadError,
    InstructionRepositoryError,
    InstructionValidationError,
    NoInstructionsFoundError,
)
from .loader import INSTRUCTIONS_KIND, InstructionLoader, load_instructions_from_config
from .models import Instructions
from .repository import InstructionFsRepository, InstructionRepository

__all__ = [
    "INSTRUCTIONS_KIND",
    "InstructionFsRepository",
    "InstructionLoader",
    "InstructionParseError",
    "InstructionReadError",
    "InstructionRepository",
    "InstructionRepositoryError",
    "InstructionValidationError",
    "Instructions",
    "NoInstructionsFoundError",
    "load_instructions_from_config",
]
