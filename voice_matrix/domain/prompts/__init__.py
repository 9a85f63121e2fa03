"""Prompt validation and assembly."""

from voice_matrix.domain.prompts.assembler import AssemblyResult, PromptAssembler
from voice_matrix.domain.prompts.validator import Violation, validate_segment, validate_values

__all__ = [
    "AssemblyResult",
    "PromptAssembler",
    "Violation",
    "validate_segment",
    "validate_values",
]
