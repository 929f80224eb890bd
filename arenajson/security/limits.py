"""
Resource limits for arenajson.
This module bounds recursion depth and content sizes while parsing and printing.
"""

from typing import Optional

from ..utils.config import ParseLimits
from .exceptions import NestingDepthError, SecurityError


class LimitValidator:
    """Validates parsing limits to prevent resource exhaustion."""

    def __init__(self, limits: Optional[ParseLimits] = None):
        self.limits = limits or ParseLimits()
        self.nesting_depth = 0

    def validate_input_size(self, size: int) -> None:
        """Validate that input size in bytes is within limits."""
        if size > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {size} exceeds limit {self.limits.max_input_size}"
            )

    def validate_string_length(self, length: int, offset: Optional[int] = None) -> None:
        """Validate that a string's byte length is within limits."""
        if length > self.limits.max_string_length:
            raise SecurityError(
                f"String length {length} exceeds limit "
                f"{self.limits.max_string_length}{_at(offset)}"
            )

    def validate_number_length(self, length: int, offset: Optional[int] = None) -> None:
        """Validate that a number lexeme's length is within limits."""
        if length > self.limits.max_number_length:
            raise SecurityError(
                f"Number length {length} exceeds limit "
                f"{self.limits.max_number_length}{_at(offset)}"
            )

    def enter_structure(self) -> None:
        """Track entering a nested structure and validate depth."""
        self.nesting_depth += 1
        if self.nesting_depth > self.limits.max_nesting_depth:
            depth = self.nesting_depth
            self.nesting_depth -= 1
            raise NestingDepthError(
                f"Nesting depth {depth} exceeds limit "
                f"{self.limits.max_nesting_depth}"
            )

    def exit_structure(self) -> None:
        """Track exiting a nested structure."""
        if self.nesting_depth > 0:
            self.nesting_depth -= 1

    def validate_object_keys(self, key_count: int) -> None:
        """Validate that object member count is within limits."""
        if key_count > self.limits.max_object_keys:
            raise SecurityError(
                f"Object key count {key_count} exceeds limit "
                f"{self.limits.max_object_keys}"
            )

    def validate_array_items(self, item_count: int) -> None:
        """Validate that array item count is within limits."""
        if item_count > self.limits.max_array_items:
            raise SecurityError(
                f"Array item count {item_count} exceeds limit "
                f"{self.limits.max_array_items}"
            )

    def reset(self) -> None:
        """Reset validator state for reuse."""
        self.nesting_depth = 0


def _at(offset: Optional[int]) -> str:
    return f" at byte {offset}" if offset is not None else ""
