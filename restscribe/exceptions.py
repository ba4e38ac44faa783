"""
Custom exceptions for restscribe.
"""
from typing import Dict, List, Optional


class ScribeError(Exception):
    """Base exception for documentation extraction errors."""

    pass


class ContainerResolutionError(ScribeError):
    """Raised when the container cannot build a class."""

    def __init__(self, message: str, target: Optional[type] = None, original_exception: Optional[BaseException] = None):
        self.message = message
        self.target = target
        self.original_exception = original_exception
        super().__init__(self.message)


class RuleParsingError(ScribeError):
    """Raised when a validation rule declaration has an unsupported shape."""

    pass


class ValidationFailed(ScribeError):
    """Raised when a form request fails validation after being resolved."""

    def __init__(self, errors: Dict[str, List[str]], message="The given data was invalid."):
        self.errors = errors
        self.message = message
        super().__init__(self.message)
