"""
Exception hierarchy for the text chunking engine.

Text input never raises; these cover invalid numeric/strategy arguments,
bad configuration and the recoverable segmentation-provider failure.
"""

from typing import Any, Dict, Optional


class TextChunkerError(Exception):
    """Base class for all chunker errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            'error_type': type(self).__name__,
            'message': self.message,
            'error_code': self.error_code,
            'details': self.details,
        }


class ValidationError(TextChunkerError, ValueError):
    """Invalid chunk size, threshold or strategy argument."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        validation_rule: Optional[str] = None,
        **kwargs: Any,
    ):
        details = kwargs.pop('details', None) or {}
        details.update({
            'field': field,
            'value': value,
            'validation_rule': validation_rule,
        })
        super().__init__(message, details=details, **kwargs)


class ConfigurationError(TextChunkerError):
    """Environment configuration could not be interpreted."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs: Any):
        details = kwargs.pop('details', None) or {}
        details['config_key'] = config_key
        super().__init__(message, details=details, **kwargs)


class SegmentationError(TextChunkerError):
    """A sentence segmentation provider could not be built for a locale."""

    def __init__(
        self,
        message: str,
        locale: Optional[str] = None,
        provider: Optional[str] = None,
        **kwargs: Any,
    ):
        details = kwargs.pop('details', None) or {}
        details.update({'locale': locale, 'provider': provider})
        super().__init__(message, details=details, **kwargs)


__all__ = [
    'TextChunkerError',
    'ValidationError',
    'ConfigurationError',
    'SegmentationError',
]
