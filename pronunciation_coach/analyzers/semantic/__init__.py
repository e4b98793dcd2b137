"""의미 검증 모듈."""

from .semantic_validator import (
    ISemanticValidator,
    FormTableValidator,
    format_context,
    identify_minor_pronunciation_error,
)

__all__ = [
    'ISemanticValidator',
    'FormTableValidator',
    'format_context',
    'identify_minor_pronunciation_error',
]
