from .translations import (
    ERROR_TRANSLATIONS,
    SUCCESS_TRANSLATIONS,
    MessageTranslator,
    translate_error,
    translate_success,
    translate_exception,
)

__all__ = [
    "ERROR_TRANSLATIONS",
    "SUCCESS_TRANSLATIONS",
    "MessageTranslator",
    "translate_error",
    "translate_success",
    "translate_exception",
]
