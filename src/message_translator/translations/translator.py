"""
Translate backend messages into user-facing Portuguese text.

Error lookup runs in four tiers, first match wins:
  1. special cases (Postgres unique violation, see special_cases.py)
  2. exact key match in the error table
  3. case-insensitive substring match, walking the error table in order
  4. the original message, unchanged

Success lookup is an exact key match with the same fallback.
"""

import logging
from typing import Mapping, Sequence

from .special_cases import SpecialCaseRule, UNIQUE_VIOLATION_RULES, match_special_case
from .tables import ERROR_TRANSLATIONS, SUCCESS_TRANSLATIONS

logger = logging.getLogger(__name__)

# Raw upstream messages are only logged at DEBUG and truncated to this length.
_SNIPPET_LENGTH = 200


def _snippet(text: str) -> str:
    return (text or "")[:_SNIPPET_LENGTH]


class MessageTranslator:
    """
    Stateless translator over read-only tables.

    Args:
        error_translations: ordered mapping used for exact and partial error matching.
        success_translations: mapping used for exact success matching.
        special_cases: rules checked before the error table.
    """

    def __init__(
        self,
        error_translations: Mapping[str, str] = ERROR_TRANSLATIONS,
        success_translations: Mapping[str, str] = SUCCESS_TRANSLATIONS,
        special_cases: Sequence[SpecialCaseRule] = UNIQUE_VIOLATION_RULES,
    ):
        self.error_translations = error_translations
        self.success_translations = success_translations
        self.special_cases = tuple(special_cases)

    def translate_error(self, error: str) -> str:
        """
        Return the localized text for an error message, or the message itself.

        Special cases run before exact matching, so a message that equals a
        table key but carries the 23505 code still gets the special-case text.
        """
        special = match_special_case(error, self.special_cases)
        if special is not None:
            logger.debug("translator.special_case", extra={"message_snippet": _snippet(error)})
            return special

        exact = self.error_translations.get(error)
        if exact is not None:
            logger.debug("translator.exact_match", extra={"key": error})
            return exact

        # Plain substring containment, no word boundaries: "timeout" also hits "timeouts".
        lowered = error.lower()
        for key, value in self.error_translations.items():
            if key.lower() in lowered:
                logger.debug("translator.partial_match", extra={"key": key})
                return value

        logger.debug("translator.untranslated", extra={"message_snippet": _snippet(error)})
        return error

    def translate_success(self, message: str) -> str:
        """Exact-match lookup only; unknown messages are returned unchanged."""
        translated = self.success_translations.get(message)
        if translated is None:
            return message
        return translated

    def translate_exception(self, exc: object, default: str = "") -> str:
        """
        Translate the message carried by an exception.

        Supabase/PostgREST client errors expose a `message` attribute; it is
        preferred over str(exc). When neither yields text, `default` is
        translated instead.
        """
        text = _exception_message(exc) or default
        return self.translate_error(text)


def _exception_message(exc: object) -> str | None:
    # A broken `message` property or __str__ counts as "no text"; translate_exception never raises.
    try:
        message = getattr(exc, "message", None)
    except Exception:
        logger.debug("translator.message_attribute_failed", exc_info=True)
        message = None
    if isinstance(message, str) and message:
        return message

    if isinstance(exc, BaseException):
        try:
            text = str(exc)
        except Exception:
            logger.debug("translator.str_failed", exc_info=True)
            return None
        if text:
            return text

    return None


# Default instance backing the module-level helpers
default_translator = MessageTranslator()

translate_error = default_translator.translate_error
translate_success = default_translator.translate_success
translate_exception = default_translator.translate_exception


__all__ = [
    "MessageTranslator",
    "default_translator",
    "translate_error",
    "translate_success",
    "translate_exception",
]
