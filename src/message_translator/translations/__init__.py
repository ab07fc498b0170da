from .tables import ERROR_TRANSLATIONS, SUCCESS_TRANSLATIONS
from .special_cases import PostgresErrorCodes, SpecialCaseRule, UNIQUE_VIOLATION_RULES, match_special_case
from .translator import (
    MessageTranslator,
    default_translator,
    translate_error,
    translate_success,
    translate_exception,
)

__all__ = [
    "ERROR_TRANSLATIONS",
    "SUCCESS_TRANSLATIONS",
    "PostgresErrorCodes",
    "SpecialCaseRule",
    "UNIQUE_VIOLATION_RULES",
    "match_special_case",
    "MessageTranslator",
    "default_translator",
    "translate_error",
    "translate_success",
    "translate_exception",
]

# message_translator/
# │
# ├── translations/
# │   ├── __init__.py
# │   ├── tables.py           # Error / success translation tables (order matters for errors)
# │   ├── special_cases.py    # Postgres unique-violation rules checked before the tables
# │   └── translator.py       # MessageTranslator + module-level helpers
