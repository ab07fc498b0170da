import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

logger = logging.getLogger(__name__)

# =================================================================================================================
# Postgres error code mapping
# =================================================================================================================

# https://www.postgresql.org/docs/current/errcodes-appendix.html
class PostgresErrorCodes(str, Enum):
    UNIQUE_VIOLATION = "23505"
    NOT_NULL_VIOLATION = "23502"
    FOREIGN_KEY_VIOLATION = "23503"
    CHECK_VIOLATION = "23514"


# =================================================================================================================
# Special-case rules
# =================================================================================================================

@dataclass(frozen=True)
class SpecialCaseRule:
    """
    A hard-coded rule checked before any table lookup.

    The rule fires when the message contains any of `triggers` and, if
    `conditions` is not empty, also any of `conditions`. Matching is
    case-sensitive substring containment.
    """

    triggers: tuple[str, ...]
    conditions: tuple[str, ...]
    message: str

    def matches(self, text: str) -> bool:
        if not _match_any(text, self.triggers):
            return False
        if not self.conditions:
            return True
        return _match_any(text, self.conditions)


def _match_any(msg: str, keywords: Sequence[str]) -> bool:
    return any(keyword in msg for keyword in keywords)


UNIQUE_VIOLATION_TRIGGERS: tuple[str, ...] = (PostgresErrorCodes.UNIQUE_VIOLATION.value, "duplicate key")

# Order matters: the column-specific rule must come before the generic one.
UNIQUE_VIOLATION_RULES: tuple[SpecialCaseRule, ...] = (
    SpecialCaseRule(
        triggers=UNIQUE_VIOLATION_TRIGGERS,
        conditions=("alunos_numero_processo_key", "numero_processo"),
        message=(
            "Este número de processo já está em uso. Por favor, use um número diferente "
            "ou deixe o campo vazio para gerar automaticamente."
        ),
    ),
    SpecialCaseRule(
        triggers=UNIQUE_VIOLATION_TRIGGERS,
        conditions=(),
        message="Este valor já existe no sistema. Por favor, use um valor único.",
    ),
)


def match_special_case(text: str, rules: Sequence[SpecialCaseRule] = UNIQUE_VIOLATION_RULES) -> str | None:
    """
    Return the message of the first rule that fires for `text`, or None.
    """
    for index, rule in enumerate(rules):
        if rule.matches(text):
            logger.debug("special_case.matched", extra={"rule_index": index, "triggers": list(rule.triggers)})
            return rule.message
    return None


__all__ = [
    "PostgresErrorCodes",
    "SpecialCaseRule",
    "UNIQUE_VIOLATION_TRIGGERS",
    "UNIQUE_VIOLATION_RULES",
    "match_special_case",
]
