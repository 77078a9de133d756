"""Password policy — deterministic rule engine for candidate passwords.

Usage:
    from pwcheck.validators import policy_evaluator

    verdict = policy_evaluator.evaluate(candidate)
    if not verdict.accepted:
        # Report the candidate as not acceptable
"""

from pwcheck.validators.engine import PolicyEvaluator, policy_evaluator
from pwcheck.validators.models import (
    DEFAULT_LIMITS,
    CheckName,
    CheckOutcome,
    PolicyLimits,
    Verdict,
)
from pwcheck.validators.base import BaseValidator
from pwcheck.validators.length_validator import LengthValidator
from pwcheck.validators.character_set_validator import CharacterSetValidator
from pwcheck.validators.vowel_validator import VowelPresenceValidator
from pwcheck.validators.duplicate_letter_validator import DuplicateLetterValidator
from pwcheck.validators.run_validator import RunValidator

__all__ = [
    "PolicyEvaluator",
    "policy_evaluator",
    "DEFAULT_LIMITS",
    "CheckName",
    "CheckOutcome",
    "PolicyLimits",
    "Verdict",
    "BaseValidator",
    "LengthValidator",
    "CharacterSetValidator",
    "VowelPresenceValidator",
    "DuplicateLetterValidator",
    "RunValidator",
]
