"""Base validator — abstract class implementing the Strategy Pattern.

Each validator is a standalone, independently testable unit holding one rule.
New rules are added without modifying the evaluator.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pwcheck.validators.models import DEFAULT_LIMITS, CheckName, CheckOutcome, PolicyLimits
from pwcheck.validators.reference_data import VOWELS


class BaseValidator(ABC):
    """Abstract base for all password policy validators.

    Contract:
        - passes() is deterministic: same candidate → same result
        - passes() is total: any string, including "", returns a bool
        - No I/O, no shared mutable state
    """

    def __init__(self, limits: Optional[PolicyLimits] = None):
        self.limits = limits or DEFAULT_LIMITS

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @property
    @abstractmethod
    def check(self) -> CheckName:
        """Identity reported in CheckOutcome."""
        ...

    @abstractmethod
    def passes(self, candidate: str) -> bool:
        """Return True when this rule allows the candidate to be accepted."""
        ...

    def evaluate(self, candidate: str) -> CheckOutcome:
        """Run the rule and attribute the result to this check."""
        return CheckOutcome(check=self.check, passed=self.passes(candidate))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(limits={self.limits!r})"

    # ── Helper Methods ──

    @staticmethod
    def _is_vowel(char: str) -> bool:
        return char in VOWELS
