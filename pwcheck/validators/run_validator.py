"""Run Validator — rejects too many vowels or too many consonants in a row.

Two independent pattern searches, one for a vowel run and one for a consonant
run, combined with OR. Either match alone rejects the candidate.
"""

import re
from functools import lru_cache
from typing import Optional

from pwcheck.validators.base import BaseValidator
from pwcheck.validators.models import CheckName, PolicyLimits
from pwcheck.validators.reference_data import CONSONANTS, VOWELS

VOWEL_CLASS = "[" + "".join(sorted(VOWELS)) + "]"
CONSONANT_CLASS = "[" + "".join(sorted(CONSONANTS)) + "]"


@lru_cache(maxsize=None)
def _run_patterns(limit: int) -> tuple[re.Pattern, re.Pattern]:
    """Compile (vowel-run, consonant-run) matchers for a run length."""
    return (
        re.compile(f"{VOWEL_CLASS}{{{limit}}}"),
        re.compile(f"{CONSONANT_CLASS}{{{limit}}}"),
    )


class RunValidator(BaseValidator):
    """Flags runs of ``consecutive_limit`` or more vowels, or consonants."""

    def __init__(self, limits: Optional[PolicyLimits] = None):
        super().__init__(limits)
        self._vowel_run, self._consonant_run = _run_patterns(self.limits.consecutive_limit)

    @property
    def name(self) -> str:
        return "RunValidator"

    @property
    def check(self) -> CheckName:
        return CheckName.NO_FORBIDDEN_RUN

    def has_forbidden_run(self, candidate: str, limit: Optional[int] = None) -> bool:
        """Return True if the candidate holds a vowel run or consonant run of ``limit``.

        Args:
            candidate: Password text under evaluation
            limit: Run length to search for; defaults to the policy's consecutive_limit

        Returns:
            True if the candidate must be rejected by this rule
        """
        if limit is None or limit == self.limits.consecutive_limit:
            vowel_run, consonant_run = self._vowel_run, self._consonant_run
        else:
            if limit < 1:
                raise ValueError(f"run limit must be at least 1, got {limit}")
            vowel_run, consonant_run = _run_patterns(limit)

        return (
            vowel_run.search(candidate) is not None
            or consonant_run.search(candidate) is not None
        )

    def passes(self, candidate: str) -> bool:
        return not self.has_forbidden_run(candidate)
