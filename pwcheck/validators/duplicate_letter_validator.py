"""Duplicate Letter Validator — rejects the same letter twice in a row.

Exempt letters (by default 'e' and 'o', so "ee" and "oo") may repeat. Longer
runs of an exempt letter such as "eee" pass this rule; the run rule is what
rejects them.
"""

from pwcheck.validators.base import BaseValidator
from pwcheck.validators.models import CheckName


class DuplicateLetterValidator(BaseValidator):
    """Flags immediately repeated letters that are not in the exempt set."""

    @property
    def name(self) -> str:
        return "DuplicateLetterValidator"

    @property
    def check(self) -> CheckName:
        return CheckName.NO_DISALLOWED_REPEAT

    def has_disallowed_repeat(self, candidate: str) -> bool:
        """Return True at the first adjacent pair of identical, non-exempt letters.

        Args:
            candidate: Password text under evaluation

        Returns:
            True if the candidate must be rejected by this rule
        """
        exempt = self.limits.exempt_duplicates
        for previous, current in zip(candidate, candidate[1:]):
            if previous == current and current not in exempt:
                return True
        return False

    def passes(self, candidate: str) -> bool:
        return not self.has_disallowed_repeat(candidate)
