"""Vowel Presence Validator — at least one of a, e, i, o, u must appear."""

from pwcheck.validators.base import BaseValidator
from pwcheck.validators.models import CheckName


class VowelPresenceValidator(BaseValidator):

    @property
    def name(self) -> str:
        return "VowelPresenceValidator"

    @property
    def check(self) -> CheckName:
        return CheckName.VOWEL_PRESENT

    def has_vowel(self, candidate: str) -> bool:
        return any(self._is_vowel(char) for char in candidate)

    def passes(self, candidate: str) -> bool:
        return self.has_vowel(candidate)
