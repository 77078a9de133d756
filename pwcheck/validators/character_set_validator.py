"""Character Set Validator — only lowercase a-z; no digits, capitals, symbols or spaces."""

import re

from pwcheck.validators.base import BaseValidator
from pwcheck.validators.models import CheckName

APPROVED_CHARACTER_SET = re.compile(r"[a-z]+")


class CharacterSetValidator(BaseValidator):
    """Accepts non-empty candidates made entirely of approved letters."""

    @property
    def name(self) -> str:
        return "CharacterSetValidator"

    @property
    def check(self) -> CheckName:
        return CheckName.APPROVED_CHARACTERS

    def is_approved_character_set(self, candidate: str) -> bool:
        # fullmatch, not match with "$": "abc\n" must fail
        return APPROVED_CHARACTER_SET.fullmatch(candidate) is not None

    def passes(self, candidate: str) -> bool:
        return self.is_approved_character_set(candidate)
