"""Length Validator — candidate length must sit within the policy bounds."""

from pwcheck.validators.base import BaseValidator
from pwcheck.validators.models import CheckName


class LengthValidator(BaseValidator):

    @property
    def name(self) -> str:
        return "LengthValidator"

    @property
    def check(self) -> CheckName:
        return CheckName.LENGTH

    def is_valid_length(self, candidate: str) -> bool:
        # Measured in UTF-8 bytes
        length = len(candidate.encode("utf-8"))
        return self.limits.min_length <= length <= self.limits.max_length

    def passes(self, candidate: str) -> bool:
        return self.is_valid_length(candidate)
