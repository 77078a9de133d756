"""Reference data — alphabet, vowel set, policy limits, and report templates.

These are the fixed rule parameters of the password policy. They are bundled
into ``DEFAULT_LIMITS`` at import time and never change while a batch runs.
"""

import string

# ──────────────────────────────────────────────────────────────────────
# ALPHABET
# ──────────────────────────────────────────────────────────────────────

APPROVED_LETTERS: frozenset[str] = frozenset(string.ascii_lowercase)

VOWELS: frozenset[str] = frozenset("aeiou")

# 'y' is a consonant here
CONSONANTS: frozenset[str] = APPROVED_LETTERS - VOWELS

# ──────────────────────────────────────────────────────────────────────
# POLICY LIMITS
# ──────────────────────────────────────────────────────────────────────

PASSWORD_MIN_LENGTH = 1
PASSWORD_MAX_LENGTH = 20
CONSECUTIVE_CHARACTER_LIMIT = 3

# Letters that may appear twice in a row ("ee", "oo")
ALLOWED_DUPLICATE_LETTERS: frozenset[str] = frozenset("eo")

# ──────────────────────────────────────────────────────────────────────
# INPUT / OUTPUT FORMAT
# ──────────────────────────────────────────────────────────────────────

END_OF_INPUT_SENTINEL = "end"

# "\r\n" matches the line endings of the sample results file
LINE_TERMINATOR = "\r\n"
ACCEPTABLE_TEMPLATE = "<{candidate}> is acceptable." + LINE_TERMINATOR
NOT_ACCEPTABLE_TEMPLATE = "<{candidate}> is not acceptable." + LINE_TERMINATOR
DIAGNOSTIC_TEMPLATE = "<{candidate}> checks: {outcomes}" + LINE_TERMINATOR
