"""Formatting predicates for contact details.

Phone numbers follow the domestic ``0XX-XXXX-XXXX`` layout (one to four digits
in the first two groups) and postal codes the ``XXX-XXXX`` layout.
"""
from __future__ import annotations

import re

PHONE_NUMBER_PATTERN = re.compile(r"^0\d{1,4}-\d{1,4}-\d{4}$")
POSTAL_CODE_PATTERN = re.compile(r"^\d{3}-\d{4}$")


def is_valid_phone_number(value: str) -> bool:
    return bool(PHONE_NUMBER_PATTERN.fullmatch(value))


def is_valid_postal_code(value: str) -> bool:
    return bool(POSTAL_CODE_PATTERN.fullmatch(value))
