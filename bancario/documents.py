"""
Brazilian Taxpayer Document Module

Normalization and check-digit validation for CPF (individuals, 11 digits)
and CNPJ (legal entities, 14 digits). Documents may be given with or without
formatting punctuation; validation always works on the digits only.
"""

import re
from typing import List, Optional

CPF_LENGTH = 11
CNPJ_LENGTH = 14

# Weights for the first and second CNPJ check digits
CNPJ_FIRST_WEIGHTS = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
CNPJ_SECOND_WEIGHTS = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]

CNPJ_DISPLAY_PATTERN = re.compile(r'\d{2}\.\d{3}\.\d{3}/\d{4}-\d{2}')


def only_digits(value: Optional[str]) -> str:
    """
    Strip every non-digit character from a document string.

    Example: '123.456.789-09' -> '12345678909'
    """
    return re.sub(r'\D', '', value or '')


def _is_repeated(digits: str) -> bool:
    """Check if every digit is the same (e.g. '00000000000')"""
    return digits == digits[0] * len(digits)


def _cpf_check_digit(digits: List[int], count: int) -> int:
    """Check digit over the first ``count`` digits, weights descending to 2"""
    total = sum(digit * (count + 1 - i) for i, digit in enumerate(digits[:count]))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def _cnpj_check_digit(digits: List[int], weights: List[int]) -> int:
    """Check digit using a fixed weight sequence"""
    total = sum(digit * weight for digit, weight in zip(digits, weights))
    mod = total % 11
    return 0 if mod < 2 else 11 - mod


def is_valid_cpf(value: Optional[str]) -> bool:
    """
    Validate a CPF through its two check digits.

    Args:
        value: CPF, formatted ('123.456.789-09') or not ('12345678909')

    Returns:
        True if the document has 11 digits, is not a repeated sequence and
        both check digits match
    """
    cpf = only_digits(value)
    if len(cpf) != CPF_LENGTH or _is_repeated(cpf):
        return False

    digits = [int(c) for c in cpf]
    return (_cpf_check_digit(digits, 9) == digits[9] and
            _cpf_check_digit(digits, 10) == digits[10])


def is_valid_cnpj(value: Optional[str]) -> bool:
    """
    Validate a CNPJ through its two check digits.

    Args:
        value: CNPJ, formatted ('11.222.333/0001-81') or not ('11222333000181')

    Returns:
        True if the document has 14 digits, is not a repeated sequence and
        both check digits match
    """
    cnpj = only_digits(value)
    if len(cnpj) != CNPJ_LENGTH or _is_repeated(cnpj):
        return False

    digits = [int(c) for c in cnpj]
    return (_cnpj_check_digit(digits, CNPJ_FIRST_WEIGHTS) == digits[12] and
            _cnpj_check_digit(digits, CNPJ_SECOND_WEIGHTS) == digits[13])


def is_formatted_cnpj(value: Optional[str]) -> bool:
    """Check if a CNPJ is written exactly as NN.NNN.NNN/NNNN-NN"""
    if not value:
        return False
    return CNPJ_DISPLAY_PATTERN.fullmatch(value) is not None
