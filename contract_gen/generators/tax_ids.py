"""Check-digit valid CPF and CNPJ numbers."""

from __future__ import annotations

import random


def generate_cpf(rng: random.Random) -> str:
    """Generate a valid Brazilian CPF (11 digits, unformatted)."""
    digits = [rng.randint(0, 9) for _ in range(9)]
    # First check digit
    total = sum(d * w for d, w in zip(digits, range(10, 1, -1)))
    d1 = 11 - (total % 11)
    digits.append(0 if d1 >= 10 else d1)
    # Second check digit
    total = sum(d * w for d, w in zip(digits, range(11, 1, -1)))
    d2 = 11 - (total % 11)
    digits.append(0 if d2 >= 10 else d2)
    return "".join(str(d) for d in digits)


def generate_cnpj(rng: random.Random) -> str:
    """Generate a valid Brazilian CNPJ (14 digits, unformatted, branch 0001)."""
    digits = [rng.randint(0, 9) for _ in range(8)] + [0, 0, 0, 1]
    weights1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    total = sum(d * w for d, w in zip(digits, weights1))
    d1 = 11 - (total % 11)
    digits.append(0 if d1 >= 10 else d1)
    weights2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    total = sum(d * w for d, w in zip(digits, weights2))
    d2 = 11 - (total % 11)
    digits.append(0 if d2 >= 10 else d2)
    return "".join(str(d) for d in digits)
