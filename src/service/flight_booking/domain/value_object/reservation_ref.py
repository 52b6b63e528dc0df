"""
Reservation reference (PNR) generation.

Six characters drawn with `secrets` from a 32-symbol alphabet that leaves out
0/O and 1/I, giving 32**6 (~1.07e9) codes. Uniqueness is finally guaranteed by
the existence check in the ledger transaction plus the unique index.
"""

import secrets

PNR_ALPHABET = '23456789ABCDEFGHJKLMNPQRSTUVWXYZ'
PNR_LENGTH = 6


def generate_pnr() -> str:
    return ''.join(secrets.choice(PNR_ALPHABET) for _ in range(PNR_LENGTH))


def normalize_pnr(value: str) -> str:
    return value.strip().upper()


def is_valid_pnr(value: str) -> bool:
    return len(value) == PNR_LENGTH and all(char in PNR_ALPHABET for char in value)
