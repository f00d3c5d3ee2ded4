"""A program that finds the n-th prime number by trial division."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence

from homeworkrunner.chain.core import AccountInfo, InvalidArgument, Pubkey

logger = logging.getLogger(__name__)

_U8_MAX = 0xFF


def is_prime(number: int) -> bool:
    """Trial division by every integer from 2 up to half the number."""
    upper_range = int(number / 2.0 + 1.0)
    return all(number % divisor for divisor in range(2, upper_range))


def division_based(nth_prime: int) -> int:
    """Return the n-th prime; 2 is returned when n is zero."""
    if not 0 <= nth_prime <= _U8_MAX:
        raise ValueError(f"prime index must fit in one byte, got {nth_prime}")
    primes = (number for number in itertools.count(2) if is_prime(number))
    latest_prime = 2
    for found, latest_prime in enumerate(itertools.islice(primes, nth_prime), start=1):
        logger.info("%d th prime number is %d", found, latest_prime)
    return latest_prime


def process_instruction(
    program_id: Pubkey, accounts: Sequence[AccountInfo], instruction_data: bytes
) -> int:
    """Read the prime index from the first data byte and return that prime."""
    logger.info("[entrypoint] compute example entrypoint")
    if not instruction_data:
        raise InvalidArgument("instruction data must hold the prime index")
    prime_count = instruction_data[0]
    logger.info("[entrypoint] will find %d-prime", prime_count)
    prime = division_based(prime_count)
    logger.info("%d th prime number is %d", prime_count, prime)
    return prime