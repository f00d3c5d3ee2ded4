"""A program that calls the hello-world program through a cross-program call."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from homeworkrunner.chain.core import (
    AccountInfo,
    Instruction,
    Pubkey,
    next_account_info,
)

logger = logging.getLogger(__name__)

Invoke = Callable[[Instruction, list[AccountInfo]], object]


def process_instruction(
    program_id: Pubkey,
    accounts: Sequence[AccountInfo],
    instruction_data: bytes,
    invoke: Invoke,
) -> None:
    """Invoke the program whose account is passed first, with no data."""
    logger.info("[entrypoint] CPI")
    helloworld_account = next_account_info(iter(accounts))
    instruction = Instruction(program_id=helloworld_account.key, accounts=[], data=b"")
    logger.info("[entrypoint] Calling helloworld")
    invoke(instruction, [helloworld_account])