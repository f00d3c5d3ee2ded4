"""A program that creates program-derived accounts and stores words in them."""

from __future__ import annotations

import logging
import struct
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from homeworkrunner.chain.core import (
    AccountInfo,
    BorshIoError,
    IncorrectProgramId,
    Instruction,
    Pubkey,
    next_account_info,
)

logger = logging.getLogger(__name__)

SYSTEM_PROGRAM_ID = Pubkey(bytes(32))
ACCOUNT_STORAGE_OVERHEAD = 128
LAMPORTS_PER_BYTE_YEAR = 3480
EXEMPTION_THRESHOLD = 2.0

_CREATE_ACCOUNT = struct.Struct("<IQQ")
_LENGTH = struct.Struct("<I")

InvokeSigned = Callable[[Instruction, list[AccountInfo], list[list[bytes]]], object]


@dataclass(frozen=True)
class PdaCreate:
    """Create a program-derived account."""

    seed: str
    bump: int
    account_size: int


@dataclass(frozen=True)
class PdaWrite:
    """Store a word in a program-derived account."""

    seed: str


def _decode_seed(rest: bytes, key_length: int) -> str:
    if len(rest) < key_length:
        raise BorshIoError("Invalid parameters passed")
    try:
        return rest[:key_length].decode("utf-8")
    except UnicodeDecodeError as err:
        raise BorshIoError("Seed is not valid UTF-8") from err


def unpack(data: bytes) -> PdaCreate | PdaWrite:
    """Decode instruction bytes: flag, seed length, seed, then any extra fields."""
    data = bytes(data)
    logger.info("[instruction] Total payload: %s", list(data))
    if len(data) < 2:
        raise BorshIoError("Invalid parameters passed")
    function_flag, key_length, rest = data[0], data[1], data[2:]
    logger.info("[instruction] Received function flag: %d", function_flag)

    if function_flag == 0:
        logger.info("[instruction] Initialising PDA")
        seed = _decode_seed(rest, key_length)
        if len(rest) <= key_length:
            raise BorshIoError("Invalid parameters passed")
        bump = rest[key_length]
        account_size = rest[-1]
        logger.info("[instruction] extracted seed %r, bump %d, size %d", seed, bump, account_size)
        return PdaCreate(seed=seed, bump=bump, account_size=account_size)
    if function_flag == 1:
        logger.info("[instruction] Writing to PDA")
        return PdaWrite(seed=_decode_seed(rest, key_length))
    raise BorshIoError("Invalid function flag")


def minimum_balance(data_len: int) -> int:
    """Lamports needed for an account of this size to be rent exempt."""
    per_year = (ACCOUNT_STORAGE_OVERHEAD + data_len) * LAMPORTS_PER_BYTE_YEAR
    return int(per_year * EXEMPTION_THRESHOLD)


@dataclass
class StringAccount:
    """The state kept in a word account: one length-prefixed string."""

    word: str = ""

    @classmethod
    def from_bytes(cls, data: bytes) -> StringAccount:
        """Read a string from the start of data; trailing bytes are ignored."""
        data = bytes(data)
        if len(data) < _LENGTH.size:
            raise BorshIoError("Unexpected length of input")
        (length,) = _LENGTH.unpack_from(data)
        end = _LENGTH.size + length
        if len(data) < end:
            raise BorshIoError("Unexpected length of input")
        try:
            return cls(data[_LENGTH.size:end].decode("utf-8"))
        except UnicodeDecodeError as err:
            raise BorshIoError("invalid UTF-8 in stored word") from err

    def write_into(self, buffer: bytearray) -> None:
        """Serialise into the start of buffer, which must be large enough."""
        encoded = self.word.encode("utf-8")
        payload = _LENGTH.pack(len(encoded)) + encoded
        if len(payload) > len(buffer):
            raise BorshIoError("failed to write whole buffer")
        buffer[: len(payload)] = payload


def create_pda(
    program_id: Pubkey,
    seed: str,
    bump: int,
    account_size: int,
    accounts: Sequence[AccountInfo],
    invoke_signed: InvokeSigned,
) -> None:
    """Create the derived account, paid for by the first account, unless funded."""
    accounts_iter = iter(accounts)
    funder = next_account_info(accounts_iter)
    account_to_init = next_account_info(accounts_iter)
    logger.info(
        "[functions] %s will pay to initalise PDA at %s", funder.key, account_to_init.key
    )
    logger.info("The account has %d lamports", account_to_init.lamports)
    if account_to_init.lamports > 0:
        logger.info("This account is already initialised that account, skipping")
        return

    lamports = minimum_balance(account_size)
    instruction = Instruction(
        program_id=SYSTEM_PROGRAM_ID,
        accounts=[funder, account_to_init],
        data=_CREATE_ACCOUNT.pack(0, lamports, account_size) + bytes(program_id),
    )
    logger.info("[functions] PDA instruction created")
    invoke_signed(
        instruction,
        [funder, account_to_init],
        [[seed.encode("utf-8"), bytes([bump])]],
    )
    logger.info("[functions] PDA invoked")


def write_pda(program_id: Pubkey, seed: str, accounts: Sequence[AccountInfo]) -> None:
    """Store seed as the word in the first account, which the program must own."""
    account = next_account_info(iter(accounts))
    logger.info("Word to save in an account: %r", seed)
    if account.owner != program_id:
        logger.info("Word account does not have the correct program id")
        raise IncorrectProgramId("word account is not owned by the program")
    logger.info("Word account has the correct program id")

    word_account = StringAccount.from_bytes(account.data)
    logger.info("Will attempt to serialise %r to account %s", seed, account.key)
    word_account.word = seed
    word_account.write_into(account.data)
    logger.info("Serialisation to PDA successful")


def process_instruction(
    program_id: Pubkey,
    accounts: Sequence[AccountInfo],
    instruction_data: bytes,
    invoke_signed: InvokeSigned,
) -> None:
    """Decode the instruction and run the matching handler."""
    logger.info("[entrypoint] multifunc example entrypoint")
    instruction = unpack(instruction_data)
    logger.info("[processor] Received instruction struct: %r", instruction)
    match instruction:
        case PdaCreate(seed=seed, bump=bump, account_size=account_size):
            create_pda(program_id, seed, bump, account_size, accounts, invoke_signed)
        case PdaWrite(seed=seed):
            write_pda(program_id, seed, accounts)