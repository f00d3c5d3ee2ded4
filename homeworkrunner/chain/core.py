"""Accounts, keys and the hello-world and counter programs."""

from __future__ import annotations

import hashlib
import itertools
import logging
import struct
import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

PUBKEY_BYTES = 32
MAX_SEED_LEN = 32
MAX_SEEDS = 16
PDA_MARKER = b"ProgramDerivedAddress"

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

_P = 2**255 - 19
_D = (-121665 * pow(121666, _P - 2, _P)) % _P
_SQRT_M1 = pow(2, (_P - 1) // 4, _P)


class ProgramError(Exception):
    """Base class for errors a program returns."""


class IncorrectProgramId(ProgramError):
    """The account is not owned by the executing program."""


class InvalidArgument(ProgramError):
    """The instruction data is not valid."""


class NotEnoughAccountKeys(ProgramError):
    """Fewer accounts were passed than the program needs."""


class BorshIoError(ProgramError):
    """Serialising or deserialising account data failed."""


def _b58encode(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    leading = len(data) - len(data.lstrip(b"\0"))
    return "1" * leading + "".join(reversed(digits))


def _b58decode(text: str) -> bytes:
    number = 0
    for char in text:
        index = _ALPHABET.find(char)
        if index < 0:
            raise ValueError(f"invalid base58 character {char!r}")
        number = number * 58 + index
    leading = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\0" * leading + body


_unique_counter = itertools.count(1)
_unique_lock = threading.Lock()


@dataclass(frozen=True)
class Pubkey:
    """A 32-byte account address."""

    raw: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", bytes(self.raw))
        if len(self.raw) != PUBKEY_BYTES:
            raise ValueError(f"a public key is {PUBKEY_BYTES} bytes, got {len(self.raw)}")

    @classmethod
    def from_string(cls, text: str) -> Pubkey:
        """Parse a base58 address."""
        return cls(_b58decode(text))

    @classmethod
    def unique(cls) -> Pubkey:
        """Return a key different from every other key made this way."""
        with _unique_lock:
            counter = next(_unique_counter)
        return cls(counter.to_bytes(8, "big") + bytes(PUBKEY_BYTES - 8))

    def __str__(self) -> str:
        return _b58encode(self.raw)

    def __repr__(self) -> str:
        return f"Pubkey({self})"

    def __bytes__(self) -> bytes:
        return self.raw

    def is_on_curve(self) -> bool:
        """True if the bytes decompress to a point on the ed25519 curve."""
        y = int.from_bytes(self.raw, "little") & ((1 << 255) - 1)
        if y >= _P:
            return False
        y2 = y * y % _P
        u = (y2 - 1) % _P
        v = (_D * y2 + 1) % _P
        if v == 0:
            return u == 0
        x2 = u * pow(v, _P - 2, _P) % _P
        x = pow(x2, (_P + 3) // 8, _P)
        if (x * x - x2) % _P == 0:
            return True
        x = x * _SQRT_M1 % _P
        return (x * x - x2) % _P == 0

    @classmethod
    def create_program_address(cls, seeds: Sequence[bytes], program_id: Pubkey) -> Pubkey:
        """Derive an off-curve address from seeds and a program id."""
        if len(seeds) > MAX_SEEDS:
            raise ValueError("too many seeds")
        digest = hashlib.sha256()
        for seed in seeds:
            if len(seed) > MAX_SEED_LEN:
                raise ValueError("max seed length exceeded")
            digest.update(seed)
        digest.update(bytes(program_id))
        digest.update(PDA_MARKER)
        address = cls(digest.digest())
        if address.is_on_curve():
            raise ValueError("invalid seeds, address must fall off the curve")
        return address

    @classmethod
    def find_program_address(
        cls, seeds: Sequence[bytes], program_id: Pubkey
    ) -> tuple[Pubkey, int]:
        """Find the highest bump seed giving a valid program address."""
        for bump in range(255, 0, -1):
            try:
                return cls.create_program_address([*seeds, bytes([bump])], program_id), bump
            except ValueError:
                continue
        raise ProgramError("Unable to find a viable program address bump seed")


@dataclass
class AccountInfo:
    """An account as seen by a program."""

    key: Pubkey
    owner: Pubkey
    lamports: int = 0
    data: bytearray = field(default_factory=bytearray)
    is_signer: bool = False
    is_writable: bool = False
    executable: bool = False

    def __post_init__(self) -> None:
        self.data = bytearray(self.data)


@dataclass
class Instruction:
    """A call into a program."""

    program_id: Pubkey
    accounts: list[AccountInfo] = field(default_factory=list)
    data: bytes = b""


def next_account_info(accounts: Iterable[AccountInfo]) -> AccountInfo:
    """Take the next account, raising NotEnoughAccountKeys if none is left."""
    account = next(iter(accounts), None)
    if account is None:
        raise NotEnoughAccountKeys("not enough account keys")
    return account


_U32 = struct.Struct("<I")


@dataclass
class GreetingStruct:
    """The counter state stored in a greeted account."""

    counter: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> GreetingStruct:
        if len(data) < _U32.size:
            raise BorshIoError("Unexpected length of input")
        if len(data) > _U32.size:
            raise BorshIoError("Not all bytes read")
        (counter,) = _U32.unpack(bytes(data))
        return cls(counter)

    def to_bytes(self) -> bytes:
        return _U32.pack(self.counter)


def hello_world(
    program_id: Pubkey, accounts: Sequence[AccountInfo], instruction_data: bytes
) -> None:
    """Log a greeting; the accounts and data are ignored."""
    logger.info("[lib] Hello World Rust program entrypoint")


def increment_counter(
    program_id: Pubkey, accounts: Sequence[AccountInfo], instruction_data: bytes
) -> GreetingStruct:
    """Add one to the counter stored in the first account and return the new state."""
    logger.info("[lib] Solana Example2 counter program entrypoint")
    accounts_iter = iter(accounts)
    hello_account = next_account_info(accounts_iter)
    logger.info("[lib] hello account: %s", hello_account.key)

    if hello_account.owner != program_id:
        logger.info(" Greeted account does not have the correct program id")
        raise IncorrectProgramId("incorrect program id for greeted account")
    logger.info(" Greeted account has the correct program id")

    greeting = GreetingStruct.from_bytes(hello_account.data)
    greeting.counter = (greeting.counter + 1) & 0xFFFFFFFF
    logger.info(
        "Program added to the greeting counter struct stored at: %s", hello_account.key
    )
    hello_account.data[: _U32.size] = greeting.to_bytes()
    logger.info(" Greeted %d time(s)!", greeting.counter)
    return greeting