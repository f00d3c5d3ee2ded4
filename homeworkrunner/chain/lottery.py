"""A lottery: players buy tickets, an oracle picks the winning index."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from homeworkrunner.chain.core import AccountInfo, Pubkey

logger = logging.getLogger(__name__)

_U32_MASK = 0xFFFFFFFF


def _zero_key() -> Pubkey:
    return Pubkey(bytes(32))


class LotteryError(Exception):
    """An account constraint of a lottery instruction was violated."""


@dataclass
class Lottery:
    """The lottery account; its lamports hold the prize pool."""

    key: Pubkey
    lamports: int = 0
    authority: Pubkey = field(default_factory=_zero_key)
    oracle: Pubkey = field(default_factory=_zero_key)
    winner: Pubkey = field(default_factory=_zero_key)
    winner_index: int = 0
    count: int = 0
    ticket_price: int = 0


@dataclass
class Ticket:
    """A ticket account derived from the lottery and the ticket index."""

    key: Pubkey
    submitter: Pubkey
    idx: int


def initialise_lottery(
    lottery: Lottery, admin: AccountInfo, ticket_price: int, oracle: Pubkey
) -> None:
    """Set up a fresh lottery owned by admin."""
    lottery.authority = admin.key
    lottery.count = 0
    lottery.ticket_price = ticket_price
    lottery.oracle = oracle


def buy_ticket(lottery: Lottery, player: AccountInfo, program_id: Pubkey) -> Ticket:
    """Pay the ticket price into the lottery and return the new ticket."""
    if player.lamports < lottery.ticket_price:
        raise LotteryError("player cannot afford a ticket")
    ticket_key, _bump = Pubkey.find_program_address(
        [lottery.count.to_bytes(4, "big"), bytes(lottery.key)], program_id
    )
    player.lamports -= lottery.ticket_price
    lottery.lamports += lottery.ticket_price

    ticket = Ticket(key=ticket_key, submitter=player.key, idx=lottery.count)
    lottery.count = (lottery.count + 1) & _U32_MASK
    logger.info("ticket %d sold to %s", ticket.idx, player.key)
    return ticket


def pick_winner(lottery: Lottery, oracle: AccountInfo, winner: int) -> None:
    """Record the winning ticket index; only the lottery's oracle may do this."""
    if lottery.oracle != oracle.key:
        raise LotteryError("only the oracle may pick the winner")
    lottery.winner_index = winner


def pay_out_winner(lottery: Lottery, winner: AccountInfo, ticket: Ticket) -> None:
    """Move the whole lottery balance to the holder of the winning ticket."""
    if ticket.submitter != winner.key or ticket.idx != lottery.winner_index:
        raise LotteryError("ticket does not belong to the winner")
    balance = lottery.lamports
    lottery.lamports -= balance
    winner.lamports += balance