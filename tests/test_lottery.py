import pytest

from homeworkrunner.chain.core import AccountInfo, Pubkey
from homeworkrunner.chain.lottery import (
    Lottery,
    LotteryError,
    buy_ticket,
    initialise_lottery,
    pay_out_winner,
    pick_winner,
)

PRICE = 100
START = 1000


def _account(lamports=START):
    return AccountInfo(key=Pubkey.unique(), owner=Pubkey.unique(), lamports=lamports, is_signer=True)


@pytest.fixture
def setup():
    program_id = Pubkey.unique()
    admin, oracle = _account(), _account()
    lottery = Lottery(key=Pubkey.unique())
    initialise_lottery(lottery, admin, PRICE, oracle.key)
    return program_id, admin, oracle, lottery


def test_initialise_sets_fields(setup):
    _, admin, oracle, lottery = setup
    assert lottery.authority == admin.key
    assert lottery.oracle == oracle.key
    assert lottery.ticket_price == PRICE
    assert lottery.count == 0


def test_buy_ticket_moves_lamports_and_counts(setup):
    program_id, _, _, lottery = setup
    player = _account()
    first = buy_ticket(lottery, player, program_id)
    second = buy_ticket(lottery, player, program_id)
    assert (first.idx, second.idx) == (0, 1)
    assert lottery.count == 2
    assert player.lamports == START - 2 * PRICE
    assert lottery.lamports == 2 * PRICE
    assert first.submitter == player.key
    assert first.key != second.key


def test_ticket_key_is_derived_from_count_and_lottery(setup):
    program_id, _, _, lottery = setup
    ticket = buy_ticket(lottery, _account(), program_id)
    expected, _ = Pubkey.find_program_address(
        [(0).to_bytes(4, "big"), bytes(lottery.key)], program_id
    )
    assert ticket.key == expected


def test_buy_ticket_requires_funds(setup):
    program_id, _, _, lottery = setup
    poor = _account(lamports=PRICE - 1)
    with pytest.raises(LotteryError):
        buy_ticket(lottery, poor, program_id)
    assert lottery.count == 0
    assert poor.lamports == PRICE - 1


def test_only_oracle_picks_winner(setup):
    _, admin, oracle, lottery = setup
    with pytest.raises(LotteryError):
        pick_winner(lottery, admin, 1)
    pick_winner(lottery, oracle, 1)
    assert lottery.winner_index == 1


def test_pay_out_to_winner(setup):
    program_id, _, oracle, lottery = setup
    alice, bob = _account(), _account()
    buy_ticket(lottery, alice, program_id)
    bob_ticket = buy_ticket(lottery, bob, program_id)
    pick_winner(lottery, oracle, bob_ticket.idx)
    pool = lottery.lamports
    before = bob.lamports
    pay_out_winner(lottery, bob, bob_ticket)
    assert lottery.lamports == 0
    assert bob.lamports == before + pool


def test_pay_out_rejects_wrong_winner(setup):
    program_id, _, oracle, lottery = setup
    alice, bob = _account(), _account()
    alice_ticket = buy_ticket(lottery, alice, program_id)
    buy_ticket(lottery, bob, program_id)
    pick_winner(lottery, oracle, 1)
    with pytest.raises(LotteryError):
        pay_out_winner(lottery, alice, alice_ticket)
    with pytest.raises(LotteryError):
        pay_out_winner(lottery, bob, alice_ticket)
    assert lottery.lamports == 2 * PRICE