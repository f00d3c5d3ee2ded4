import logging

import pytest

from homeworkrunner.chain.core import (
    AccountInfo,
    BorshIoError,
    GreetingStruct,
    IncorrectProgramId,
    NotEnoughAccountKeys,
    ProgramError,
    Pubkey,
    hello_world,
    increment_counter,
)


def test_zero_key_is_all_ones_in_base58():
    assert str(Pubkey(bytes(32))) == "1" * 32
    assert Pubkey.from_string("1" * 32) == Pubkey(bytes(32))


def test_base58_round_trip():
    key = Pubkey.unique()
    assert Pubkey.from_string(str(key)) == key


def test_from_string_rejects_bad_character():
    with pytest.raises(ValueError):
        Pubkey.from_string("0OIl")


def test_pubkey_rejects_wrong_length():
    with pytest.raises(ValueError):
        Pubkey(bytes(31))


def test_unique_keys_are_distinct():
    keys = {Pubkey.unique() for _ in range(3)}
    assert len(keys) == 3


def test_zero_key_is_on_curve():
    assert Pubkey(bytes(32)).is_on_curve() is True


def test_find_program_address_is_off_curve_and_reproducible():
    program_id = Pubkey.unique()
    address, bump = Pubkey.find_program_address([b"seed"], program_id)
    assert address.is_on_curve() is False
    assert 0 < bump <= 255
    assert Pubkey.create_program_address([b"seed", bytes([bump])], program_id) == address


def test_find_program_address_depends_on_seeds():
    program_id = Pubkey.unique()
    first, _ = Pubkey.find_program_address([b"alpha"], program_id)
    second, _ = Pubkey.find_program_address([b"beta"], program_id)
    assert {first, second} == {first, second} and len({first, second}) == 2


def test_create_program_address_rejects_long_seed():
    with pytest.raises(ValueError):
        Pubkey.create_program_address([bytes(33)], Pubkey.unique())


def test_greeting_wire_format():
    assert GreetingStruct(1).to_bytes() == b"\x01\x00\x00\x00"


def test_greeting_round_trip():
    greeting = GreetingStruct(123456)
    assert GreetingStruct.from_bytes(greeting.to_bytes()) == greeting


@pytest.mark.parametrize("data", [b"", b"\x00\x00", b"\x00" * 5])
def test_greeting_rejects_wrong_length(data):
    with pytest.raises(BorshIoError):
        GreetingStruct.from_bytes(data)


def _greeted_account(program_id, counter=0):
    return AccountInfo(
        key=Pubkey.unique(),
        owner=program_id,
        data=GreetingStruct(counter).to_bytes(),
        is_writable=True,
    )


def test_increment_counter_updates_account():
    program_id = Pubkey.unique()
    account = _greeted_account(program_id)
    result = increment_counter(program_id, [account], b"")
    assert result == GreetingStruct(1)
    assert bytes(account.data) == GreetingStruct(1).to_bytes()
    second = increment_counter(program_id, [account], b"")
    assert second.counter == 2
    assert GreetingStruct.from_bytes(account.data) == second


def test_increment_counter_rejects_foreign_account():
    program_id = Pubkey.unique()
    account = _greeted_account(Pubkey.unique(), counter=5)
    with pytest.raises(IncorrectProgramId):
        increment_counter(program_id, [account], b"")
    assert GreetingStruct.from_bytes(account.data).counter == 5


def test_increment_counter_needs_an_account():
    with pytest.raises(NotEnoughAccountKeys):
        increment_counter(Pubkey.unique(), [], b"")


def test_program_errors_share_a_base():
    with pytest.raises(ProgramError):
        increment_counter(Pubkey.unique(), [], b"")


def test_hello_world_logs_greeting(caplog):
    with caplog.at_level(logging.INFO, logger="homeworkrunner.chain.core"):
        hello_world(Pubkey.unique(), [], b"ignored")
    assert "[lib] Hello World Rust program entrypoint" in caplog.messages