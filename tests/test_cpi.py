import pytest

from homeworkrunner.chain.core import AccountInfo, NotEnoughAccountKeys, ProgramError, Pubkey
from homeworkrunner.chain.cpi import process_instruction


def _account():
    return AccountInfo(key=Pubkey.unique(), owner=Pubkey.unique(), executable=True)


class _Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, instruction, accounts):
        self.calls.append((instruction, accounts))


def test_invokes_first_account_program():
    hello = _account()
    recorder = _Recorder()
    process_instruction(Pubkey.unique(), [hello], b"", recorder)
    assert len(recorder.calls) == 1
    instruction, accounts = recorder.calls[0]
    assert instruction.program_id == hello.key
    assert instruction.data == b""
    assert instruction.accounts == []
    assert accounts == [hello]


def test_only_first_account_is_used():
    hello, other = _account(), _account()
    recorder = _Recorder()
    process_instruction(Pubkey.unique(), [hello, other], b"ignored", recorder)
    instruction, accounts = recorder.calls[0]
    assert instruction.program_id == hello.key
    assert accounts == [hello]


def test_missing_account_is_an_error():
    recorder = _Recorder()
    with pytest.raises(NotEnoughAccountKeys):
        process_instruction(Pubkey.unique(), [], b"", recorder)
    assert recorder.calls == []


def test_invoke_errors_propagate():
    def failing(instruction, accounts):
        raise ProgramError("callee failed")

    with pytest.raises(ProgramError, match="callee failed"):
        process_instruction(Pubkey.unique(), [_account()], b"", failing)