# homeworkrunner

A small library for a programming homework course. It has three parts:

- `homeworkrunner.ui`: coloured status lines for terminal output.
- `homeworkrunner.chain`: example account-based programs written as plain
  Python functions over in-memory accounts.
- `homeworkrunner.lessons`: the functions that the homework exercises ask
  students to build, ready to call and to compare against.

## Installing

```
pip install homeworkrunner
```

## Status lines

```python
from homeworkrunner.ui import success, warn

success("Successfully ran exercise1")   # green, with a check mark
warn("Ran exercise2 with errors")       # red, with a warning sign
```

When the environment variable `NO_EMOJI` is set, the markers are plain
`✓` and `!` instead of emoji.

## Example programs

`homeworkrunner.chain.core` holds the shared pieces: `Pubkey` (32-byte
addresses with base58 text form, `Pubkey.unique()`,
`Pubkey.create_program_address` and `Pubkey.find_program_address`),
`AccountInfo`, `Instruction`, the `ProgramError` family
(`IncorrectProgramId`, `InvalidArgument`, `NotEnoughAccountKeys`,
`BorshIoError`), and two programs: `hello_world` and `increment_counter`.

```python
from homeworkrunner.chain.core import AccountInfo, Pubkey, increment_counter

program = Pubkey.unique()
account = AccountInfo(key=Pubkey.unique(), owner=program, data=bytes(4))
increment_counter(program, [account], b"")   # GreetingStruct(counter=1)
account.data                                  # bytearray(b'\x01\x00\x00\x00')
```

An account not owned by the program raises `IncorrectProgramId`.

The other modules:

- `homeworkrunner.chain.compute`: `is_prime`, `division_based(n)` (the
  n-th prime, `division_based(10) == 29`) and `process_instruction`, which
  reads n from the first byte of the instruction data and raises
  `InvalidArgument` when the data is empty.
- `homeworkrunner.chain.cpi`: `process_instruction(program_id, accounts,
  data, invoke)` builds an empty `Instruction` for the first account and
  passes it to the `invoke` callable you supply.
- `homeworkrunner.chain.pda`: `unpack` decodes instruction bytes into
  `PdaCreate` or `PdaWrite`; `create_pda`, `write_pda` and
  `process_instruction` act on them; `StringAccount` is the stored word and
  `minimum_balance` the rent-exempt balance for a data size.

  ```python
  from homeworkrunner.chain.pda import unpack

  unpack(bytes([1, 5]) + b"hello")                    # PdaWrite(seed='hello')
  unpack(bytes([0, 5]) + b"hello" + bytes([254, 100]))
  # PdaCreate(seed='hello', bump=254, account_size=100)
  ```

- `homeworkrunner.chain.lottery`: `Lottery`, `Ticket`,
  `initialise_lottery`, `buy_ticket`, `pick_winner` and `pay_out_winner`.
  Broken constraints (a player who cannot pay, a caller who is not the
  oracle, a ticket that did not win) raise `LotteryError`.
- `homeworkrunner.chain.consortium`: `Consortium`, `Member`, `Question`,
  `Answer`, and `initialise_consortium`, `add_member`, `add_question`,
  `add_answer`, `vote` and `tally`. Deadlines are compared with the `now`
  timestamp you pass in; each member votes once per question, weighted by
  their `weight`; `tally` picks the answer with the most votes, the first
  one on a tie. Broken constraints raise `ConsortiumError`.

## Lessons

```python
from homeworkrunner.lessons.basics import bigger, fizz_if_foo
from homeworkrunner.lessons.errors import ParsePosNonzeroError, parse_pos_nonzero
from homeworkrunner.lessons.traits import append_bar

bigger(10, 8)            # 10
fizz_if_foo("fuzz")      # 'bar'
append_bar("Foo")        # 'FooBar'
append_bar(["Foo"])      # ['Foo', 'Bar']

try:
    parse_pos_nonzero("-555")
except ParsePosNonzeroError as err:
    err.is_creation      # True: it parsed, but was negative
```

- `lessons.basics`: functions, conditions, characters, slices, tuples,
  iterators and strings.
- `lessons.containers`: fruit baskets (`Fruit`, `fruit_basket`,
  `fill_fruit_basket`), lists (`array_and_vec`, `vec_loop`, `fill_vec`),
  `add_twice`, `get_char`, `string_uppercase`, `option_numbers` and
  `drain_optionals`.
- `lessons.datatypes`: the messages `ChangeColor`, `Echo`, `Move` and
  `Quit` processed by `MachineState.process`, plus `Point`, `Wrapper` and
  `ReportCard`.
- `lessons.errors`: `generate_nametag_text`, `total_cost`,
  `remaining_tokens`, `PositiveNonzeroInteger`, `CreationError`,
  `ParsePosNonzeroError` and `parse_pos_nonzero`.
- `lessons.traits`: `append_bar`, `make_sausage`, `snacks` and
  `seconds_since_epoch`.

## What this package does not do

The package installs no command. It does not read an exercise list, build
or run students' exercises, verify them in order, show hints, or watch a
homework folder for changes; the `ui` helpers are only the status-line
output such a tool would print. It has no rock-paper-scissors game among
its example programs.

## Running the tests

```
pip install "homeworkrunner[test]"
pytest
```