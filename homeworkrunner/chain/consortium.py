"""A consortium that asks questions, collects answers and tallies weighted votes."""

from __future__ import annotations

import logging
from collections.abc import MutableSet, Sequence
from dataclasses import dataclass

from homeworkrunner.chain.core import AccountInfo, Pubkey

logger = logging.getLogger(__name__)

_U8_MAX = 0xFF
_U32_MASK = 0xFFFFFFFF


class ConsortiumError(Exception):
    """An account constraint of a consortium instruction was violated."""


@dataclass
class Consortium:
    """The consortium account, derived from a seed and the chairperson's key."""

    key: Pubkey
    program_id: Pubkey
    chairperson: Pubkey
    question_count: int = 0


@dataclass
class Member:
    """A member account: who the member is and how much their vote weighs."""

    address: Pubkey
    key: Pubkey
    weight: int
    propose_answers: bool


@dataclass
class Question:
    """A question put to the consortium, open until its deadline."""

    key: Pubkey
    program_id: Pubkey
    question: str
    deadline: int
    ans_counter: int = 0
    winner_idx: int = 0
    winner_selected: bool = False


@dataclass
class Answer:
    """A proposed answer to a question and the votes it has received."""

    key: Pubkey
    text: str
    votes: int = 0


def _answer_address(question: Question, index: int) -> Pubkey:
    address, _bump = Pubkey.find_program_address(
        [bytes(question.key), bytes([index])], question.program_id
    )
    return address


def initialise_consortium(program_id: Pubkey, seed: str, chairperson: AccountInfo) -> Consortium:
    """Create a consortium chaired by the given account."""
    address, _bump = Pubkey.find_program_address(
        [seed.encode("utf-8"), bytes(chairperson.key)], program_id
    )
    return Consortium(key=address, program_id=program_id, chairperson=chairperson.key)


def add_member(
    consortium: Consortium,
    chairperson: AccountInfo,
    weight: int,
    propose_answers: bool,
    member_acc: Pubkey,
) -> Member:
    """Register a member; only the chairperson may do this."""
    if chairperson.key != consortium.chairperson:
        raise ConsortiumError("only the chairperson may add members")
    if not 0 <= weight <= _U8_MAX:
        raise ValueError(f"weight must fit in one byte, got {weight}")
    address, _bump = Pubkey.find_program_address(
        [bytes(consortium.key), bytes(member_acc)], consortium.program_id
    )
    return Member(address=address, key=member_acc, weight=weight, propose_answers=propose_answers)


def add_question(
    consortium: Consortium, chairperson: AccountInfo, question: str, deadline: int
) -> Question:
    """Create the next question of the consortium."""
    address, _bump = Pubkey.find_program_address(
        [bytes(consortium.key), consortium.question_count.to_bytes(4, "big")],
        consortium.program_id,
    )
    created = Question(
        key=address, program_id=consortium.program_id, question=question, deadline=deadline
    )
    consortium.question_count = (consortium.question_count + 1) & _U32_MASK
    return created


def add_answer(
    question: Question, member: AccountInfo, member_struct: Member, text: str, now: int
) -> Answer:
    """Propose an answer; the member must be allowed to and the question open."""
    if not member_struct.propose_answers:
        raise ConsortiumError("member may not propose answers")
    if not question.deadline > now:
        raise ConsortiumError("the question deadline has passed")
    if question.winner_selected:
        raise ConsortiumError("a winner has already been selected")
    if member_struct.key != member.key:
        raise ConsortiumError("member account does not match the signer")
    if question.ans_counter >= _U8_MAX:
        raise ConsortiumError("too many answers")
    answer = Answer(key=_answer_address(question, question.ans_counter), text=text)
    question.ans_counter += 1
    return answer


def vote(
    question: Question,
    answer: Answer,
    member: AccountInfo,
    member_struct: Member,
    voters: MutableSet[Pubkey],
    now: int,
) -> Pubkey:
    """Cast the member's weighted vote once per question; return the vote record key."""
    if not question.deadline > now:
        raise ConsortiumError("the question deadline has passed")
    if question.winner_selected:
        raise ConsortiumError("a winner has already been selected")
    if member_struct.key != member.key:
        raise ConsortiumError("member account does not match the signer")
    voted, _bump = Pubkey.find_program_address(
        [bytes(member.key), bytes(question.key)], question.program_id
    )
    if voted in voters:
        raise ConsortiumError("member has already voted on this question")
    voters.add(voted)
    answer.votes = (answer.votes + member_struct.weight) & _U32_MASK
    return voted


def tally(
    question: Question,
    consortium: Consortium,
    caller: AccountInfo,
    answers: Sequence[Answer],
    now: int,
) -> int:
    """Select the answer with the most votes; the first wins a tie."""
    allowed = caller.key == consortium.chairperson or question.deadline < now
    if not allowed or question.winner_selected:
        raise ConsortiumError("the question cannot be tallied now")
    logger.info("Receieved %d answers accounts", len(answers))
    if len(answers) != question.ans_counter:
        raise ConsortiumError("every answer of the question must be passed")

    best_votes, best_index = 0, 0
    for idx, answer in enumerate(answers):
        if _answer_address(question, idx) != answer.key:
            raise ConsortiumError(f"answer {idx} is not the question's answer account")
        logger.info("%r votes %d", answer.text, answer.votes)
        if answer.votes > best_votes:
            best_votes, best_index = answer.votes, idx

    question.winner_idx = best_index
    question.winner_selected = True
    return best_index