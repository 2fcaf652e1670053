import random

import pytest

from core.exceptions import InsufficientDataError, NotFoundError
from models.word_pair import WordPair
from repositories.word_pair_repo import WordPairRepository
from schemas.quiz import QuizDirection
from services.quiz_service import QuizService
from services.word_service import WordService


def test_generate_question_from_database(db_session, make_user, add_pairs):
    user = make_user()
    pairs = add_pairs(user)
    by_id = {p.id: p for p in pairs}
    svc = QuizService(db_session, rng=random.Random(2))

    for _ in range(10):
        question = svc.generate_question(user_id=user.id, direction="polish")
        target = by_id[question.question_word_id]

        assert question.question_language is QuizDirection.POLISH
        assert question.question_word == target.polish_word
        assert len(question.options) == 4
        assert len(set(question.options)) == 4
        assert question.options.count(target.ukrainian_word) == 1


def test_generate_question_requires_four_pairs(db_session, make_user, add_pairs):
    user = make_user()
    add_pairs(user, words=[("kot", "кіт"), ("pies", "собака"), ("dom", "дім")])

    with pytest.raises(InsufficientDataError):
        QuizService(db_session).generate_question(user_id=user.id, direction="UKRAINIAN")


def test_generate_question_never_mixes_owners(db_session, make_user, add_pairs):
    alice = make_user("alice")
    bob = make_user("bob")
    add_pairs(alice)
    bob_pairs = add_pairs(bob, words=[("jeden", "один"), ("dwa", "два"), ("trzy", "три"), ("cztery", "чотири")])
    bob_answers = {p.polish_word for p in bob_pairs}

    svc = QuizService(db_session)
    for _ in range(10):
        question = svc.generate_question(user_id=bob.id, direction="UKRAINIAN")
        assert set(question.options) == bob_answers


def test_check_spelling_updates_counters(db_session, make_user, add_pairs):
    user = make_user()
    pair = add_pairs(user)[0]
    svc = QuizService(db_session)

    ok = svc.check_spelling(user_id=user.id, direction="POLISH", question_word="kot", answer="кіт")
    wrong = svc.check_spelling(user_id=user.id, direction="POLISH", question_word="kot", answer="pies")

    assert ok.correct is True
    assert wrong.correct is False
    assert wrong.correct_answer == "кіт"

    db_session.expire_all()
    stored = db_session.get(WordPair, pair.id)
    assert stored.correct_count == 1
    assert stored.incorrect_count == 1


def test_check_spelling_unknown_word(db_session, make_user, add_pairs):
    user = make_user()
    add_pairs(user)

    with pytest.raises(NotFoundError):
        QuizService(db_session).check_spelling(
            user_id=user.id, direction="POLISH", question_word="samochód", answer="машина"
        )


def test_check_spelling_ties_go_to_oldest_pair(db_session, make_user, add_pairs):
    user = make_user()
    first, second = add_pairs(user, words=[("zamek", "замок"), ("zamek", "фортеця")])

    result = QuizService(db_session).check_spelling(
        user_id=user.id, direction="POLISH", question_word="Zamek", answer="фортеця"
    )

    assert result.correct is False
    assert result.correct_answer == "замок"
    db_session.expire_all()
    assert db_session.get(WordPair, first.id).incorrect_count == 1
    assert db_session.get(WordPair, second.id).incorrect_count == 0


def test_increment_counter_on_missing_pair(db_session):
    assert WordPairRepository(db_session).increment_counter(999, correct=True) is False


def test_word_service_trims_and_lists(db_session, make_user):
    user = make_user()
    svc = WordService(db_session)

    created = svc.create_word_pair(user_id=user.id, polish_word="  kot  ", ukrainian_word="  кіт  ")
    bulk = svc.create_bulk_word_pairs(user_id=user.id, pairs=[("pies", "собака"), (" dom", "дім ")])

    assert created.polish_word == "kot"
    assert created.ukrainian_word == "кіт"
    assert created.correct_count == 0
    assert created.incorrect_count == 0
    assert bulk["total_processed"] == 2

    listed = svc.list_word_pairs(user.id)
    assert [(p.polish_word, p.ukrainian_word) for p in listed] == [
        ("kot", "кіт"),
        ("pies", "собака"),
        ("dom", "дім"),
    ]
