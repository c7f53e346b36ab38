"""
Tests for unscramble.services.game_session module.
"""

import dataclasses

import pytest

from unscramble.config import MAX_NO_OF_WORDS, SCORE_INCREASE
from unscramble.models.game import GamePhase
from unscramble.services.game_session import GameSession
from unscramble.services.word_bank import ExhaustedWordBank, WordBank

from .conftest import solve


def test_initialization_loads_first_word(session):
    state = session.ui_state
    unscrambled = solve(session)

    assert state.current_scrambled_word != unscrambled
    assert sorted(state.current_scrambled_word) == sorted(unscrambled)
    assert state.current_word_count == 1
    assert state.score == 0
    assert not state.is_guessed_word_wrong
    assert not state.is_game_over
    assert session.phase == GamePhase.IN_PROGRESS
    assert session.user_guess == ""


def test_correct_guess_scores_and_advances(session):
    session.update_guess(solve(session))

    assert session.submit_guess() is True

    state = session.ui_state
    assert not state.is_guessed_word_wrong
    assert state.score == SCORE_INCREASE
    assert state.current_word_count == 2
    assert session.user_guess == ""


def test_guess_is_compared_case_and_whitespace_insensitively(session):
    session.update_guess(f"  {solve(session).upper()} ")

    assert session.submit_guess() is True
    assert session.ui_state.score == SCORE_INCREASE


def test_incorrect_guess_sets_error_flag_only(session):
    before = session.ui_state
    session.update_guess("and")

    assert session.submit_guess() is False

    state = session.ui_state
    assert state.is_guessed_word_wrong
    assert state.score == 0
    assert state.current_word_count == before.current_word_count
    assert state.current_scrambled_word == before.current_scrambled_word
    assert session.user_guess == "and"


def test_update_guess_clears_error_flag(session):
    session.update_guess("zzz")
    session.submit_guess()
    assert session.ui_state.is_guessed_word_wrong

    session.update_guess("zz")

    assert not session.ui_state.is_guessed_word_wrong
    assert session.user_guess == "zz"


def test_skip_keeps_score_and_advances(session):
    session.update_guess(solve(session))
    session.submit_guess()
    last_count = session.ui_state.current_word_count

    session.update_guess("wrong")
    session.submit_guess()
    session.skip()

    state = session.ui_state
    assert state.score == SCORE_INCREASE
    assert state.current_word_count == last_count + 1
    assert not state.is_guessed_word_wrong
    assert session.user_guess == ""


def test_play_through_scenario(session):
    session.update_guess(solve(session))
    session.submit_guess()
    assert (session.ui_state.score, session.ui_state.current_word_count) == (20, 2)
    assert not session.ui_state.is_guessed_word_wrong

    session.update_guess("zzz")
    session.submit_guess()
    assert (session.ui_state.score, session.ui_state.current_word_count) == (20, 2)
    assert session.ui_state.is_guessed_word_wrong

    session.skip()
    assert (session.ui_state.score, session.ui_state.current_word_count) == (20, 3)
    assert not session.ui_state.is_guessed_word_wrong

    while session.ui_state.current_word_count < MAX_NO_OF_WORDS:
        session.update_guess(solve(session))
        session.submit_guess()
        assert not session.ui_state.is_game_over

    session.update_guess(solve(session))
    session.submit_guess()

    assert session.ui_state.is_game_over
    assert session.ui_state.current_word_count == MAX_NO_OF_WORDS
    assert session.ui_state.score == 20 * (MAX_NO_OF_WORDS - 1)


def test_all_words_guessed_ends_game(session):
    expected_score = 0

    for _ in range(MAX_NO_OF_WORDS):
        expected_score += SCORE_INCREASE
        session.update_guess(solve(session))
        session.submit_guess()
        assert session.ui_state.score == expected_score

    assert session.ui_state.current_word_count == MAX_NO_OF_WORDS
    assert session.ui_state.is_game_over
    assert session.phase == GamePhase.GAME_OVER


def test_word_count_never_exceeds_limit(session):
    counts = [session.ui_state.current_word_count]
    for _ in range(MAX_NO_OF_WORDS + 3):
        session.skip()
        counts.append(session.ui_state.current_word_count)

    assert counts[:MAX_NO_OF_WORDS] == list(range(1, MAX_NO_OF_WORDS + 1))
    assert max(counts) == MAX_NO_OF_WORDS
    assert session.ui_state.is_game_over


def test_game_over_is_sticky_until_reset(session):
    for _ in range(MAX_NO_OF_WORDS):
        session.skip()
    final = session.ui_state
    assert final.is_game_over

    session.skip()
    session.update_guess("anything")
    assert session.submit_guess() is False

    state = session.ui_state
    assert state.is_game_over
    assert state.score == final.score
    assert state.current_word_count == final.current_word_count
    assert not state.is_guessed_word_wrong


def test_words_do_not_repeat_within_a_game(session):
    words = [solve(session)]
    for _ in range(MAX_NO_OF_WORDS - 1):
        session.skip()
        words.append(solve(session))

    assert len(set(words)) == MAX_NO_OF_WORDS
    assert len(session.used_words) == MAX_NO_OF_WORDS - 1


@pytest.mark.parametrize('rounds_played', [0, 3, MAX_NO_OF_WORDS])
def test_reset_yields_fresh_game(session, rounds_played):
    for _ in range(rounds_played):
        session.update_guess(solve(session))
        session.submit_guess()
    session.update_guess("nope")
    session.submit_guess()

    session.reset()

    state = session.ui_state
    assert state.current_word_count == 1
    assert state.score == 0
    assert not state.is_guessed_word_wrong
    assert not state.is_game_over
    assert session.user_guess == ""
    assert session.used_words == frozenset()
    assert state.current_scrambled_word != solve(session)


def test_observers_receive_each_snapshot(session):
    received = []
    unsubscribe = session.subscribe(received.append)

    session.update_guess("zzz")
    session.submit_guess()
    session.skip()

    assert len(received) == 3
    assert received[1].is_guessed_word_wrong
    assert received[2].current_word_count == 2
    assert received[-1] is session.ui_state

    unsubscribe()
    session.skip()
    assert len(received) == 3


def test_snapshots_are_immutable(session):
    state = session.ui_state

    with pytest.raises(dataclasses.FrozenInstanceError):
        state.score = 100

    session.skip()
    assert state.current_word_count == 1


def test_construction_fails_when_bank_is_smaller_than_round_limit():
    with pytest.raises(ExhaustedWordBank):
        GameSession(WordBank(['cat', 'dog']), max_words=3)


def test_bank_of_exactly_round_limit_words_finishes_game():
    session = GameSession(WordBank(['cat', 'dog', 'owl'], rng=5), max_words=3, score_increase=5)

    seen = {solve(session)}
    session.skip()
    seen.add(solve(session))
    session.skip()
    seen.add(solve(session))
    session.update_guess(solve(session))
    session.submit_guess()

    assert seen == {'cat', 'dog', 'owl'}
    assert session.ui_state.is_game_over
    assert session.ui_state.current_word_count == 3
    assert session.ui_state.score == 5


def test_submit_with_guess_publishes_one_snapshot(session):
    received = []
    session.subscribe(received.append)

    assert session.submit_guess(solve(session)) is True

    assert len(received) == 1
    assert received[0].score == SCORE_INCREASE
    assert session.user_guess == ""


def test_submit_with_wrong_guess_keeps_it_in_buffer(session):
    assert session.submit_guess("zzz") is False

    assert session.user_guess == "zzz"
    assert session.ui_state.is_guessed_word_wrong
