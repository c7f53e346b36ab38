"""
Tests for the game rules, word bank configuration and UI strings.
"""

import pytest

from unscramble.config import (
    MAX_NO_OF_WORDS, SCORE_INCREASE, WORD_LIST,
    get_string, get_word_statistics, validate_word_list_integrity
)


def test_game_constants():
    assert MAX_NO_OF_WORDS == 10
    assert SCORE_INCREASE == 20


def test_shipped_word_list_is_valid():
    assert validate_word_list_integrity() is True
    assert len(WORD_LIST) >= MAX_NO_OF_WORDS
    assert all(len(set(word)) >= 2 for word in WORD_LIST)


@pytest.mark.parametrize('words, message', [
    ([], 'empty'),
    (['apple', 'x-ray'], 'non-alphabetic'),
    (['apple', 'aaa'], 'two distinct letters'),
    (['apple', 'Pear'], 'lowercase'),
    (['apple', 'pear', 'apple'], 'Duplicate'),
])
def test_invalid_word_lists_are_rejected(words, message):
    with pytest.raises(ValueError, match=message):
        validate_word_list_integrity(words, max_rounds=1)


def test_word_list_must_cover_round_limit():
    with pytest.raises(ValueError, match='needs 3'):
        validate_word_list_integrity(['apple', 'pear'], max_rounds=3)


def test_word_statistics():
    stats = get_word_statistics()

    assert stats['total_words'] == len(WORD_LIST)
    assert stats['shortest_word'] <= stats['avg_word_length'] <= stats['longest_word']
    assert len(stats['most_common_letters']) == 5


def test_get_string_formats_arguments():
    assert get_string('score', 40) == 'Score: 40'
    assert get_string('word_count', 3, 10) == '3/10'
    assert get_string('play_again') == 'Play Again'


def test_get_string_unknown_key():
    with pytest.raises(KeyError):
        get_string('no_such_string')
