"""
Game Configuration Constants Module

This module defines the game rules for Unscramble. All game parameters are
centralized here so the round limit, the per-round score and the word bank
can be changed in one place.

"""

import json
import os
from typing import List, Final, Optional

# Core Game Configuration Constants
MAX_NO_OF_WORDS: Final[int] = 10
"""
Number of rounds (scrambled words) per game session.
Type: Final[int] - Immutable to prevent accidental modification
"""

SCORE_INCREASE: Final[int] = 20
"""
Points awarded for each correctly unscrambled word.
"""


def _is_scramblable(word: str) -> bool:
    """A word can only be scrambled into something different if it has two distinct letters."""
    return len(set(word)) >= 2


# Load word list from JSON file
def _load_word_list() -> List[str]:
    """
    Load word list from words.json.

    Returns:
        List[str]: List of lowercase words

    Raises:
        FileNotFoundError: If words.json file is not found
        ValueError: If JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    lowercase_words = [word.strip().lower() for word in word_list]

    for word in lowercase_words:
        if not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
        if not _is_scramblable(word):
            raise ValueError(f"Word '{word}' cannot be scrambled into a different word")

    return lowercase_words


# Word bank loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def validate_word_list_integrity(word_list: Optional[List[str]] = None, max_rounds: int = MAX_NO_OF_WORDS) -> bool:
    """
    Validates the integrity and consistency of the word bank.

    This function performs validation to ensure:
    1. Character validation: Only alphabetic characters allowed
    2. Scramble validation: At least two distinct letters per word
    3. Format validation: Consistent lowercase formatting
    4. Uniqueness validation: No duplicate entries
    5. Capacity validation: Enough distinct words for a full game

    Args:
        word_list: Words to validate, defaults to WORD_LIST
        max_rounds: Number of rounds a game needs words for

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message

    """
    if word_list is None:
        word_list = WORD_LIST

    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not _is_scramblable(word):
            raise ValueError(f"Word at index {index} '{word}' needs at least two distinct letters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    if len(word_list) < max_rounds:
        raise ValueError(
            f"Word list has {len(word_list)} words but a game needs {max_rounds}"
        )

    return True


def get_word_statistics() -> dict:
    """
    Analyzes the word bank and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the bank
            - shortest_word / longest_word: Length extremes
            - avg_word_length: Average letters per word
            - most_common_letters: Five most frequent letters

    """
    if not WORD_LIST:
        return {"error": "Word list is empty"}

    letter_frequency = {}
    for word in WORD_LIST:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    lengths = [len(word) for word in WORD_LIST]

    return {
        "total_words": len(WORD_LIST),
        "shortest_word": min(lengths),
        "longest_word": max(lengths),
        "avg_word_length": round(sum(lengths) / len(WORD_LIST), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Game statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
