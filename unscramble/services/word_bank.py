"""
Word Bank

Holds the static list of candidate words and the pure helpers the game
session uses to pick and scramble them.
"""

import random
from typing import AbstractSet, Iterable, Optional, Tuple, Union
from ..config.game_settings import WORD_LIST


class ExhaustedWordBank(RuntimeError):
    """Every word in the bank has already been used in this session.

    This means the round limit exceeds the number of distinct words, which is
    a configuration defect rather than something a running session can recover from.
    """


class UnscramblableWordError(ValueError):
    """The word has fewer than two distinct letters, so no different permutation exists."""


def normalize(word: str) -> str:
    """Lowercase and trim a word for comparison."""
    return word.strip().lower()


class WordBank:
    """
    Immutable, ordered collection of known words.

    Randomness comes from a private ``random.Random`` so games can be
    replayed deterministically by passing a seed.

    Attributes:
        words: Tuple of normalized words, in their original order
    """

    def __init__(self,
                 words: Optional[Iterable[str]] = None,
                 rng: Optional[Union[random.Random, int]] = None):
        """
        Args:
            words: Candidate words, defaults to the configured WORD_LIST
            rng: A ``random.Random`` instance or an integer seed
        """
        if words is None:
            words = WORD_LIST

        ordered = []
        seen = set()
        for word in words:
            word = normalize(word)
            if word not in seen:
                seen.add(word)
                ordered.append(word)

        self.words: Tuple[str, ...] = tuple(ordered)
        self._word_set = frozenset(self.words)

        if isinstance(rng, random.Random):
            self._rng = rng
        else:
            self._rng = random.Random(rng)

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: str) -> bool:
        return normalize(word) in self._word_set

    def scramble_letters(self, word: str) -> str:
        """
        Produce a random permutation of word that differs from word.

        Args:
            word: Word with at least two distinct letters

        Returns:
            str: Same letters in a different order

        Raises:
            UnscramblableWordError: If every permutation of word equals word
        """
        if len(set(word)) < 2:
            raise UnscramblableWordError(f"Cannot scramble '{word}': it needs two distinct letters")

        letters = list(word)
        while True:
            self._rng.shuffle(letters)
            scrambled = ''.join(letters)
            if scrambled != word:
                return scrambled

    def pick_next_word(self, used_words: AbstractSet[str]) -> str:
        """
        Pick a word uniformly at random among those not used yet.

        Raises:
            ExhaustedWordBank: If every word has been used
        """
        candidates = [word for word in self.words if word not in used_words]
        if not candidates:
            raise ExhaustedWordBank(
                f"All {len(self.words)} words have been used; "
                f"the round limit must not exceed the word bank size"
            )
        return self._rng.choice(candidates)

    def get_unscrambled_word(self, scrambled_word: str) -> str:
        """
        Find the bank word whose letters match scrambled_word.

        Raises:
            LookupError: If no word in the bank is an anagram of scrambled_word
        """
        letters = sorted(normalize(scrambled_word))
        for word in self.words:
            if sorted(word) == letters:
                return word
        raise LookupError(f"No word in the bank unscrambles '{scrambled_word}'")
