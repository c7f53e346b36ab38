"""
Static UI strings.

The game has a single locale; every label the presentation layer shows is
looked up here by key.
"""

from typing import Dict, Final

STRINGS: Final[Dict[str, str]] = {
    'app_name': 'Unscramble',
    'instructions': 'Unscramble the word using all the letters.',
    'word_count': '{0}/{1}',
    'score': 'Score: {0}',
    'enter_your_word': 'Enter your word',
    'wrong_guess': 'Wrong Guess!',
    'submit': 'Submit',
    'skip': 'Skip',
    'congratulations': 'Congratulations!',
    'you_scored': 'You scored: {0}',
    'exit': 'Exit',
    'play_again': 'Play Again',
}


def get_string(key: str, *args) -> str:
    """
    Look up a UI string and fill in its positional arguments.

    Raises:
        KeyError: If no string is registered under key
    """
    return STRINGS[key].format(*args)
