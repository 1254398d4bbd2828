"""Word tokenization for spell-check requests."""

import re

# Anything that is neither an ASCII word character nor a Hangul syllable
# separates words. \w is restricted to ASCII so that accented Latin letters
# split words the same way for every client.
WORD_SEPARATOR = re.compile(r"[^\w가-힣]+", re.ASCII)


def tokenize(text: str) -> list[str]:
    """
    Split text into word tokens.

    Empty strings are kept: a leading or trailing separator produces an empty
    token and ``tokenize("")`` is ``[""]``. The position of each token in the
    returned list is the position of its result in a batch.
    """
    return WORD_SEPARATOR.split(text)

