import re

_NON_WORD = re.compile(r"[^\w\s]+")


def tokenize(text: str) -> list[str]:
    """Lower-case, drop punctuation, split on whitespace."""
    return _NON_WORD.sub(" ", text.lower()).split()
