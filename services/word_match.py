"""Whole-word phrase matching for food names.

Substring search is too loose for preference checks ("egg" would hit
"Eggplant Curry"), so names and phrases are split on whitespace and compared
token by token. A token matches a keyword when they are equal or differ only
by a trailing "s"/"es", which is enough to pair "egg" with "Eggs".
"""

from typing import List, Sequence

_EDGE_PUNCTUATION = ".,;:!?()[]{}\"'"


def tokenize(text: str) -> List[str]:
    """Lower-case `text` and split it on whitespace, trimming edge punctuation."""
    tokens = []
    for raw in (text or "").lower().split():
        token = raw.strip(_EDGE_PUNCTUATION)
        if token:
            tokens.append(token)
    return tokens


def token_matches(token: str, keyword: str) -> bool:
    if token == keyword:
        return True
    for suffix in ("s", "es"):
        if token == keyword + suffix or keyword == token + suffix:
            return True
    return False


def phrase_matches(name_tokens: Sequence[str], phrase: str) -> bool:
    """Return True if `phrase` appears as a run of whole words in `name_tokens`.

    `name_tokens` must already be lower-case (see `tokenize`). A multi-word
    phrase has to match a contiguous run of tokens in order.
    """
    keywords = tokenize(phrase)
    if not keywords or len(keywords) > len(name_tokens):
        return False
    if len(keywords) == 1:
        return any(token_matches(token, keywords[0]) for token in name_tokens)

    span = len(keywords)
    for start in range(len(name_tokens) - span + 1):
        window = name_tokens[start:start + span]
        if all(token_matches(token, keyword) for token, keyword in zip(window, keywords)):
            return True
    return False
