"""
Command Line Tokenizer.

Splits one input line into tokens in a single left-to-right pass.

Rules:
    - Only an unquoted space separates tokens. Tabs are ordinary characters.
    - ' or " opens a quoted run. Only the same character closes it; the
      other quote character inside a run is ordinary text.
    - If a run closed inside the current token, the token's first and last
      characters are dropped when it is cut.
    - Consecutive spaces yield empty tokens.

Example:
    tokenize("write 'a b' \"c\"")   # ["write", "a b", "c"]
    tokenize("write \"it's\" ok")   # ["write", "it's", "ok"]
"""

from kvrepl.core.exceptions import UnterminatedQuoteError

SPACE = " "
QUOTES = frozenset({'"', "'"})


def _cut(line: str, start: int, end: int, strip_quotes: bool) -> str:
    if strip_quotes:
        return line[start + 1:end - 1]
    return line[start:end]


def tokenize(line: str) -> list[str]:
    """
    Tokenize a non-empty command line.

    Raises:
        UnterminatedQuoteError: If a quoted run is still open at end of line
    """
    tokens: list[str] = []
    start = 0
    quote: str | None = None
    quote_column = 0
    strip_quotes = False

    for i, ch in enumerate(line):
        if ch in QUOTES:
            if quote is None:
                quote = ch
                quote_column = i
            elif ch == quote:
                quote = None
                strip_quotes = True
            continue

        if ch != SPACE or quote is not None:
            continue

        tokens.append(_cut(line, start, i, strip_quotes))
        start = i + 1
        strip_quotes = False

    if quote is not None:
        raise UnterminatedQuoteError(line, quote_column)

    tokens.append(_cut(line, start, len(line), strip_quotes))
    return tokens
