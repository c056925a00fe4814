"""Interval notation parser.

This module parses the notation that ``to_string`` renders, such as
``[0,100)`` or ``(-1.5, 1.5]``, using the Lark parsing library.
"""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, UnexpectedCharacters, UnexpectedInput

from numrange.errors import NotationError

# Load grammar from file
_GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"
_GRAMMAR = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
    _GRAMMAR,
    start=["interval", "number"],
    parser="lalr",
)


class ParsedInterval(NamedTuple):
    """The four parameters of a range, as written in the notation."""

    min: int | float
    max: int | float
    min_exclusive: bool
    max_exclusive: bool


def _to_number(literal: str) -> int | float:
    if "." in literal or "e" in literal or "E" in literal:
        return float(literal)
    return int(literal)


class IntervalBuilder(Transformer):  # type: ignore[type-arg]
    """Transformer that converts a Lark parse tree to Python values."""

    def number(self, items: list[Token]) -> int | float:
        """Transform number literal."""
        return _to_number(str(items[0].value))

    def interval(self, items: list[Token | int | float]) -> ParsedInterval:
        """Transform bracketed pair of bounds."""
        # Items: [lower_bracket, low, high, upper_bracket]
        lower, low, high, upper = items
        return ParsedInterval(
            min=low,  # type: ignore[arg-type]
            max=high,  # type: ignore[arg-type]
            min_exclusive=str(lower) == "(",
            max_exclusive=str(upper) == ")",
        )


def _parse(text: str, start: str) -> object:
    try:
        tree = _PARSER.parse(text, start=start)
        return IntervalBuilder().transform(tree)

    except UnexpectedCharacters as e:
        # Handle invalid characters (must come before UnexpectedInput)
        raise NotationError(
            f"Unexpected character {text[e.pos_in_stream]!r}",
            column=e.column,
            text=text,
        ) from e
    except UnexpectedInput as e:
        # UnexpectedEOF carries no position
        token_str = getattr(e, "token", "end of input")
        column = e.column if isinstance(e.column, int) and e.column > 0 else None
        raise NotationError(
            f"Unexpected input: {token_str!s}", column=column, text=text
        ) from e
    except LarkError as e:
        raise NotationError(f"Parse error: {e}", text=text) from e


def parse_notation(text: str) -> ParsedInterval:
    """Parse interval notation into its four parameters.

    Parameters
    ----------
    text : str
        Notation such as ``"[0,100)"``. Whitespace between the parts is
        ignored.

    Returns
    -------
    ParsedInterval
        The bounds in the order they were written, with ``(`` setting
        ``min_exclusive`` and ``)`` setting ``max_exclusive``.

    Raises
    ------
    NotationError
        If the text is not valid interval notation.

    Examples
    --------
    >>> parse_notation("[0,100)")
    ParsedInterval(min=0, max=100, min_exclusive=False, max_exclusive=True)
    >>> parse_notation("(-1.5, 1.5]")
    ParsedInterval(min=-1.5, max=1.5, min_exclusive=True, max_exclusive=False)
    """
    result = _parse(text, "interval")
    if not isinstance(result, ParsedInterval):
        raise NotationError(
            f"Parser returned unexpected type: {type(result)}", text=text
        )
    return result


def parse_number(text: str) -> int | float:
    """Parse a decimal number literal.

    Parameters
    ----------
    text : str
        Literal such as ``"120"``, ``"-0.5"`` or ``"1e3"``.

    Returns
    -------
    int | float
        An ``int`` when the literal has no decimal point or exponent, a
        ``float`` otherwise.

    Raises
    ------
    NotationError
        If the text is not a number.

    Examples
    --------
    >>> parse_number("-10")
    -10
    >>> parse_number("361.5")
    361.5
    """
    result = _parse(text, "number")
    if not isinstance(result, (int, float)):
        raise NotationError(
            f"Parser returned unexpected type: {type(result)}", text=text
        )
    return result
