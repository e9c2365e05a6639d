"""Lark grammars for the two ISO 8601 duration forms.

Both parsers are compiled once at import and only ever read afterwards.
"""

from __future__ import annotations

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

WEEK_GRAMMAR = r"""
    start: "P" weeks

    weeks: INT "W"

    INT: /[0-9]+/
"""

FULL_GRAMMAR = r"""
    start: "P" years? months? days? time?

    years: INT "Y"
    months: INT "M"
    days: INT "D"

    time: "T" hours? minutes? seconds?

    hours: INT "H"
    minutes: INT "M"
    seconds: INT "S"

    INT: /[0-9]+/
"""


class FieldCollector(Transformer):
    """Turns a duration parse tree into a ``{field: digits}`` mapping.

    Only the components present in the input appear in the result.
    """

    def years(self, children: list[Token]) -> tuple[str, str]:
        return "years", str(children[0])

    def months(self, children: list[Token]) -> tuple[str, str]:
        return "months", str(children[0])

    def weeks(self, children: list[Token]) -> tuple[str, str]:
        return "weeks", str(children[0])

    def days(self, children: list[Token]) -> tuple[str, str]:
        return "days", str(children[0])

    def hours(self, children: list[Token]) -> tuple[str, str]:
        return "hours", str(children[0])

    def minutes(self, children: list[Token]) -> tuple[str, str]:
        return "minutes", str(children[0])

    def seconds(self, children: list[Token]) -> tuple[str, str]:
        return "seconds", str(children[0])

    # Time designators are nested under a single "T" node.
    def time(self, children: list[tuple[str, str]]) -> dict[str, str]:
        return dict(children)

    def start(self, children: list) -> dict[str, str]:
        result: dict[str, str] = {}
        for child in children:
            if isinstance(child, dict):
                result.update(child)
            else:
                name, digits = child
                result[name] = digits
        return result


_week_parser = Lark(WEEK_GRAMMAR, parser="lalr")
_full_parser = Lark(FULL_GRAMMAR, parser="lalr")
_collector = FieldCollector()


def _match(parser: Lark, value: str) -> dict[str, str] | None:
    try:
        tree = parser.parse(value)
    except UnexpectedInput:
        return None
    return _collector.transform(tree)


def match_week(value: str) -> dict[str, str] | None:
    """Match the whole of ``value`` against ``P<n>W``."""
    return _match(_week_parser, value)


def match_full(value: str) -> dict[str, str] | None:
    """Match the whole of ``value`` against ``P[nY][nM][nD][T[nH][nM][nS]]``."""
    return _match(_full_parser, value)
