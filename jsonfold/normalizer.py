"""Quote and key normalization.

Rewrites comment-free JSON-ish text into strict JSON surface syntax with a
fixed, ordered list of regex substitutions:

1. Backtick strings in token position become double-quoted strings
2. Single-quoted strings in token position become double-quoted strings
3. Bare object keys are wrapped in double quotes
4. Trailing commas before ``]`` or ``}`` are deleted

Every rule first tries to match a complete double-quoted string literal and
leaves it untouched, so the contents of strict JSON strings are never
rewritten.

This is a textual best-effort transform, not a tokenizer. It never raises;
anything it cannot fix is reported by the strict parser. Known limitations:
mixed quote styles inside one literal, escaped backticks inside single-quoted
strings and keys that are themselves quote characters are not handled.
"""

import re
from typing import Final

# A complete double-quoted literal on one line, honouring backslash escapes
_STRING_LITERAL: Final[str] = r'(?P<literal>"(?:[^"\\\n]|\\.)*")'


def _rule(pattern: str, template: str) -> tuple[re.Pattern[str], str]:
    return re.compile(rf"{_STRING_LITERAL}|{pattern}"), template


def _quote_rules(quote: str) -> list[tuple[re.Pattern[str], str]]:
    q = re.escape(quote)
    return [
        # after a structural character (or at the start of the text)
        _rule(
            rf"(?P<lead>^|[{{\[,:])(?P<ws>\s*){q}(?P<body>[^{q}]*){q}",
            r'\g<lead>\g<ws>"\g<body>"',
        ),
        # before a structural character (or at the end of the text)
        _rule(
            rf"{q}(?P<body>[^{q}]*){q}(?P<ws>\s*)(?P<tail>[:\]}},]|$)",
            r'"\g<body>"\g<ws>\g<tail>',
        ),
    ]


NORMALIZATION_RULES: Final[list[tuple[re.Pattern[str], str]]] = [
    *_quote_rules("`"),
    *_quote_rules("'"),
    _rule(r"(?P<sep>[{,])(?P<ws>\s*)(?P<key>[A-Za-z0-9_$]+)\s*:", r'\g<sep>\g<ws>"\g<key>":'),
    _rule(r",\s*(?P<close>[\]}])", r"\g<close>"),
]


def _apply(pattern: re.Pattern[str], template: str, text: str) -> str:
    def replace(match: re.Match[str]) -> str:
        if match.group("literal") is not None:
            return match.group("literal")
        return match.expand(template)

    return pattern.sub(replace, text)


def normalize(text: str) -> str:
    """Rewrite JSON-ish text into strict JSON surface syntax.

    Args:
        text: Comment-free text, already joined and trimmed

    Returns:
        Text with normalized quotes, quoted keys and no trailing commas

    Examples:
        >>> normalize("{'a': 1}")
        '{"a": 1}'
        >>> normalize("{a: 1, b: 2}")
        '{"a": 1, "b": 2}'
        >>> normalize("[1, 2,]")
        '[1, 2]'
        >>> normalize('{"t": "Mon,10:30"}')
        '{"t": "Mon,10:30"}'
    """
    for pattern, template in NORMALIZATION_RULES:
        text = _apply(pattern, template, text)
    return text


__all__ = ["normalize", "NORMALIZATION_RULES"]
