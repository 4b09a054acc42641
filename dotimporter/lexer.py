# Copyright © 2009/2023 Andrey Vlasovskikh
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this
# software and associated documentation files (the "Software"), to deal in the Software
# without restriction, including without limitation the rights to use, copy, modify,
# merge, publish, distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be included in all copies
# or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED,
# INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A
# PARTICULAR PURPOSE AND NON-INFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE
# OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""The DOT lexer.

Token types produced by `tokenize()`:

* `Keyword` -- `strict`, `graph` or `digraph` in any letter case, the value is
  lower-cased
* `Name` -- an identifier
* `Number` -- a numeral
* `String` -- a quoted text, the value still includes the quotes and escapes, see
  `unescape()`
* `Op` -- punctuation, including the edge operators `->` and `--`
* `Bare` -- any other run of non-space characters, only valid as an attribute value
"""

__all__ = ["tokenize", "unescape", "ID_TYPES"]

from re import DOTALL, IGNORECASE, MULTILINE
from typing import List

from funcparserlib.lexer import LexerError, Token, TokenSpec, make_tokenizer

from dotimporter.errors import LexError

_NAME_CHAR = r"A-Za-z\200-\377_0-9"

ID_TYPES = ["Name", "Number", "String"]

_specs = [
    TokenSpec("Comment", r"/\*(.|[\r\n])*?\*/", MULTILINE),
    TokenSpec("Comment", r"//.*"),
    TokenSpec("NL", r"[\r\n]+"),
    TokenSpec("Space", r"[ \t\r\n]+"),
    TokenSpec("Keyword", r"(strict|digraph|graph)(?![%s])" % _NAME_CHAR, IGNORECASE),
    TokenSpec("Name", r"[A-Za-z\200-\377_][%s]*" % _NAME_CHAR),
    TokenSpec("Op", r"[{};,=\[\]]|(->)|(--)"),
    TokenSpec("Number", r"-?(\.[0-9]+|[0-9]+(\.[0-9]*)?)(?![%s.])" % _NAME_CHAR),
    TokenSpec("String", r'"([^"\\]|\\.)*"', DOTALL),
    TokenSpec("Bare", r'([^\s{}\[\];,="\-]|-(?![->]))+'),
]
_useless = ["Comment", "NL", "Space"]
_joinable = ["Name", "Number", "Bare"]
_tokenizer = make_tokenizer(_specs)


def _join_bare(tokens: List[Token]) -> List[Token]:
    # Touching pieces like `Helvetica` `-Bold` or `a` `.b` form one bare value
    joined: List[Token] = []
    for t in tokens:
        prev = joined[-1] if joined else None
        if (
            prev is not None
            and prev.type in _joinable
            and t.type in _joinable
            and t.start == (prev.end[0], prev.end[1] + 1)
        ):
            joined[-1] = Token("Bare", prev.value + t.value, prev.start, t.end)
        else:
            joined.append(t)
    return joined


def tokenize(s: str) -> List[Token]:
    """Split the text of a DOT document into tokens.

    Comments and whitespace are dropped. Names, numerals and bare values written
    without space between them are joined into one `Bare` token. Raises `LexError`
    if some part of the text cannot be tokenized, e.g. a quoted text is not
    terminated.
    """
    try:
        tokens = [t for t in _tokenizer(s) if t.type not in _useless]
    except LexerError as e:
        raise LexError(str(e), e.place) from e
    tokens = _join_bare(tokens)
    return [
        Token(t.type, t.value.lower(), t.start, t.end) if t.type == "Keyword" else t
        for t in tokens
    ]


def unescape(s: str) -> str:
    """Return the text of a quoted `String` token value.

    The enclosing quotes are removed. An escaped quote `\\"` becomes `"`, a backslash
    at the end of a line joins the line with the next one, other backslashes are kept.
    """
    if len(s) >= 2 and s[0] == '"' and s[-1] == '"':
        s = s[1:-1]
    chars = []
    escaped = False
    for c in s:
        if escaped:
            if c == '"':
                chars.append(c)
            elif c != "\n":
                chars.append("\\")
                chars.append(c)
            escaped = False
        elif c == "\\":
            escaped = True
        else:
            chars.append(c)
    if escaped:
        chars.append("\\")
    return "".join(chars)
