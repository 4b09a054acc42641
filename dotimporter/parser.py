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

"""A DOT language parser using funcparserlib.

The grammar is the subset of [the DOT grammar][1] that matters for building a
graph:

    graph      = ["strict"] ("graph" | "digraph") [ID] "{" { stmt [";"] } "}"
    stmt       = edge_stmt | ID "=" value | "graph" attr_lists | node_stmt
    edge_stmt  = ID edge_op ID { edge_op ID } attr_lists
    node_stmt  = ID attr_lists
    attr_lists = { "[" { key ["=" value] ["," | ";"] } "]" }

Not supported: subgraphs, ports and compass points, XML identifiers, string
concatenation with `+`. The words `node` and `edge` are ordinary IDs.

  [1]: https://www.graphviz.org/doc/info/lang.html
"""

__all__ = [
    "Header",
    "VertexStatement",
    "EdgeChainStatement",
    "GraphAttributeStatement",
    "Document",
    "Statement",
    "parse",
    "pretty_document",
]

from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, TypeVar, Union

from funcparserlib.lexer import Token
from funcparserlib.parser import NoParseError, Parser, many, maybe, oneplus, some, tok
from funcparserlib.util import pretty_tree

from dotimporter.errors import (
    AttributeListError,
    EmptyInputError,
    HeaderError,
    StatementError,
)
from dotimporter.lexer import ID_TYPES, unescape

T = TypeVar("T")


class Header(NamedTuple):
    strict: bool
    directed: bool
    id: Optional[str]


class VertexStatement(NamedTuple):
    id: str
    attrs: Dict[str, str]


class EdgeChainStatement(NamedTuple):
    ids: List[str]
    ops: List[str]
    attrs: Dict[str, str]


class GraphAttributeStatement(NamedTuple):
    attrs: Dict[str, str]


Statement = Union[VertexStatement, EdgeChainStatement, GraphAttributeStatement]


class Document(NamedTuple):
    header: Header
    statements: List[Statement]


class _AttrEntry(NamedTuple):
    key: Token
    value: Optional[str]
    sep: Optional[str]


def _token_text(t: Token) -> str:
    if t.type == "String":
        return unescape(t.value)
    return t.value


def _check_graph_id(t: Token) -> str:
    if t.type not in ID_TYPES:
        raise HeaderError("ID in the graph is not formatted correctly: '%s'" % t.value)
    return _token_text(t)


def _make_attrs(entries: List[_AttrEntry]) -> Dict[str, str]:
    # A key without a value must be delimited on both sides, e.g. `[a, b=1]`, unless
    # it is a quoted text closing a `key=value` pair, e.g. `[label="a" "b"]`
    attrs = {}
    last = len(entries) - 1
    for i, entry in enumerate(entries):
        if entry.value is not None:
            attrs[_token_text(entry.key)] = entry.value
            continue
        prev = entries[i - 1] if i > 0 else None
        delimited_before = prev is None or prev.sep is not None
        delimited_after = i == last or entry.sep is not None
        closes_pair = (
            entry.key.type == "String"
            and prev is not None
            and prev.value is not None
            and prev.sep is None
        )
        if not (delimited_after and (delimited_before or closes_pair)):
            raise AttributeListError("Invalid attributes", entry.key.start)
    return attrs


def _merge_attrs(xs: List[Dict[str, str]]) -> Dict[str, str]:
    attrs: Dict[str, str] = {}
    for x in xs:
        attrs.update(x)
    return attrs


def _any_of(types: List[str]) -> Parser[Token, Token]:
    return some(lambda t: t.type in types).named(" or ".join(types))


def _grammar() -> Parser[Token, Document]:
    def un_arg(f: Callable[..., T]) -> Callable[[tuple], T]:
        return lambda args: f(*args)

    def kw(s: str) -> Parser[Token, str]:
        return tok("Keyword", s)

    def op(s: str) -> Parser[Token, str]:
        return tok("Op", s)

    def make_header(strict: Optional[str], type: str, id: Optional[str]) -> Header:
        return Header(strict is not None, type == "digraph", id)

    def make_edge_chain(
        first: str, rhs: List[tuple], attrs: Dict[str, str]
    ) -> EdgeChainStatement:
        return EdgeChainStatement(
            [first] + [x for _, x in rhs], [o for o, _ in rhs], attrs
        )

    def make_graph_attr(args: tuple) -> GraphAttributeStatement:
        name, value = args
        return GraphAttributeStatement({name: value})

    dot_id = (_any_of(ID_TYPES) >> _token_text).named("id")
    attr_value = (_any_of(ID_TYPES + ["Bare"]) >> _token_text).named("value")
    graph_id = _any_of(ID_TYPES + ["Bare"]).named("id") >> _check_graph_id
    attr_key = _any_of(ID_TYPES).named("id")

    a_list = (
        attr_key + maybe(-op("=") + attr_value) + maybe(op(",") | op(";"))
        >> un_arg(_AttrEntry)
    )
    attr_list = -op("[") + many(a_list) + -op("]") >> _make_attrs
    attr_lists = many(attr_list) >> _merge_attrs

    edge_op = op("->") | op("--")
    edge_rhs = edge_op + dot_id
    edge_stmt = dot_id + oneplus(edge_rhs) + attr_lists >> un_arg(make_edge_chain)
    graph_attr = dot_id + -op("=") + attr_value >> make_graph_attr
    graph_attr_stmt = -kw("graph") + attr_lists >> GraphAttributeStatement
    node_stmt = dot_id + attr_lists >> un_arg(VertexStatement)
    stmt = edge_stmt | graph_attr | graph_attr_stmt | node_stmt
    stmt_list = many(stmt + -maybe(op(";")))

    header = (
        maybe(kw("strict")) + (kw("graph") | kw("digraph")) + maybe(graph_id) + -op("{")
        >> un_arg(make_header)
    )
    return header + stmt_list + -op("}") >> un_arg(Document)


_document = _grammar()


def parse(tokens: Sequence[Token]) -> Document:
    """Parse the tokens of a DOT document.

    Raises `EmptyInputError` for an empty sequence, `HeaderError` if the graph header
    is malformed, `StatementError` if a statement in the graph body is malformed and
    `AttributeListError` if an attribute list is malformed. Tokens after the closing
    `}` of the graph are ignored.
    """
    if len(tokens) == 0:
        raise EmptyInputError()
    body_start = next(
        (i for i, t in enumerate(tokens) if t.type == "Op" and t.value == "{"),
        len(tokens),
    )
    try:
        return _document.parse(tokens)
    except NoParseError as e:
        if e.state.max <= body_start:
            raise HeaderError("Invalid Header") from e
        raise StatementError("Invalid statement: %s" % e.msg) from e


def pretty_document(doc: Document) -> str:
    """Render a parsed document as a pseudographic tree."""

    class NamedValues(NamedTuple):
        name: str
        values: Sequence[object]

    def attr_kids(attrs: Dict[str, str]) -> List[object]:
        return ["%s=%s" % (k, v) for k, v in attrs.items()]

    def kids(x: object) -> Sequence[object]:
        if isinstance(x, Document):
            return [NamedValues("statements", x.statements)]
        elif isinstance(x, (VertexStatement, GraphAttributeStatement)):
            return attr_kids(x.attrs)
        elif isinstance(x, EdgeChainStatement):
            return [NamedValues("ids", x.ids), NamedValues("attrs", attr_kids(x.attrs))]
        elif isinstance(x, NamedValues):
            return x.values
        else:
            return []

    def show(x: object) -> str:
        if isinstance(x, NamedValues):
            return x.name
        elif isinstance(x, Document):
            return "Graph [id=%s, strict=%r, directed=%r]" % (
                x.header.id,
                x.header.strict,
                x.header.directed,
            )
        elif isinstance(x, VertexStatement):
            return "Vertex [id=%s]" % (x.id,)
        elif isinstance(x, EdgeChainStatement):
            return "EdgeChain [ops=%s]" % (" ".join(x.ops),)
        elif isinstance(x, GraphAttributeStatement):
            return "GraphAttrs"
        else:
            return str(x)

    return pretty_tree(doc, kids, show)
