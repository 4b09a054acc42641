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

"""Import DOT documents into graphs.

Example:

```python
importer = DOTImporter(
    lambda id, attrs: id,
    lambda source, target, label, attrs: (source, target, label),
)
importer.import_graph(graph, 'digraph G { a -> b -> c; b -> d }')
```

!!! Note

    You can enable the import log this way:

    ```python
    import logging
    logging.basicConfig(level=logging.DEBUG)
    import dotimporter.importer
    dotimporter.importer.debug = True
    ```
"""

__all__ = ["DOTImporter", "import_graph"]

import logging
from typing import Any, Callable, Dict, Generic, Optional, TypeVar, Union

from dotimporter.errors import (
    CompatibilityError,
    ConstructionError,
    UpdateError,
)
from dotimporter.graph import (
    ComponentUpdater,
    EdgeProvider,
    GraphContainer,
    VertexProvider,
    VertexUpdater,
)
from dotimporter.lexer import tokenize
from dotimporter.parser import (
    Document,
    EdgeChainStatement,
    GraphAttributeStatement,
    Header,
    VertexStatement,
    parse,
    pretty_document,
)

log = logging.getLogger("dotimporter")

debug = False

ENCODING = "UTF-8"

V = TypeVar("V")
E = TypeVar("E")
T = TypeVar("T")


def _call(what: str, f: Callable[..., T], *args: Any) -> T:
    try:
        return f(*args)
    except Exception as e:
        raise ConstructionError("%s failed: %s" % (what, e)) from e


def _read(source: Union[str, bytes, Any]) -> str:
    if hasattr(source, "read"):
        source = source.read()
    if isinstance(source, bytes):
        source = source.decode(ENCODING)
    return source


def _graph_kind(directed: bool) -> str:
    return "directed" if directed else "undirected"


class DOTImporter(Generic[V, E]):
    """Builds graphs from DOT documents using the vertex and edge providers.

    Type: `DOTImporter[V, E]`, where `V` is the type of vertices and `E` is the type of
    edges returned by the providers.

    The vertex updater is required only for documents that declare attributes of an
    already known vertex. Graph-level attributes are ignored unless there is a component
    updater.
    """

    def __init__(
        self,
        vertex_provider: VertexProvider[V],
        edge_provider: EdgeProvider[V, E],
        vertex_updater: Optional[VertexUpdater[V]] = None,
        component_updater: Optional[ComponentUpdater] = None,
    ) -> None:
        self.vertex_provider = vertex_provider
        self.edge_provider = edge_provider
        self.vertex_updater = vertex_updater
        self.component_updater = component_updater

    def import_graph(
        self, graph: GraphContainer[V, E], source: Union[str, bytes, Any]
    ) -> None:
        """Read a DOT document and add its vertices and edges to the graph.

        The `source` is a string, UTF-8 encoded bytes or a file-like object.

        Raises a subclass of `DOTImportError` at the first error. The changes made to
        the graph before the error are not rolled back.
        """
        doc = parse(tokenize(_read(source)))
        if debug:
            log.debug("parsed document:\n%s" % pretty_document(doc))
        self.check_compatibility(doc.header, graph)
        self._update_component(doc, graph)
        vertices: Dict[str, V] = {}
        for stmt in doc.statements:
            if isinstance(stmt, VertexStatement):
                self._add_vertex(graph, vertices, stmt)
            elif isinstance(stmt, EdgeChainStatement):
                self._add_edge_chain(graph, vertices, doc.header, stmt)
        log.debug(
            "imported %d vertices from %d statements"
            % (len(vertices), len(doc.statements))
        )

    @staticmethod
    def check_compatibility(header: Header, graph: GraphContainer[V, E]) -> None:
        """Check that the graph can hold what the header declares.

        Raises `CompatibilityError` if the directedness of the graph differs from the
        header or if the header is `strict` and the graph allows parallel edges.
        """
        if header.directed and not graph.is_directed():
            raise CompatibilityError(
                "input asks for directed graph but undirected graph provided."
            )
        elif not header.directed and graph.is_directed():
            raise CompatibilityError(
                "input asks for undirected graph and directed graph provided."
            )
        if header.strict and graph.allows_parallel_edges():
            raise CompatibilityError("graph defines strict but Multigraph given.")

    def _update_component(self, doc: Document, graph: GraphContainer[V, E]) -> None:
        attrs: Dict[str, str] = {}
        for stmt in doc.statements:
            if isinstance(stmt, GraphAttributeStatement):
                attrs.update(stmt.attrs)
        if doc.header.id is not None:
            attrs["ID"] = doc.header.id
        if not attrs:
            return
        if self.component_updater is None:
            log.debug("no component updater, ignored graph attributes %r" % attrs)
            return
        _call("component updater", self.component_updater, graph, attrs)

    def _add_vertex(
        self,
        graph: GraphContainer[V, E],
        vertices: Dict[str, V],
        stmt: VertexStatement,
    ) -> None:
        if stmt.id not in vertices:
            self._vertex(graph, vertices, stmt.id, stmt.attrs)
        elif stmt.attrs:
            if self.vertex_updater is None:
                raise UpdateError(
                    "Update required for vertex %s but no vertexUpdater provided"
                    % stmt.id
                )
            log.debug("updating vertex %s with %r" % (stmt.id, stmt.attrs))
            _call("vertex updater", self.vertex_updater, vertices[stmt.id], stmt.attrs)

    def _vertex(
        self,
        graph: GraphContainer[V, E],
        vertices: Dict[str, V],
        id: str,
        attrs: Dict[str, str],
    ) -> V:
        if id in vertices:
            return vertices[id]
        log.debug("new vertex %s" % id)
        v = _call("vertex provider", self.vertex_provider, id, attrs)
        vertices[id] = v
        if not graph.contains_vertex(v):
            _call("adding vertex %s" % id, graph.add_vertex, v)
        return v

    def _add_edge_chain(
        self,
        graph: GraphContainer[V, E],
        vertices: Dict[str, V],
        header: Header,
        stmt: EdgeChainStatement,
    ) -> None:
        expected_op = "->" if header.directed else "--"
        for op in stmt.ops:
            if op != expected_op:
                raise CompatibilityError(
                    "edge operator '%s' is not allowed in %s graphs."
                    % (op, _graph_kind(header.directed))
                )
        label = stmt.attrs.get("label")
        for source_id, target_id in zip(stmt.ids, stmt.ids[1:]):
            source = self._vertex(graph, vertices, source_id, {})
            target = self._vertex(graph, vertices, target_id, {})
            log.debug("new edge %s %s %s" % (source_id, expected_op, target_id))
            e = _call(
                "edge provider", self.edge_provider, source, target, label, dict(stmt.attrs)
            )
            _call(
                "adding edge %s %s %s" % (source_id, expected_op, target_id),
                graph.add_edge,
                source,
                target,
                e,
            )


def import_graph(
    graph: GraphContainer[V, E],
    source: Union[str, bytes, Any],
    vertex_provider: VertexProvider[V],
    edge_provider: EdgeProvider[V, E],
    vertex_updater: Optional[VertexUpdater[V]] = None,
    component_updater: Optional[ComponentUpdater] = None,
) -> None:
    """A shortcut for `DOTImporter(...).import_graph(graph, source)`."""
    importer = DOTImporter(
        vertex_provider, edge_provider, vertex_updater, component_updater
    )
    importer.import_graph(graph, source)
