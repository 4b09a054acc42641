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

"""The destination graph and the provider callables used to build it.

The importer never creates vertices or edges by itself. It asks the caller-supplied
providers for vertex and edge objects and adds them to a `GraphContainer`.

Provider types, where `V` is the type of vertices and `E` is the type of edges:

* `VertexProvider` -- `(id, attrs) -> V`
* `EdgeProvider` -- `(from_vertex, to_vertex, label, attrs) -> E`, `label` is the value
  of the `"label"` attribute or `None`
* `VertexUpdater` -- `(vertex, attrs) -> None`, merges the attributes of a repeated
  vertex statement into an existing vertex
* `ComponentUpdater` -- `(graph, attrs) -> None`, receives the graph-level attributes,
  including the graph ID under the `"ID"` key
"""

__all__ = [
    "GraphContainer",
    "VertexProvider",
    "EdgeProvider",
    "VertexUpdater",
    "ComponentUpdater",
]

from typing import Any, Callable, Dict, Generic, Optional, TypeVar

V = TypeVar("V")
E = TypeVar("E")

Attrs = Dict[str, str]

VertexProvider = Callable[[str, Attrs], V]
EdgeProvider = Callable[[V, V, Optional[str], Attrs], E]
VertexUpdater = Callable[[V, Attrs], None]
ComponentUpdater = Callable[[Any, Attrs], None]


class GraphContainer(Generic[V, E]):
    """The capabilities of a destination graph the importer relies on.

    Subclassing is optional, any object with these methods will do.
    """

    def is_directed(self) -> bool:
        raise NotImplementedError()

    def allows_parallel_edges(self) -> bool:
        raise NotImplementedError()

    def contains_vertex(self, v: V) -> bool:
        raise NotImplementedError()

    def add_vertex(self, v: V) -> Any:
        raise NotImplementedError()

    def add_edge(self, source: V, target: V, e: E) -> Any:
        raise NotImplementedError()
