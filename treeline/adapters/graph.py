# adapters/graph.py

from dataclasses import dataclass
from typing import Any, Hashable, List, Mapping, Sequence, TextIO

from ..config import PrintConfig
from ..output import print_tree, write_tree_with
from ..style import Style

@dataclass
class GraphItem:
    """
    A node of a directed graph given as {node: [neighbors]}.

    The graph is walked as a tree from the node, so shared nodes are
    repeated. Cycles are not detected; limit the depth when the graph
    may contain one.
    """
    graph: Mapping[Hashable, Sequence[Hashable]]
    node: Any

    def write_self(self, f: TextIO, style: Style) -> None:
        f.write(style.paint(str(self.node)))

    def children(self) -> List["GraphItem"]:
        return [GraphItem(self.graph, n) for n in self.graph.get(self.node, ())]

def print_graph(graph: Mapping[Hashable, Sequence[Hashable]], start: Hashable) -> None:
    print_tree(GraphItem(graph, start))

def write_graph_with(graph: Mapping[Hashable, Sequence[Hashable]], start: Hashable,
                     f: TextIO, config: PrintConfig) -> None:
    write_tree_with(GraphItem(graph, start), f, config)
