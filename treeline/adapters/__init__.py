# adapters/__init__.py

from .path import PathItem
from .value import ValueItem
from .graph import GraphItem, print_graph, write_graph_with

__all__ = ['PathItem', 'ValueItem', 'GraphItem', 'print_graph', 'write_graph_with']
