"""Visitor pattern for AST traversal.

Enables tools to traverse the ICU AST without modifying node classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name
(snake_case), matching the node class names.

Dispatch walks the node's MRO, so visit_FormattedArgument also receives
SpelloutArgument, OrdinalArgument and DurationArgument unless a subclass
defines a more specific method.

Type Parameters:
- ASTVisitor[T] is generic over return type T
- ASTVisitor (no type param) defaults to T=None

Python 3.13+.
"""

from collections.abc import Callable
from dataclasses import Field, fields
from typing import ClassVar

from icuparser.constants import MAX_DEPTH
from icuparser.core.depth_guard import DepthGuard

from .ast import ASTNode, Node

__all__ = ["ASTVisitor", "iter_child_nodes"]


_fields_cache: dict[type, tuple[Field[object], ...]] = {}


def _child_fields(node_type: type) -> tuple[Field[object], ...]:
    """Dataclass fields that may hold child nodes (span excluded)."""
    cached = _fields_cache.get(node_type)
    if cached is None:
        cached = tuple(f for f in fields(node_type) if f.name != "span")
        _fields_cache[node_type] = cached
    return cached


def iter_child_nodes(node: ASTNode) -> list[ASTNode]:
    """Return direct child nodes in field order.

    Example:
        >>> msg = parse("a {x} b")
        >>> [type(c).__name__ for c in iter_child_nodes(msg)]
        ['Text', 'SimpleArgument', 'Text']
    """
    children: list[ASTNode] = []
    for f in _child_fields(type(node)):
        value = getattr(node, f.name)
        if isinstance(value, tuple):
            children.extend(item for item in value if isinstance(item, Node))
        elif isinstance(value, Node):
            children.append(value)  # type: ignore[arg-type]
    return children


class ASTVisitor[T = None]:
    """Base visitor for traversing ICU AST.

    Follows stdlib ast.NodeVisitor convention: generic_visit() traverses all
    child nodes and returns None. Override visit_NodeType methods to add
    custom behavior.

    Uses class-level dispatch table:
    - Method names discovered once per class definition via __init_subclass__
    - Bound methods cached per instance on first use

    Depth Protection:
        Every visit() runs under a DepthGuard, so visitors that never call
        generic_visit() are protected too.

    Example:
        >>> class CountArguments(ASTVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_SimpleArgument(self, node):
        ...         self.count += 1
        ...
        >>> counter = CountArguments()
        >>> counter.visit(parse("{a} and {b}"))
        >>> counter.count
        2
    """

    __slots__ = ("_depth_guard", "_instance_dispatch_cache")

    # Class-level dispatch table (method names only, not bound methods)
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_"):
                cls._class_visit_methods[name[6:]] = name

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard and dispatch cache.

        Subclasses MUST call super().__init__().

        Args:
            max_depth: Maximum traversal depth (default: MAX_DEPTH)
        """
        self._depth_guard = DepthGuard(max_depth=max_depth if max_depth is not None else MAX_DEPTH)
        self._instance_dispatch_cache: dict[type, Callable[[ASTNode], T]] = {}

    def visit(self, node: ASTNode) -> T:
        """Dispatch node to visit_<ClassName>, falling back along the MRO.

        Raises:
            DepthLimitExceededError: If traversal depth exceeds max_depth
        """
        node_type = type(node)
        method = self._instance_dispatch_cache.get(node_type)
        if method is None:
            method = self._resolve(node_type)
            self._instance_dispatch_cache[node_type] = method
        with self._depth_guard:
            return method(node)

    def _resolve(self, node_type: type) -> Callable[[ASTNode], T]:
        for klass in node_type.__mro__:
            method_name = self._class_visit_methods.get(klass.__name__)
            if method_name is not None:
                return getattr(self, method_name)  # type: ignore[no-any-return]
        return self.generic_visit

    def generic_visit(self, node: ASTNode) -> T:
        """Visit all children and return None."""
        for child in iter_child_nodes(node):
            self.visit(child)
        return None  # type: ignore[return-value]  # T defaults to None

    def collect_children(self, node: ASTNode) -> list[T]:
        """Visit all children and collect their results."""
        return [self.visit(child) for child in iter_child_nodes(node)]
