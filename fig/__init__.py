# Core type aliases for Fig's data model.
# Runtime values are plain Python objects:
#   numbers -> int (arbitrary precision) / float
#   text    -> str
#   lists   -> list, or fig.types.lazy_list.LazyList for unbounded sequences
#   blocks  -> fig.types.nodes.BlockNode (the AST node itself)
# No wrapper classes are used for scalars.

from typing import Any, Callable

# Runtime value alias
FigValue = Any
# Numbers as produced by literals, arguments and arithmetic builtins
FigNumber = int | float

# Builtin implementation signature (pure builtins take operands only,
# stack-effect builtins take the evaluator first)
BuiltinFn = Callable[..., FigValue]

__version__ = "0.4.0"
