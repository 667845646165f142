from __future__ import annotations

from dataclasses import dataclass

from fig import BuiltinFn


@dataclass(frozen=True)
class Builtin:
    """Dispatch-table entry for one command symbol.

    - arity:        values popped from the stack
    - accepts:      accepted value kinds per operand, in push order
    - fn:           implementation
    - vectorize:    apply element-wise when any operand is a List
    - stack_effect: fn takes the evaluator first and pushes its own results;
                    otherwise fn returns exactly one value to push
    """
    symbol: str
    name: str
    arity: int
    accepts: tuple[frozenset[str], ...]
    fn: BuiltinFn
    vectorize: bool = False
    stack_effect: bool = False
    doc: str = ""

    def __post_init__(self):
        if len(self.accepts) != self.arity:
            raise ValueError(f"builtin {self.symbol!r} declares {self.arity} operands but {len(self.accepts)} type sets")
        if self.vectorize and self.stack_effect:
            raise ValueError(f"builtin {self.symbol!r} cannot both vectorize and manage the stack")

    def signature(self) -> str:
        operands = " ".join("|".join(sorted(kinds)) for kinds in self.accepts)
        suffix = " (vectorizes)" if self.vectorize else ""
        return f"{self.symbol}  {self.name} ({operands}){suffix}"


def install(table: dict[str, Builtin], *entries: Builtin) -> None:
    """Add entries to a dispatch table; every symbol may be claimed once."""
    for entry in entries:
        if entry.symbol in table:
            raise ValueError(f"duplicate builtin for symbol {entry.symbol!r}")
        table[entry.symbol] = entry
