"""The builtin dispatch table: command symbol -> Builtin.

Built once at import and exposed read-only.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from fig.builtin import arithmetic, control, sequences, stack_ops
from fig.types.builtin import Builtin


def build_dispatch_table(*modules) -> Mapping[str, Builtin]:
    table: dict[str, Builtin] = {}
    for module in modules or (arithmetic, stack_ops, sequences, control):
        module.register(table)
    return MappingProxyType(table)


BUILTINS = build_dispatch_table()
