"""aqlkit assembly layer: template fragments and values → AQL query."""
from aqlkit.compile.bind_registry import BindRegistry
from aqlkit.compile.builder import aql, from_template, join
from aqlkit.compile.values import AqlValue, ValueKind, classify

__all__ = [
    "AqlValue",
    "BindRegistry",
    "ValueKind",
    "aql",
    "classify",
    "from_template",
    "join",
]
