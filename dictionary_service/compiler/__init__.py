# dictionary_service/compiler/__init__.py
from .compile import GEO_SETS, CompiledSeed, compile_source, parse_source
from .partition import order_options, partition_options
from .render import escape_string, render_module, sanitize_name

__all__ = [
    "GEO_SETS",
    "CompiledSeed",
    "compile_source",
    "parse_source",
    "order_options",
    "partition_options",
    "escape_string",
    "render_module",
    "sanitize_name",
]
