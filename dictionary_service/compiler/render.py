# dictionary_service/compiler/render.py
from __future__ import annotations

import re
from typing import Dict, List, Optional

from dictionary_service.compiler.compile import CompiledSeed
from dictionary_service.seeds.operations import OptionOp, SetOp

_STRIP = re.compile(r"[_\-:/\s]")
_NON_IDENT = re.compile(r"[^0-9A-Za-z]")

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def sanitize_name(name: str) -> str:
    """Natural key -> identifier fragment ('estate_category' -> 'ESTATECATEGORY')."""
    s = _STRIP.sub("", name)
    s = _NON_IDENT.sub("", s)
    return s.upper() or "X"


def escape_string(s: str) -> str:
    out: List[str] = []
    for ch in s:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\x{ord(ch):02x}")
        else:
            out.append(ch)
    return "".join(out)


def quote(s: str) -> str:
    return f'"{escape_string(s)}"'


def comment(s: str) -> str:
    return f"  # {escape_string(s)}"


class ModuleRenderer:
    """
    Renders one CompiledSeed as a Python module. Variable naming state
    (option counter, used names) lives on the instance, one per render.
    """

    def __init__(self, compiled: CompiledSeed, *, source_name: str = "", output_name: str = "") -> None:
        self.compiled = compiled
        self.source_name = source_name
        self.output_name = output_name
        self._counter = 0
        self._used: Dict[str, int] = {}
        self._names: List[str] = []

    def _unique(self, base: str) -> str:
        n = self._used.get(base, 0) + 1
        self._used[base] = n
        return base if n == 1 else f"{base}_{n}"

    def _set_line(self, op: SetOp) -> str:
        var = self._unique(f"SET_{sanitize_name(op.name)}_{sanitize_name(op.locale)}")
        self._names.append(var)
        return (
            f"{var} = SetOp(name={quote(op.name)}, locale={quote(op.locale)}, "
            f"label={quote(op.label)}, active={op.active!r})"
            f"{comment(op.lookup_key)}"
        )

    def _option_line(self, op: OptionOp) -> str:
        self._counter += 1
        var = self._unique(f"OPT_{self._counter}")
        self._names.append(var)
        args = [
            f"set_name={quote(op.set_name)}",
            f"key={quote(op.key)}",
            f"locale={quote(op.locale)}",
            f"label={quote(op.label)}",
            f"value={quote(op.value)}",
            f"short_code={quote(op.short_code)}",
            f"order={op.order!r}",
            f"active={op.active!r}",
        ]
        note = op.lookup_key
        if op.has_parent:
            args.append(f"parent_set={quote(op.parent_set or op.set_name)}")
            args.append(f"parent_key={quote(op.parent_key or '')}")
            note += f" -> {op.parent_lookup_key}"
        return f"{var} = OptionOp({', '.join(args)}){comment(note)}"

    def render(self) -> str:
        c = self.compiled
        origin = f" from {escape_string(self.source_name)}" if self.source_name else ""
        lines: List[str] = [
            f"# Code generated by dictionary-seeds-compile{origin}. DO NOT EDIT.",
        ]
        if self.output_name:
            lines.append(f"# {escape_string(self.output_name)}")
        lines += [
            "from __future__ import annotations",
            "",
            "from typing import List",
            "",
            "from dictionary_service.seeds.operations import Operation, OptionOp, SetOp",
            "",
            f"SEED_ID = {quote(c.seed_id)}",
            f"SEED_DESCRIPTION = {quote(c.description)}",
            f"ALLOW_ROOT_FALLBACK = {c.allow_root_fallback!r}",
            f"LOCALES = [{', '.join(quote(loc) for loc in c.locales)}]",
            "",
            "# sets",
        ]
        lines.extend(self._set_line(op) for op in c.sets)

        section: Optional[str] = None
        for op in c.options:
            wanted = "# options with parents" if op.has_parent else "# options without parents"
            if wanted != section:
                lines.extend(["", wanted])
                section = wanted
            lines.append(self._option_line(op))

        lines.extend(["", "OPERATIONS: List[Operation] = ["])
        lines.extend(f"    {name}," for name in self._names)
        lines.extend(["]", ""])
        return "\n".join(lines)


def render_module(compiled: CompiledSeed, *, source_name: str = "", output_name: str = "") -> str:
    return ModuleRenderer(compiled, source_name=source_name, output_name=output_name).render()
