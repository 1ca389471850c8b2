"""Unit tests for compiling a declarative seed source into ordered operations."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from dictionary_service.compiler.compile import GEO_SETS, compile_source, parse_source
from dictionary_service.errors import SpecError
from dictionary_service.seeds.operations import OptionOp, SetOp


def source(sets: List[Dict[str, Any]], options: List[Dict[str, Any]]) -> str:
    return json.dumps({"_format": "dictionary-seed/v1", "sets": sets, "options": options})


def option(set_name: str, key: str, locale: str = "en", parent: Any = None, **extra: Any) -> Dict[str, Any]:
    return {"set": set_name, "key": key, "value": key, "locale": locale, "parent_key": parent, **extra}


# ============================================================================
# Parsing
# ============================================================================


class TestParseSource:
    def test_invalid_json_is_spec_error(self) -> None:
        with pytest.raises(SpecError, match="invalid JSON"):
            parse_source("{not json")

    def test_invalid_utf8_is_spec_error(self) -> None:
        with pytest.raises(SpecError, match="invalid JSON"):
            parse_source(b'{"sets": [{"name": "\xff"}]}')

    @pytest.mark.parametrize(
        ("sets", "options"),
        [
            ([{"name": "a:b"}], []),
            ([{"name": "a\nb"}], []),
            ([{"name": "a", "parent": "x:y"}], []),
            ([{"name": "a", "labels": {"e:n": "A"}}], []),
            ([{"name": "a"}], [option("a", "b:c")]),
            ([{"name": "a"}], [option("a", "k\nINJECTED = 1")]),
            ([{"name": "a"}], [option("a", "x", locale="en\t")]),
            ([{"name": "a"}], [option("a", "x", parent="a:b:c")]),
            ([{"name": "a"}], [option("a", "x", parent=":y")]),
        ],
    )
    def test_bad_natural_keys_are_rejected(self, sets, options) -> None:
        with pytest.raises(SpecError, match="invalid seed source"):
            parse_source(source(sets, options))

    def test_missing_required_field_is_spec_error(self) -> None:
        with pytest.raises(SpecError, match="invalid seed source"):
            parse_source(json.dumps({"sets": [{"label": "no name"}], "options": []}))

    def test_reads_format_and_seed_header(self) -> None:
        src = parse_source(json.dumps({
            "_format": "dictionary-seed/v1",
            "seed": {"id": "2026-01-01_extra", "description": "Extra"},
            "sets": [],
            "options": [],
        }))
        assert src.format == "dictionary-seed/v1"
        assert src.seed.id == "2026-01-01_extra"

    def test_bundled_source_parses(self, seed_source_path: Path) -> None:
        src = parse_source(seed_source_path.read_bytes())
        assert {s.name for s in src.sets} >= {"estate_category", "estate_type", "estate_subtype"}


# ============================================================================
# Compilation
# ============================================================================


class TestCompileSource:
    def test_sets_materialize_once_per_locale(self) -> None:
        compiled = compile_source(parse_source(source(
            [{"name": "category", "label": "Category", "labels": {"es": "Categoría"}}],
            [option("category", "residential", "es"), option("category", "residential", "en")],
        )))
        assert compiled.locales == ["en", "es"]
        assert compiled.sets == [
            SetOp(name="category", locale="en", label="Category"),
            SetOp(name="category", locale="es", label="Categoría"),
        ]

    def test_set_label_falls_back_to_name(self) -> None:
        compiled = compile_source(parse_source(source([{"name": "category"}], [option("category", "a")])))
        assert compiled.sets[0].label == "category"

    def test_option_label_falls_back_to_value(self) -> None:
        compiled = compile_source(parse_source(source(
            [{"name": "category"}],
            [option("category", "residential", labels={"es": "Residencial"})],
        )))
        assert compiled.options[0].label == "residential"

    def test_bare_parent_key_uses_declared_parent_set(self) -> None:
        compiled = compile_source(parse_source(source(
            [{"name": "category"}, {"name": "type", "parent": "category"}],
            [option("category", "residential"), option("type", "house", parent="residential")],
        )))
        house = compiled.options[1]
        assert (house.parent_set, house.parent_key) == ("category", "residential")
        assert house.parent_lookup_key == "category:residential:en"

    def test_qualified_parent_key_names_the_set(self) -> None:
        compiled = compile_source(parse_source(source(
            [{"name": "category"}, {"name": "type"}],
            [option("category", "residential"), option("type", "house", parent="category:residential")],
        )))
        assert compiled.options[1].parent_set == "category"

    def test_bare_parent_key_without_parent_set_stays_in_own_set(self) -> None:
        compiled = compile_source(parse_source(source(
            [{"name": "zone"}],
            [option("zone", "north", parent="all"), option("zone", "all")],
        )))
        assert [op.key for op in compiled.options] == ["all", "north"]

    def test_sets_come_before_options(self) -> None:
        compiled = compile_source(parse_source(source(
            [{"name": "category"}],
            [option("category", "residential")],
        )))
        kinds = [type(op) for op in compiled.operations]
        assert kinds == [SetOp, OptionOp]

    def test_excluded_sets_and_their_options_are_dropped(self) -> None:
        compiled = compile_source(
            parse_source(source(
                [{"name": "category"}, {"name": "country"}],
                [option("category", "residential"), option("country", "pl")],
            )),
            exclude_sets=GEO_SETS,
        )
        assert compiled.set_count == 1
        assert {op.set_name for op in compiled.options} == {"category"}

    def test_seed_header_can_be_overridden(self) -> None:
        compiled = compile_source(
            parse_source(source([{"name": "category"}], [])),
            seed_id="2026-02-01_override",
            description="Override",
        )
        assert (compiled.seed_id, compiled.description) == ("2026-02-01_override", "Override")

    @pytest.mark.parametrize(
        ("sets", "options", "message"),
        [
            ([{"name": "a"}, {"name": "a"}], [], "declared twice"),
            ([{"name": "a", "parent": "ghost"}], [], "parent set 'ghost'"),
            ([{"name": "a"}], [option("b", "x")], "undeclared set 'b'"),
            ([{"name": "a"}], [option("a", "x"), option("a", "x")], "a:x:en defined twice"),
            ([{"name": "a"}], [option("a", "x", parent="ghost:y")], "parent set 'ghost'"),
        ],
    )
    def test_inconsistent_source_is_spec_error(self, sets, options, message) -> None:
        with pytest.raises(SpecError, match=message):
            compile_source(parse_source(source(sets, options)))

    def test_unresolved_parent_is_spec_error_unless_fallback(self) -> None:
        raw = source(
            [{"name": "category"}, {"name": "type", "parent": "category"}],
            [option("type", "house", parent="residential")],
        )
        with pytest.raises(SpecError, match="unresolved parent"):
            compile_source(parse_source(raw))

        compiled = compile_source(parse_source(raw), allow_root_fallback=True)
        assert compiled.allow_root_fallback is True
        assert compiled.options[0].parent_key == "residential"

    def test_bundled_source_orders_three_levels(self, seed_source_path: Path) -> None:
        compiled = compile_source(parse_source(seed_source_path.read_bytes()), exclude_sets=GEO_SETS)
        position = {op.lookup_key: i for i, op in enumerate(compiled.options)}
        for op in compiled.options:
            if op.has_parent:
                assert position[op.parent_lookup_key] < position[op.lookup_key]
        assert compiled.locales == ["en", "es"]
        assert compiled.set_count == 4
        assert len(compiled.options) == 32
