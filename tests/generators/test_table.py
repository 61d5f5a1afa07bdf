"""
Tests for record table generation and export.
"""

import re

import pandas as pd
import pytest

from src.generators.config import GeneratorConfig
from src.generators.definitions import Definitions
from src.generators.errors import TableSpecError, UnsupportedLocaleError
from src.generators.models import ColumnSpec, TableSpec
from src.generators.table import TableGenerator, load_table_spec, run_table


DEFINITIONS_YAML = """\
en:
  name:
    first: [Ada, Alan, Grace]
  formats:
    greeting: ["Hello {{ value }}", "Hi {{ value }}"]
  badge:
    - !regex 'EN-\\d{3}'
zh_Hant_TW:
  name:
    first: [怡君, 志明]
  formats:
    greeting: ["你好 {{ value }}"]
  badge:
    - !regex 'TW-\\d{3}'
"""

SPEC_YAML = """\
locale: zh-Hant-TW
seed: 42
definitions: definitions.yaml
columns:
  first_name: name.first
  greeting:
    definition: name.first
    format: formats.greeting
  badge:
    definition: badge
  tier:
    definition: tier
    pool: [gold, silver]
"""


@pytest.fixture
def spec_dir(tmp_path):
    (tmp_path / "definitions.yaml").write_text(DEFINITIONS_YAML, encoding="utf-8")
    (tmp_path / "table.yaml").write_text(SPEC_YAML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def definitions(spec_dir):
    return Definitions.from_file(spec_dir / "definitions.yaml")


class TestLoadTableSpec:

    def test_parses_columns(self, spec_dir):
        spec = load_table_spec(spec_dir / "table.yaml")

        assert spec.column_names() == ["first_name", "greeting", "badge", "tier"]
        assert spec.locale == "zh-Hant-TW"
        assert spec.random_seed == 42
        assert spec.columns[0].definition == "name.first"
        assert spec.columns[1].format == "formats.greeting"
        assert spec.columns[3].pool == ["gold", "silver"]

    def test_definitions_path_relative_to_spec(self, spec_dir):
        spec = load_table_spec(spec_dir / "table.yaml")
        assert spec.definitions_path == str(spec_dir / "definitions.yaml")

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("locale: en\n")
        with pytest.raises(TableSpecError):
            load_table_spec(path)

    def test_column_without_definition(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("columns:\n  a:\n    format: x\n")
        with pytest.raises(TableSpecError):
            load_table_spec(path)


class TestTableGenerator:

    def test_rows_follow_locale(self, definitions, spec_dir):
        spec = load_table_spec(spec_dir / "table.yaml")
        rows = TableGenerator(definitions, spec).generate(10)

        assert len(rows) == 10
        for row in rows:
            assert row["first_name"] in ("怡君", "志明")
            assert row["greeting"] in ("你好 怡君", "你好 志明")
            assert re.fullmatch(r"TW-\d{3}", row["badge"])
            assert row["tier"] in ("gold", "silver")

    def test_same_seed_same_rows(self, definitions, spec_dir):
        spec = load_table_spec(spec_dir / "table.yaml")
        first = TableGenerator(definitions, spec, random_seed=7).generate(5)
        second = TableGenerator(definitions, spec, random_seed=7).generate(5)
        assert first == second

    def test_defaults_to_store_locale(self, definitions):
        spec = TableSpec(columns=[ColumnSpec(name="first", definition="name.first")])
        generator = TableGenerator(definitions, spec, random_seed=1)

        assert generator.locale == "en"
        assert generator.generate_row()["first"] in ("Ada", "Alan", "Grace")

    def test_unsupported_locale(self, definitions):
        spec = TableSpec(columns=[ColumnSpec(name="a", definition="name.first")], locale="xx")
        with pytest.raises(UnsupportedLocaleError):
            TableGenerator(definitions, spec)

    def test_to_dataframe(self, definitions, spec_dir):
        spec = load_table_spec(spec_dir / "table.yaml")
        generator = TableGenerator(definitions, spec)
        df = generator.to_dataframe(generator.generate(4))

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == spec.column_names()
        assert len(df) == 4

    def test_export_csv(self, definitions, spec_dir, tmp_path):
        spec = load_table_spec(spec_dir / "table.yaml")
        generator = TableGenerator(definitions, spec)
        output = generator.export(generator.generate(6), tmp_path / "out" / "rows.csv")

        df = pd.read_csv(output)
        assert len(df) == 6
        assert list(df.columns) == spec.column_names()


class TestRunTable:

    def test_end_to_end(self, spec_dir, tmp_path):
        output = run_table(spec_dir / "table.yaml", count=3, output_path=tmp_path / "rows.csv")
        assert len(pd.read_csv(output)) == 3

    def test_extra_definitions_override(self, spec_dir, tmp_path):
        extra = tmp_path / "extra.yaml"
        extra.write_text("zh_Hant_TW:\n  name:\n    first: [美玲]\n", encoding="utf-8")

        output = run_table(
            spec_dir / "table.yaml",
            count=2,
            output_path=tmp_path / "rows.csv",
            extra_definitions=[extra],
        )
        df = pd.read_csv(output)
        assert set(df["first_name"]) == {"美玲"}

    def test_no_definitions(self, tmp_path):
        spec = tmp_path / "table.yaml"
        spec.write_text("columns:\n  a: name.first\n")
        with pytest.raises(TableSpecError):
            run_table(spec, count=1, output_path=tmp_path / "rows.csv", config=GeneratorConfig())
