"""
TableGenerator: draw whole records from a set of definition-bound columns.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd
import yaml

from .arbitrary import Arbitrary, GenFn, create_engine
from .config import GeneratorConfig, load_config
from .definitions import DefinitionLoader, Definitions, load_definitions
from .errors import TableSpecError, UnsupportedLocaleError
from .locales import is_supported
from .models import ColumnSpec, TableSpec

logger = logging.getLogger(__name__)


def load_table_spec(spec_path: Union[str, Path]) -> TableSpec:
    """
    Load a table spec from YAML.

    Column pools may use ``!regex`` entries like definition files.

    Expected layout:

        locale: zh-Hant-TW
        seed: 42
        definitions: definitions.yaml
        columns:
          first_name:
            definition: name.first
          greeting:
            definition: name.first
            format: formats.greeting
    """
    with open(spec_path, "r") as f:
        data = yaml.load(f, Loader=DefinitionLoader) or {}

    raw_columns = data.get("columns")
    if not isinstance(raw_columns, dict) or not raw_columns:
        raise TableSpecError(f"{spec_path}: 'columns' must be a non-empty mapping")

    columns = []
    for name, column in raw_columns.items():
        if isinstance(column, str):
            column = {"definition": column}
        if not isinstance(column, dict) or "definition" not in column:
            raise TableSpecError(f"{spec_path}: column '{name}' needs a definition")
        columns.append(ColumnSpec(
            name=name,
            definition=column["definition"],
            pool=column.get("pool"),
            format=column.get("format"),
        ))

    definitions_path = data.get("definitions")
    if definitions_path is not None:
        definitions_path = str(Path(spec_path).parent / definitions_path)

    return TableSpec(
        columns=columns,
        locale=data.get("locale"),
        definitions_path=definitions_path,
        random_seed=data.get("seed"),
    )


class TableGenerator:
    """Generates rows whose columns are each drawn from one definition."""

    def __init__(
        self,
        definitions: Definitions,
        spec: TableSpec,
        random_seed: Optional[int] = None,
    ):
        """
        Initialize the generator.

        Args:
            definitions: Store the columns are bound to
            spec: Column layout and locale
            random_seed: Seed for reproducibility; overrides the spec's seed
        """
        self.definitions = definitions
        self.spec = spec
        self.locale = spec.locale or definitions.default_locale
        if not is_supported(self.locale):
            raise UnsupportedLocaleError(self.locale)

        seed = random_seed if random_seed is not None else spec.random_seed
        self.engine = create_engine(seed)
        self.seed = seed

        self._generators: Dict[str, GenFn] = {
            column.name: self._bind_column(column) for column in spec.columns
        }

    def _bind_column(self, column: ColumnSpec) -> GenFn:
        arbitrary: Arbitrary = self.definitions.arbitrary(column.definition)
        if column.format:
            arbitrary = arbitrary.transform(self.definitions.formater(column.format))
        return arbitrary.make_gen(column.pool)

    def generate_row(self) -> Dict[str, Any]:
        return {
            name: gen(self.engine, self.locale)
            for name, gen in self._generators.items()
        }

    def generate(self, count: int = 100) -> List[Dict[str, Any]]:
        """Generate ``count`` rows."""
        logger.info(
            f"Generating {count} rows ({len(self._generators)} columns, locale {self.locale})"
        )
        return [self.generate_row() for _ in range(count)]

    def to_dataframe(self, rows: List[Dict[str, Any]]) -> pd.DataFrame:
        return pd.DataFrame(rows, columns=self.spec.column_names())

    def export(self, rows: List[Dict[str, Any]], output_path: Union[str, Path]) -> Path:
        """Write rows to ``.parquet`` or, for any other suffix, CSV."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        df = self.to_dataframe(rows)
        if output_path.suffix == ".parquet":
            df.to_parquet(output_path, index=False)
        else:
            df.to_csv(output_path, index=False)

        logger.info(f"Wrote {len(df)} rows to {output_path}")
        return output_path


def run_table(
    spec_path: Union[str, Path],
    count: int,
    output_path: Union[str, Path],
    config: Optional[GeneratorConfig] = None,
    extra_definitions: Optional[List[Union[str, Path]]] = None,
) -> Path:
    """Convenience function: load a spec and its definitions, generate, export."""
    config = config or GeneratorConfig()
    spec = load_table_spec(spec_path)

    paths: List[Union[str, Path]] = []
    if config.definitions_path is not None:
        paths.append(config.definitions_path)
    if spec.definitions_path is not None:
        paths.append(spec.definitions_path)
    paths.extend(extra_definitions or [])
    if not paths:
        raise TableSpecError(f"{spec_path}: no definitions file given")

    definitions = load_definitions(paths, default_locale=config.default_locale)
    generator = TableGenerator(definitions, spec, random_seed=config.random_seed)
    rows = generator.generate(count)
    return generator.export(rows, output_path)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Generate a table of localized records")
    parser.add_argument("spec", help="Path to the table spec YAML")
    parser.add_argument(
        "--count", "-n",
        type=int,
        default=100,
        help="Number of rows to generate",
    )
    parser.add_argument(
        "--output", "-o",
        default="data/generated/records.csv",
        help="Output file (.csv or .parquet)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Generator config YAML",
    )
    parser.add_argument(
        "--definitions", "-d",
        nargs="*",
        default=None,
        help="Extra definitions files, applied after the spec's own",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )

    args = parser.parse_args()

    config = load_config(args.config) if args.config else GeneratorConfig()
    if args.seed is not None:
        config.random_seed = args.seed

    logging.basicConfig(level=config.logging_level, format="%(levelname)s: %(message)s")

    written = run_table(
        spec_path=args.spec,
        count=args.count,
        output_path=args.output,
        config=config,
        extra_definitions=args.definitions,
    )
    print(f"Wrote {written}")
