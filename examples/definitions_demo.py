"""
Demonstration of definition-bound generators and formatters.

Draws names in two locales from the bundled definitions and formats them
with locale-specific templates.
"""

import logging
from pathlib import Path

from src.generators import Definitions, create_engine, run_table, load_config

DATA_DIR = Path(__file__).parent / "data"


def full_name_arbitrary(defs: Definitions):
    """Draw a first and last name together, then format them."""
    first = defs.arbitrary("name.first")
    last = defs.arbitrary("name.last")

    def combine(value, locale, engine):
        return {"first": value, "last": last.generate(engine, locale)}

    return first.transform(combine).transform(defs.formater("formats.full_name"))


def main():
    config = load_config(DATA_DIR / "config.yaml")
    logging.basicConfig(level=config.logging_level, format="%(levelname)s: %(message)s")

    defs = Definitions.from_file(DATA_DIR / "definitions.yaml", default_locale=config.default_locale)
    engine = create_engine(config.random_seed)
    full_name = full_name_arbitrary(defs)

    for locale in ("en", "zh-Hant-TW", "de"):
        print(f"\n=== {locale} ===")
        for name in full_name.sample(engine, count=3, locale=locale):
            print(f"  {name}")
        print(f"  phone: {defs.arbitrary('phone').generate(engine, locale)}")

    output = run_table(
        DATA_DIR / "people.yaml",
        count=20,
        output_path=Path("data/generated/people.csv"),
        config=config,
    )
    print(f"\nWrote {output}")


if __name__ == "__main__":
    main()
