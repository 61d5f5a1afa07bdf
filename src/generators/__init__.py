"""
Locale-aware definition resolution and generator binding.

A Definitions store maps (locale, name) to a pool of literals and regex
patterns, or to a formatting payload. ``arbitrary(name)`` binds a pool to a
deferred generator; ``formater(name)`` binds a payload to a function that
turns a generated value into text.
"""

from .arbitrary import Arbitrary, create_engine
from .combinators import elements, regex
from .config import GeneratorConfig, load_config
from .definitions import Definitions, load_definitions, render_template
from .errors import (
    DefinitionError,
    EmptyPoolError,
    MissingDefinitionError,
    TableSpecError,
    UnsupportedLocaleError,
)
from .locales import AVAILABLE_LOCALE_IDS, DEFAULT_LOCALE, normalize_locale
from .models import ColumnSpec, EntryKind, PayloadKind, TableSpec
from .table import TableGenerator, load_table_spec, run_table

__all__ = [
    # Core
    "Arbitrary",
    "Definitions",
    "create_engine",
    "elements",
    "regex",
    "load_definitions",
    "render_template",
    # Locales
    "AVAILABLE_LOCALE_IDS",
    "DEFAULT_LOCALE",
    "normalize_locale",
    # Models
    "ColumnSpec",
    "EntryKind",
    "PayloadKind",
    "TableSpec",
    # Errors
    "DefinitionError",
    "EmptyPoolError",
    "MissingDefinitionError",
    "TableSpecError",
    "UnsupportedLocaleError",
    # Config / tables
    "GeneratorConfig",
    "load_config",
    "TableGenerator",
    "load_table_spec",
    "run_table",
]
