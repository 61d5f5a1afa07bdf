"""
Definitions: per-locale value pools and formatting payloads.

The data table is keyed by locale, then by definition name:

    {"en": {"name": {"first": ["Ada", "Alan"]}},
     "zh_Hant_TW": {"name": {"first": ["怡君", "志明"]}}}

    defs = Definitions(data)
    defs.arbitrary("name.first")          # an Arbitrary drawing from the pool
    defs.formater("name.formats")         # a function formatting a result
"""

import json
import logging
import random
import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import jinja2
import yaml

from .arbitrary import Arbitrary, GenFn
from .combinators import elements, regex
from .errors import MissingDefinitionError, UnsupportedLocaleError
from .locales import DEFAULT_LOCALE, is_supported, normalize_locale
from .models import EntryKind, PayloadKind, classify_entry, classify_payload

logger = logging.getLogger(__name__)

FormatFn = Callable[[Any, str, random.Random], str]

_INDEX_SEGMENT = re.compile(r"\[(\d+)\]")

_TEMPLATE_ENV = jinja2.Environment(undefined=jinja2.StrictUndefined)


class DefinitionLoader(yaml.SafeLoader):
    """SafeLoader that understands ``!regex`` pool entries."""
    pass


def _construct_regex(loader: yaml.SafeLoader, node: yaml.Node) -> "re.Pattern[str]":
    return re.compile(loader.construct_scalar(node))


DefinitionLoader.add_constructor("!regex", _construct_regex)


def _split_path(name: str) -> List[str]:
    """Split ``a.b[0].c`` into ``["a", "b", "0", "c"]``."""
    return [seg for seg in _INDEX_SEGMENT.sub(r".\1", name).split(".") if seg]


def deep_get(container: Any, name: str) -> Any:
    """
    Look up a dotted path inside nested mappings and sequences.

    A key equal to the whole path wins over path traversal. Returns None
    for an empty path or when any segment is absent.
    """
    if isinstance(container, Mapping) and name in container:
        return container[name]

    segments = _split_path(name)
    if not segments:
        return None

    current = container
    for segment in segments:
        if isinstance(current, Mapping):
            if segment not in current:
                return None
            current = current[segment]
        elif isinstance(current, Sequence) and not isinstance(current, str):
            if not segment.isdigit() or int(segment) >= len(current):
                return None
            current = current[int(segment)]
        else:
            return None
    return current


def read_table(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a definitions table from a YAML or JSON file."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.load(f, Loader=DefinitionLoader)
        else:
            data = json.load(f)

    data = data or {}
    logger.info(f"Loaded definitions for {len(data)} locales from {path}")
    return data


def render_template(source: str, result: Any) -> str:
    """
    Interpolate ``result`` into a template string.

    Mapping results expose their keys as placeholders; any other result is
    available as ``{{ value }}``.
    """
    template = _TEMPLATE_ENV.from_string(source)
    if isinstance(result, Mapping):
        return template.render(result)
    return template.render(value=result)


class Definitions:
    """
    Resolves definitions by name and locale, and binds them to generators.

    The data table is read on every draw and never copied, so it may be
    swapped out between draws.
    """

    def __init__(
        self,
        data: Mapping,
        default_locale: str = DEFAULT_LOCALE,
    ):
        """
        Initialize the store.

        Args:
            data: Mapping of locale bucket -> nested definition mapping
            default_locale: Locale used when a bucket is missing
        """
        if not is_supported(default_locale):
            raise UnsupportedLocaleError(default_locale)
        self._data = data
        self.default_locale = default_locale

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        default_locale: str = DEFAULT_LOCALE,
    ) -> "Definitions":
        """Load a definitions table from a YAML or JSON file."""
        return cls(read_table(path), default_locale=default_locale)

    def locales(self) -> List[str]:
        """List the locale buckets present in the data table."""
        return sorted(self._data.keys())

    def get(self, name: str, locale: Optional[str] = None) -> Any:
        """
        Get a definition.

        A missing locale bucket falls back to the default locale's bucket.
        A present bucket that lacks the name does not fall back.

        Args:
            name: Dotted definition path, e.g. ``name.first``
            locale: Locale tag, hyphen or underscore spelling

        Returns:
            The definition value, or None if not found

        Raises:
            UnsupportedLocaleError: if the tag is not in the registry
        """
        if locale is None:
            locale = self.default_locale
        if not is_supported(locale):
            raise UnsupportedLocaleError(locale)

        key = normalize_locale(locale)
        bucket = self._data.get(key)
        if bucket is None:
            logger.debug(
                f"No bucket for locale {key}, falling back to {self.default_locale}"
            )
            bucket = self._data.get(normalize_locale(self.default_locale))
        if bucket is None:
            return None

        return deep_get(bucket, name)

    def has(self, name: str, locale: Optional[str] = None) -> bool:
        """Check whether a definition resolves for a locale."""
        return self.get(name, locale) is not None

    def arbitrary(self, name: str) -> Arbitrary:
        """
        Create an Arbitrary drawing from a definition's pool.

        Nothing is looked up here; a missing definition only fails when the
        returned Arbitrary is drawn from.
        """
        definitions = self

        def gen(pool: Optional[Sequence[Any]] = None) -> GenFn:
            def run(engine: random.Random, locale: Optional[str] = None) -> Any:
                if locale is None:
                    locale = definitions.default_locale
                resolved = pool if pool is not None else definitions.get(name, locale)
                if resolved is None:
                    raise MissingDefinitionError(name, locale)

                concrete = [
                    regex(entry).make_gen()(engine)
                    if classify_entry(entry) is EntryKind.PATTERN
                    else entry
                    for entry in resolved
                ]
                return elements(concrete).make_gen()(engine, locale)

            return run

        return Arbitrary(gen)

    def formater(self, name: str) -> FormatFn:
        """
        Create a function formatting a generated result with a definition.

        A list payload is a set of templates, one chosen per call. Any other
        payload is called with the result as-is.
        """
        definitions = self

        def format_result(result: Any, locale: str, engine: random.Random) -> str:
            payload = definitions.get(name, locale)
            if classify_payload(payload) is PayloadKind.TEMPLATES:
                source = elements(payload).make_gen()(engine, locale)
                logger.debug(f"Formatting {name} with template {source!r}")
                return render_template(source, result)
            return payload(result)

        return format_result


def load_definitions(
    paths: List[Union[str, Path]],
    default_locale: str = DEFAULT_LOCALE,
) -> Definitions:
    """
    Load several definition files into one store.

    Later files extend earlier ones bucket by bucket; a top-level key
    present in both keeps the later value.
    """
    merged: Dict[str, Dict[str, Any]] = {}
    for path in paths:
        for locale, bucket in read_table(path).items():
            merged.setdefault(locale, {}).update(bucket)
    return Definitions(merged, default_locale=default_locale)
