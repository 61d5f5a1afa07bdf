"""
Exceptions raised while resolving definitions and generating values.
"""


class DefinitionError(Exception):
    """Base exception for definition lookup and generation failures."""
    pass


class UnsupportedLocaleError(DefinitionError, ValueError):
    """Raised when a locale tag is not in the supported-locale registry."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Locale {locale} is not supported")


class MissingDefinitionError(DefinitionError, LookupError):
    """Raised when a generator resolves no pool for its definition."""

    def __init__(self, name: str, locale: str):
        self.name = name
        self.locale = locale
        super().__init__(f"definition {name} in {locale} is empty.")


class EmptyPoolError(DefinitionError, ValueError):
    """Raised when a uniform choice is asked to pick from nothing."""
    pass


class TableSpecError(DefinitionError):
    """Raised when a table spec file is malformed."""
    pass
