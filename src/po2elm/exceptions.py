from po2elm.classes import Key, MissingTranslation


class Po2ElmError(Exception):
    """Base exception class for po2elm specific errors."""

    def __init__(self, message: str, context: object | None = None) -> None:
        super().__init__(message)
        self.context: object | None = context


class ConfigurationError(Po2ElmError):
    """The configuration file could not be loaded."""


class CatalogNotFoundError(Po2ElmError):
    """A catalog file or folder is missing or unreadable."""


class CatalogParseError(Po2ElmError):
    """A catalog line is missing its quoted segment."""

    def __init__(self, source: str, line_number: int, line: str) -> None:
        super().__init__(
            f"{source}:{line_number}: expected a quoted string in {line!r}",
            context=line,
        )
        self.source: str = source
        self.line_number: int = line_number


class MissingTranslationError(Po2ElmError):
    """Some languages do not provide every key."""

    def __init__(self, missing: list[MissingTranslation]) -> None:
        details = ", ".join(f"{x.msgid!r} in {x.lang}" for x in missing)
        super().__init__(f"Missing {len(missing)} translation(s): {details}")
        self.missing: list[MissingTranslation] = missing


class IdentifierCollisionError(Po2ElmError):
    """Distinct keys derive the same function name."""

    def __init__(self, collisions: dict[str, list[Key]]) -> None:
        details = "; ".join(
            f"{name}: " + ", ".join(repr(key.msgid) for key in keys)
            for name, keys in collisions.items()
        )
        super().__init__(f"Function name collision(s): {details}")
        self.collisions: dict[str, list[Key]] = collisions
