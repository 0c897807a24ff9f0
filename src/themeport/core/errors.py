"""
Error types for themeport CSS import, configuration, and theme storage.
"""


class ThemeportError(Exception):
    """Base exception for all themeport errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CssImportError(ThemeportError):
    """
    Raised when pasted CSS cannot be turned into theme tokens as a whole.

    Declaration-level problems never raise this; they are dropped.
    """

    pass


class NoRecognizedBlockError(CssImportError):
    """
    Raised when neither a light nor a dark selector block exists in the text.

    Examples:
    - ``body { color: red; }``
    - An empty paste
    - Only ``@media`` wrapped rules
    """

    DEFAULT_MESSAGE = "Failed to parse CSS. Check the format and try again."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.DEFAULT_MESSAGE)


class ColorParseError(ThemeportError):
    """
    Raised when a value looks like a color but cannot be parsed.

    Examples:
    - ``hsl(abc, 10%, 10%)``
    - ``#12345``
    - ``rgb(1 2)``
    """

    pass


class ConfigError(ThemeportError):
    """
    Raised when themeport.toml is unreadable or holds invalid settings.

    Examples:
    - Selector lists that are not lists of strings
    - Aliases that point to an unknown token key
    """

    pass


class ThemeStoreError(ThemeportError):
    """Raised when the saved-themes file cannot be read or a theme is missing."""

    pass
