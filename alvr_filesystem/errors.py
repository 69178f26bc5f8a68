class LayoutError(Exception):
    exit_code: int = 1

    def __init__(self, message: str):
        super().__init__(message)


class ConfigError(LayoutError):
    exit_code = 2


class ConfigLookupError(LayoutError):
    exit_code = 3


class UnsupportedPlatformError(LayoutError):
    exit_code = 4


class InvalidPathError(LayoutError):
    exit_code = 5
