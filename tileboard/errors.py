class BoardError(Exception):
    """Base class for every error that aborts a board run."""


class ConfigError(BoardError, ValueError):
    pass


class CollectError(BoardError):
    pass


class DecodeError(BoardError):
    pass


class WriteError(BoardError):
    pass


class FontError(BoardError):
    pass
