class FlappyError(Exception):
    pass


class ConfigError(FlappyError):
    """Raised when game constants cannot produce a playable field."""
