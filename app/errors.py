class SmashkeysError(Exception):
    """Base class for application errors."""


class InvalidDurationError(SmashkeysError, ValueError):
    def __init__(self, value):
        super().__init__(f"Duration must be a positive number of seconds, got {value!r}")
        self.value = value


class WordListError(SmashkeysError):
    pass


def check_duration(value) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDurationError(value)
    return value
