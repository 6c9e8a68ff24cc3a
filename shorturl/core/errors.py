class ShortCodeError(ValueError):
    """Base class for everything the codec raises."""


class ConfigurationError(ShortCodeError):
    pass


class InvalidInputError(ShortCodeError):
    def __init__(self, value, offset: int, reason: str = "value + offset must be a non-negative integer"):
        self.value = value
        self.offset = offset
        super().__init__(f"invalid input {value!r} for offset {offset}: {reason}")


class InvalidCharacterError(ShortCodeError):
    def __init__(self, symbol: str, code: str):
        self.symbol = symbol
        self.code = code
        super().__init__(f"invalid character {symbol!r} in {code!r}")


class NegativeResultError(ShortCodeError):
    def __init__(self, code: str, offset: int, value: int):
        self.code = code
        self.offset = offset
        self.value = value
        super().__init__(f"invalid string {code!r} for offset {offset}. produces negative int: {value}")
