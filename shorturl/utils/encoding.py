import string
import threading
from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Dict, Sequence, Tuple, Union

from shorturl.core.errors import (
    ConfigurationError,
    InvalidCharacterError,
    InvalidInputError,
    NegativeResultError,
)

# a-z, A-Z, 0-9 (base 62)
DEFAULT_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits

# Fixed permutation of DEFAULT_ALPHABET. Issued codes depend on this exact order.
SHUFFLED_ALPHABET = "GwdAtHJ0PoWC63yK8Lu7XEOaeq19DcFxZ5MTNlzrisjhB4bIfVYQgnS2mUkpvR"

AlphabetLike = Union[str, Sequence[str]]


def build_alphabet(symbols: AlphabetLike) -> Tuple[str, ...]:
    """Validate ``symbols`` and return them as an immutable tuple.

    A plain string is split into one-character symbols. Longer symbols are
    allowed when every symbol has the same width, so a code can be cut back
    into symbols without a delimiter.
    """
    try:
        alphabet = tuple(symbols)
    except TypeError:
        raise ConfigurationError(f"alphabet must be a string or a sequence of strings, got {symbols!r}")

    for symbol in alphabet:
        if not isinstance(symbol, str) or not symbol:
            raise ConfigurationError(f"alphabet symbols must be non-empty strings, got {symbol!r}")
    if len(alphabet) < 2:
        raise ConfigurationError(f"alphabet needs at least 2 symbols, got {len(alphabet)}")

    widths = {len(symbol) for symbol in alphabet}
    if len(widths) > 1:
        raise ConfigurationError(f"alphabet symbols must all have the same length, got lengths {sorted(widths)}")

    duplicates = [symbol for symbol, count in Counter(alphabet).items() if count > 1]
    if duplicates:
        raise ConfigurationError(f"alphabet has duplicate symbols: {duplicates}")
    return alphabet


def _check_offset(offset) -> int:
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise ConfigurationError(f"offset must be an integer, got {offset!r}")
    return offset


def _check_flag(flag) -> bool:
    if not isinstance(flag, bool):
        raise ConfigurationError(f"use_secondary must be True or False, got {flag!r}")
    return flag


@dataclass(frozen=True)
class CodecConfig:
    """One complete, validated codec configuration."""

    alphabet: Tuple[str, ...] = tuple(DEFAULT_ALPHABET)
    secondary_alphabet: Tuple[str, ...] = tuple(SHUFFLED_ALPHABET)
    use_secondary: bool = False
    offset: int = 0
    _index: Dict[str, int] = field(init=False, repr=False, compare=False)
    _secondary_index: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        alphabet = build_alphabet(self.alphabet)
        secondary = build_alphabet(self.secondary_alphabet)
        object.__setattr__(self, "alphabet", alphabet)
        object.__setattr__(self, "secondary_alphabet", secondary)
        object.__setattr__(self, "use_secondary", _check_flag(self.use_secondary))
        object.__setattr__(self, "offset", _check_offset(self.offset))
        object.__setattr__(self, "_index", {symbol: i for i, symbol in enumerate(alphabet)})
        object.__setattr__(self, "_secondary_index", {symbol: i for i, symbol in enumerate(secondary)})

    @property
    def active_alphabet(self) -> Tuple[str, ...]:
        return self.secondary_alphabet if self.use_secondary else self.alphabet

    @property
    def active_index(self) -> Dict[str, int]:
        return self._secondary_index if self.use_secondary else self._index

    @property
    def base(self) -> int:
        return len(self.active_alphabet)

    @property
    def symbol_width(self) -> int:
        return len(self.active_alphabet[0])


class Codec:
    """Bijective mapping between non-negative integers and short codes.

    The configuration is held as an immutable :class:`CodecConfig`. Setters
    validate a new snapshot and swap it in whole, and every encode/decode call
    works on the snapshot current when it starts.
    """

    def __init__(
        self,
        alphabet: AlphabetLike = DEFAULT_ALPHABET,
        secondary_alphabet: AlphabetLike = SHUFFLED_ALPHABET,
        use_secondary: bool = False,
        offset: int = 0,
    ):
        self._lock = threading.Lock()
        self._config = CodecConfig(
            alphabet=alphabet,
            secondary_alphabet=secondary_alphabet,
            use_secondary=use_secondary,
            offset=offset,
        )

    @classmethod
    def from_config(cls, config: CodecConfig) -> "Codec":
        codec = cls.__new__(cls)
        codec._lock = threading.Lock()
        codec._config = config
        return codec

    def __repr__(self):
        config = self._config
        return f"Codec(base={config.base}, use_secondary={config.use_secondary}, offset={config.offset})"

    @property
    def config(self) -> CodecConfig:
        return self._config

    @property
    def alphabet(self) -> Tuple[str, ...]:
        return self._config.alphabet

    @property
    def secondary_alphabet(self) -> Tuple[str, ...]:
        return self._config.secondary_alphabet

    @property
    def active_alphabet(self) -> Tuple[str, ...]:
        return self._config.active_alphabet

    @property
    def use_secondary(self) -> bool:
        return self._config.use_secondary

    @property
    def offset(self) -> int:
        return self._config.offset

    @property
    def base(self) -> int:
        return self._config.base

    def _update(self, **changes):
        with self._lock:
            self._config = replace(self._config, **changes)

    def set_alphabet(self, symbols: AlphabetLike):
        self._update(alphabet=symbols)

    def set_secondary_alphabet(self, symbols: AlphabetLike):
        self._update(secondary_alphabet=symbols)

    def use_secondary_alphabet(self, flag: bool = True):
        self._update(use_secondary=flag)

    def set_offset(self, value: int):
        self._update(offset=value)

    def derive(self, **changes) -> "Codec":
        """Return a new codec with some configuration fields replaced."""
        return Codec.from_config(replace(self._config, **changes))

    def encode(self, value: int) -> str:
        config = self._config
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(value, config.offset, "value must be an integer")
        if value < 0:
            raise InvalidInputError(value, config.offset, "value must not be negative")

        num = value + config.offset
        if num < 0:
            raise InvalidInputError(value, config.offset)

        alphabet = config.active_alphabet
        if num == 0:
            return alphabet[0]

        base = len(alphabet)
        out = []
        while num:
            num, rem = divmod(num, base)
            out.append(alphabet[rem])
        return ''.join(reversed(out))

    def decode(self, code: str) -> int:
        config = self._config
        if not isinstance(code, str) or not code:
            raise InvalidInputError(code, config.offset, "short code must be a non-empty string")

        index = config.active_index
        base = config.base
        width = config.symbol_width

        num = 0
        for pos in range(0, len(code), width):
            symbol = code[pos:pos + width]
            digit = index.get(symbol)
            if digit is None:
                raise InvalidCharacterError(symbol, code)
            num = num * base + digit

        num -= config.offset
        if num < 0:
            raise NegativeResultError(code, config.offset, num)
        return num
