from functools import lru_cache
import logging

from shorturl.core.config import Settings, settings
from shorturl.utils.encoding import Codec

logger = logging.getLogger(__name__)


def build_codec(config: Settings, **overrides) -> Codec:
    """Create a codec from settings; keyword overrides win over settings."""
    options = {
        "use_secondary": config.CODEC_USE_SECONDARY,
        "offset": config.CODEC_OFFSET,
    }
    if config.CODEC_ALPHABET:
        options["alphabet"] = config.CODEC_ALPHABET
    if config.CODEC_SECONDARY_ALPHABET:
        options["secondary_alphabet"] = config.CODEC_SECONDARY_ALPHABET
    options.update({key: value for key, value in overrides.items() if value is not None})
    return Codec(**options)


@lru_cache()
def get_codec() -> Codec:
    codec = build_codec(settings)
    logger.info(
        "Short code codec ready: base=%d, use_secondary=%s, offset=%d",
        codec.base, codec.use_secondary, codec.offset
    )
    return codec
