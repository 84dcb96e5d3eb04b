from .config import EncoderConfig
from .encoder import Encoder
from .errors import (
    BencodeError,
    ConfigurationError,
    DuplicateKeyError,
    IntegerTooLargeError,
    TypeMismatchError,
    UnsupportedTypeError,
)

__version__ = '0.1.0'

_default_encoder = Encoder()


def encode(data) -> bytes:
    """
    Encodes data with the default configuration
    """
    return _default_encoder.encode(data)


__all__ = [
    'BencodeError',
    'ConfigurationError',
    'DuplicateKeyError',
    'IntegerTooLargeError',
    'Encoder',
    'EncoderConfig',
    'TypeMismatchError',
    'UnsupportedTypeError',
    'encode',
]
