# BENCODING ENCODER

import logging
from collections.abc import Mapping
from typing import Optional, Union

from .config import EncoderConfig
from .errors import (
    DuplicateKeyError,
    IntegerTooLargeError,
    TypeMismatchError,
    UnsupportedTypeError,
)

logger = logging.getLogger(__name__)

# indicates start of integers
TOKEN_INTEGER = b'i'

# indicates start of list
TOKEN_LIST = b'l'

# indicates start of dict
TOKEN_DICT = b'd'

# indicates end of int, list and dict values
TOKEN_END = b'e'

# delimits string length from string data
TOKEN_STRING_SEPARATOR = b':'

BYTES_TYPES = (bytes, bytearray, memoryview)


def _is_int(value) -> bool:
    # bool is a subclass of int but has no bencode counterpart
    return isinstance(value, int) and not isinstance(value, bool)


def _is_string(value) -> bool:
    return isinstance(value, (str,) + BYTES_TYPES)


def _is_container(value) -> bool:
    return isinstance(value, (list, tuple, Mapping))


def _decimal(value: int) -> bytes:
    try:
        return str(value).encode('ascii')
    except ValueError as e:
        raise IntegerTooLargeError(str(e)) from e


def _is_dense_sequence(mapping: Mapping) -> bool:
    """
    True when the keys of the mapping are exactly 0, 1, ..., len(mapping) - 1
    """
    return all(_is_int(key) and 0 <= key < len(mapping) for key in mapping)


class Encoder:
    """
    Encodes integers, strings, lists and dictionaries to bencode.

    Dictionaries are always written with their keys sorted byte-wise, so equal
    values produce identical bytes no matter the insertion order of their keys.

    A mapping is an ambiguous container: when its keys are exactly the
    integers 0..n-1 it is written as a list, otherwise as a dictionary.
    An empty mapping is written as an empty list unless the
    encode_empty_array_as_dictionary option is set.
    """
    def __init__(self, config: Optional[Union[EncoderConfig, Mapping]] = None, **params):
        """
        config may be an EncoderConfig or a plain mapping of options;
        keyword params are merged over it
        """
        if config is None:
            config = EncoderConfig()
        elif isinstance(config, Mapping):
            config = EncoderConfig.from_mapping(config)
        self._config = config.replace(**params) if params else config

    @property
    def config(self) -> EncoderConfig:
        return self._config

    def set_config(self, key: str, value: bool) -> 'Encoder':
        """
        Changes one option for subsequent calls, returns the encoder itself
        """
        self._config = self._config.replace(**{key: value})
        logger.debug(f'Encoder option {key} set to {value}')
        return self

    def encode(self, data) -> bytes:
        """
        Checks data type to encode and encodes accordingly
        """
        if _is_int(data):
            return self.encode_integer(data)

        elif _is_string(data):
            return self.encode_string(data)

        elif isinstance(data, (list, tuple)):
            return self.encode_list(data)

        elif isinstance(data, Mapping):
            if not data:
                if self._config.encode_empty_array_as_dictionary:
                    logger.debug('Empty mapping encoded as dictionary')
                    return self.encode_dictionary(data)
                logger.debug('Empty mapping encoded as list')
                return self.encode_list(data)

            if _is_dense_sequence(data):
                logger.debug(f'Mapping with keys 0..{len(data) - 1} encoded as list')
                return self.encode_list([data[i] for i in range(len(data))])

            return self.encode_dictionary(data)

        raise UnsupportedTypeError(type(data))

    def encode_integer(self, value: int) -> bytes:
        if not _is_int(value):
            raise TypeMismatchError('integer', type(value))
        return TOKEN_INTEGER + _decimal(value) + TOKEN_END

    def encode_string(self, value) -> bytes:
        """
        Writes the length in bytes, not characters: str values are
        UTF-8 encoded before measuring
        """
        if isinstance(value, str):
            value = value.encode('utf-8')
        elif isinstance(value, BYTES_TYPES):
            value = bytes(value)
        else:
            raise TypeMismatchError('string', type(value))

        result = bytearray()
        result += str(len(value)).encode('ascii')
        result += TOKEN_STRING_SEPARATOR
        result += value
        return bytes(result)

    def encode_list(self, data) -> bytes:
        if not _is_container(data):
            raise TypeMismatchError('container', type(data))

        items = data.values() if isinstance(data, Mapping) else data

        result = bytearray(TOKEN_LIST)
        result += b''.join(self.encode(item) for item in items)
        result += TOKEN_END
        return bytes(result)

    def encode_dictionary(self, data) -> bytes:
        if not _is_container(data):
            raise TypeMismatchError('container', type(data))

        # lists are treated as index -> value pairs
        items = data.items() if isinstance(data, Mapping) else enumerate(data)

        entries = {}
        for k, v in items:
            key = self._coerce_key(k)
            if key in entries:
                raise DuplicateKeyError(key)
            entries[key] = v

        result = bytearray(TOKEN_DICT)
        for key in sorted(entries):
            result += self.encode_string(key)
            result += self.encode(entries[key])

        result += TOKEN_END
        return bytes(result)

    def _coerce_key(self, key) -> bytes:
        if _is_int(key):
            return _decimal(key)
        elif isinstance(key, str):
            return key.encode('utf-8')
        elif isinstance(key, BYTES_TYPES):
            return bytes(key)
        raise TypeMismatchError('string or integer key', type(key))
