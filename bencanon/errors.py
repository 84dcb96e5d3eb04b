# BENCODING ERRORS


class BencodeError(Exception):
    """
    Base class for every error raised while encoding
    """
    pass


class UnsupportedTypeError(BencodeError, TypeError):
    """
    Raised by encode() when the value is not an integer, a string or a container
    """
    def __init__(self, value_type: type):
        self.value_type = value_type
        super().__init__(f'Values of type {value_type.__name__} can not be encoded')


class TypeMismatchError(BencodeError, TypeError):
    """
    Raised by a typed entry point when it receives the wrong kind of value
    """
    def __init__(self, expected: str, value_type: type):
        self.expected = expected
        self.value_type = value_type
        super().__init__(f'Expected {expected}, got: {value_type.__name__}')


class DuplicateKeyError(BencodeError, ValueError):
    def __init__(self, key: bytes):
        self.key = key
        super().__init__(f'Dictionary key {key!r} appears more than once after conversion to bytes')


class ConfigurationError(BencodeError, ValueError):
    pass


class IntegerTooLargeError(BencodeError, ValueError):
    """
    Raised when the interpreter refuses to convert an integer to decimal
    (the int max str digits limit of Python 3.11+)
    """
    def __init__(self, reason: str):
        super().__init__(f'Integer can not be written in decimal: {reason}')
