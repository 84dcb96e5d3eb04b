# ENCODER CONFIGURATION

from dataclasses import dataclass, fields, replace

from .errors import ConfigurationError

# camelCase spellings accepted for the option names
_ALIASES = {
    'encodeEmptyArrayAsDictionary': 'encode_empty_array_as_dictionary',
}


@dataclass(frozen=True)
class EncoderConfig:
    # encode empty ambiguous containers as dictionaries ("de") instead of lists ("le")
    encode_empty_array_as_dictionary: bool = False

    @classmethod
    def option_name(cls, key: str) -> str:
        """
        Resolves an option name, accepting the camelCase alias,
        and raises ConfigurationError for unknown options
        """
        name = _ALIASES.get(key, key)
        if name not in {f.name for f in fields(cls)}:
            raise ConfigurationError(f'Unknown encoder option: {key}')
        return name

    @classmethod
    def from_mapping(cls, params) -> 'EncoderConfig':
        return cls().replace(**params)

    def replace(self, **changes) -> 'EncoderConfig':
        """
        Returns a copy of this config with the given options changed
        """
        resolved = {}
        for key, value in changes.items():
            name = self.option_name(key)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f'Encoder option {key} must be a bool, got: {type(value).__name__}')
            resolved[name] = value
        return replace(self, **resolved)
