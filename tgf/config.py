"""Configuration file parser."""

import logging
from abc import ABC, abstractproperty
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO, Type, TypeVar

import yaml

from tgf.codec import codecs

T = TypeVar("T", bound="Config")

CONFIG_NAME = "tgf.yml"

DEFAULT_NODE_FORMAT = (
    "node id: {{ node.id }}, neighbors: ["
    "{% for n in neighbors %} {{ n.id }}{% endfor %}"
    " ], value: {{ node.value }}"
)


class Config(ABC):

    """Abstract base class for YAML configuration.

    Subclasses should override abstract properties "required" and "optional".

    Example usage:

        # Assuming MyConfig is a subclass of Config:
        cfg = MyConfig.load(Path("/path/to/config.yml"))
        cfg.validate()

    Note that the creator must call validate(). They can optionally pass extra
    defaults as keyword arguments, for example values given on the command line.
    """

    def __init__(self, path: Optional[Path], data: Mapping[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        name = self.__class__.__name__
        return f"{name}(path={self.path!r}, data={self.data!r})"

    @abstractproperty
    def required(self) -> Dict[str, Any]:
        """Required configuration keys and their defaults."""

    @abstractproperty
    def optional(self) -> Dict[str, Any]:
        """Optional configuration keys and their defaults."""

    def validate(self, **defaults: Any):
        """Validate the loaded configuration.

        This must be called manually after creating an instance.

        Extra defaults can be passed for keys as keyword arguments. They will
        override the defaults from the "required" and "optional" properties.
        """
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.path, key)
        for key in self.data:
            if key not in self.required and key not in self.optional:
                logging.warning("%s: unknown key %r", self.path, key)
        self.data = {**self.required, **self.optional, **defaults, **self.data}

    @classmethod
    def empty(cls: Type[T]) -> T:
        """Return a configuration with no file behind it."""
        return cls(None, {})

    @classmethod
    def load(cls: Type[T], path: Path) -> T:
        """Load configuration from a file."""
        with open(path) as f:
            return cls.load_from(path, f)

    @classmethod
    def loads(cls: Type[T], path: Path, content: str) -> T:
        """Load configuration from a string."""
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls: Type[T], path: Path, content: TextIO) -> T:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data))
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        """Get a configuration value."""
        return self.data[key]

    def get(self, key: str) -> Optional[Any]:
        """Get a configuration value, or None if it does not exist."""
        return self.data.get(key)


class GraphConfig(Config):

    required: Dict[str, Any] = {}

    optional = {
        "value_type": "int",
        "default_file": "test.tgf",
        "node_format": DEFAULT_NODE_FORMAT,
    }

    def validate(self, **defaults: Any):
        # Command-line values win over the file, unlike plain defaults.
        overrides = {k: v for k, v in defaults.items() if v is not None}
        super().validate()
        self.data = {**self.data, **overrides}
        if self.data["value_type"] not in codecs:
            logging.error(
                "%s: unknown value_type %r (expected one of %s)",
                self.path or CONFIG_NAME,
                self.data["value_type"],
                ", ".join(codecs),
            )
            self.data["value_type"] = self.optional["value_type"]

    @staticmethod
    def find(path: Optional[Path] = None) -> "GraphConfig":
        """Load the configuration from path, or from tgf.yml if it exists.

        Returns the empty configuration if no path is given and there is no
        tgf.yml in the current directory. The result is not yet validated.
        """
        if path is None:
            default = Path(CONFIG_NAME)
            if not default.is_file():
                return GraphConfig.empty()
            path = default
        logging.info("loading config %s", path)
        try:
            return GraphConfig.load(path)
        except OSError as ex:
            logging.error("cannot read %s: %s", path, ex.strerror)
            return GraphConfig.empty()
