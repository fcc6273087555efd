"""
ArgStore - typed lookups of command-line flags.

An ArgStore holds an argument vector and answers point queries against it:
whether a flag is present, and which boolean, integer, floating point or string
value goes with it. Each query names a flag by an alias specification such as
"-h|--help|help" and re-scans the whole vector. Nothing is cached and the
vector is never modified.

Flags are recognized in two shapes, ``--flag value`` (bare form) and
``--flag=value`` (``=`` form). The lenient queries (get_*) never raise: an
absent or malformed value gives False, 0, 0.0 or None. The safe_* queries run
the same scan but report those cases as ``Err``.
"""

import json
import logging
import os
import sys
from typing import Any, Optional, Sequence, TextIO

from result import Err, Ok, Result

from .conversions import (
    lenient_float,
    lenient_int,
    match_bool,
    starts_with_digit,
    strict_float,
    strict_int,
)

try:
    import yaml

    HAS_YAML = True
except ImportError:
    HAS_YAML = False

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "|"


def _equals_suffix(arg: str, alias: str) -> Optional[str]:
    """
    Return the text after the first '=' if arg starts with alias and has one.

    The prefix test does not require the '=' to follow the alias directly, so
    "--countx=3" is an '=' form of "--count".
    """
    if arg.startswith(alias) and "=" in arg:
        return arg.split("=", 1)[1]
    return None


def _unquote(value: str) -> str:
    # "--name=\"John Smith\"" captures up to the closing quote, or to the end
    # of the argument when it is missing.
    if value.startswith('"'):
        end = value.find('"', 1)
        return value[1:end] if end != -1 else value[1:]
    return value


class ArgStore:
    """
    A handle over one argument vector, answering typed flag queries.

    Index 0 of the vector is taken to be the program name and is never matched.

    Example:
        store = ArgStore(["prog", "--count", "42", "--name=\"John Smith\""])
        store.get_int("-c|--count")      # 42
        store.get_string("-n|--name")    # "John Smith"
        store.get_bool("-v|--verbose")   # False
    """

    def __init__(
        self,
        argv: Optional[Sequence[str]] = None,
        *,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        """
        Create a store, optionally registering an argument vector.

        Args:
            argv: The argument vector, program name first. An empty store
                answers every query with its default value.
            separator: Character(s) separating alias spellings in a query.

        Raises:
            ValueError: If separator is empty.
            TypeError: If argv contains anything but strings.
        """
        if not separator:
            raise ValueError("Alias separator must be a non-empty string")
        self.separator: str = separator
        self._argv: list[str] = []
        if argv is not None:
            self.parse(argv)

    @classmethod
    def from_sys_argv(cls, *, separator: str = DEFAULT_SEPARATOR) -> "ArgStore":
        """Create a store over the current process's sys.argv."""
        return cls(sys.argv, separator=separator)

    @classmethod
    def from_config_file(cls, config_path: str) -> "ArgStore":
        """
        Create a store from an argument vector recorded in a YAML or JSON file.

        The file holds either a list of strings or a mapping with an "args"
        list and an optional "separator".

        Args:
            config_path (str): Path to the file.

        Returns:
            ArgStore: A store over the recorded vector.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the file format is not supported or invalid.
        """
        data = _load_config_file(config_path)

        separator = DEFAULT_SEPARATOR
        if isinstance(data, dict):
            if "args" not in data:
                raise ValueError(
                    f"Configuration file {config_path} has no 'args' entry"
                )
            separator = data.get("separator", DEFAULT_SEPARATOR)
            if not isinstance(separator, str):
                raise ValueError(
                    f"Separator in {config_path} must be a string, "
                    f"got {type(separator).__name__}"
                )
            data = data["args"]

        if not isinstance(data, list):
            raise ValueError(
                f"Expected a list of arguments in {config_path}, "
                f"got {type(data).__name__}"
            )
        try:
            return cls(data, separator=separator)
        except TypeError as e:
            raise ValueError(f"Invalid argument vector in {config_path}: {e}") from e

    @property
    def argv(self) -> tuple[str, ...]:
        """The registered argument vector."""
        return tuple(self._argv)

    def parse(self, argv: Sequence[str]) -> None:
        """
        Register the argument vector for subsequent queries.

        Calling it again replaces the previous vector.

        Raises:
            TypeError: If argv contains anything but strings.
        """
        args = list(argv)
        for i, arg in enumerate(args):
            if not isinstance(arg, str):
                raise TypeError(
                    f"Argument {i} must be str, got {type(arg).__name__}: {arg!r}"
                )
        self._argv = args
        logger.debug("Registered %d arguments", len(args))

    def format_dump(self) -> list[str]:
        return [f"Argument {i}: {arg}" for i, arg in enumerate(self._argv)]

    def dump(self, file: Optional[TextIO] = None) -> None:
        """Print every argument with its index, in vector order."""
        out = file if file is not None else sys.stdout
        for line in self.format_dump():
            print(line, file=out)

    def _aliases(self, spec: str) -> list[str]:
        # Empty pieces are dropped, an empty alias would prefix-match anything.
        return [alias for alias in spec.split(self.separator) if alias]

    # Scans. Each returns the decisive value, or None when nothing matched.

    def _scan_bool(self, spec: str) -> Optional[bool]:
        """
        Resolve a boolean flag.

        Aliases are tried in order. A bare match returns at once: the next
        argument decides if it is a known token (case-insensitive), else the
        flag's presence means True. '=' form values are compared
        case-sensitively and the last recognized one of an alias is used once
        that alias's scan completes without a bare match.
        """
        args = self._argv
        for alias in self._aliases(spec):
            found: Optional[bool] = None
            for i in range(1, len(args)):
                arg = args[i]
                if arg == alias:
                    if i + 1 < len(args):
                        value = match_bool(args[i + 1], ignore_case=True)
                        if value is not None:
                            return value
                    return True
                suffix = _equals_suffix(arg, alias)
                if suffix is not None:
                    value = match_bool(suffix)
                    if value is not None:
                        found = value
            if found is not None:
                return found
        return None

    def _scan_number(self, spec: str) -> Optional[str]:
        """
        Return the text of the last numeric value given for the flag.

        A bare match only counts when the next argument starts with a digit,
        so "--count -5" is ignored. '=' form suffixes always count.
        """
        args = self._argv
        candidate: Optional[str] = None
        for alias in self._aliases(spec):
            for i in range(1, len(args)):
                arg = args[i]
                if arg == alias:
                    if i + 1 < len(args) and starts_with_digit(args[i + 1]):
                        candidate = args[i + 1]
                else:
                    suffix = _equals_suffix(arg, alias)
                    if suffix is not None:
                        candidate = suffix
        return candidate

    def _scan_string(self, spec: str) -> Optional[str]:
        """Return the last string value given for the flag."""
        args = self._argv
        candidate: Optional[str] = None
        for alias in self._aliases(spec):
            for i in range(1, len(args)):
                arg = args[i]
                if arg == alias and i + 1 < len(args):
                    candidate = args[i + 1]
                else:
                    suffix = _equals_suffix(arg, alias)
                    if suffix is not None:
                        candidate = _unquote(suffix)
        return candidate

    # Lenient queries

    def get_bool(self, spec: str) -> bool:
        """
        Get the boolean value of a flag.

        Accepts ``--debug``, ``--debug <value>`` and ``--debug=<value>`` where
        value is one of true/false, on/off, yes/no, y/n, 1/0.

        Args:
            spec: Alias specification, e.g. "-d|--debug".

        Returns:
            bool: The flag's value, False if it is absent.
        """
        value = self._scan_bool(spec)
        logger.debug("get_bool(%r) -> %r", spec, value)
        return bool(value)

    def get_int(self, spec: str) -> int:
        """
        Get the integer value of a flag given as ``--port 8080`` or ``--port=8080``.

        Returns 0 if the flag is absent or its value has no integer prefix.
        """
        text = self._scan_number(spec)
        logger.debug("get_int(%r) -> %r", spec, text)
        return lenient_int(text) if text is not None else 0

    def get_float(self, spec: str) -> float:
        """
        Get the floating point value of a flag given as ``--pi 3.14`` or ``--pi=3.14``.

        Returns 0.0 if the flag is absent or its value has no numeric prefix.
        """
        text = self._scan_number(spec)
        logger.debug("get_float(%r) -> %r", spec, text)
        return lenient_float(text) if text is not None else 0.0

    def get_string(self, spec: str) -> Optional[str]:
        """
        Get the string value of a flag.

        Accepts ``--name John``, ``--name=John``, ``--name "John Smith"`` and
        ``--name="John Smith"``.

        Returns:
            Optional[str]: The value, or None if the flag never matched.
        """
        value = self._scan_string(spec)
        logger.debug("get_string(%r) -> %r", spec, value)
        return value

    # Strict queries

    def safe_bool(self, spec: str) -> Result[bool, str]:
        """
        Get the boolean value of a flag, or an Err if no alias matched.

        An '=' form with an unrecognized value counts as no match.
        """
        value = self._scan_bool(spec)
        if value is None:
            return Err(f"No boolean value for '{spec}'")
        return Ok(value)

    def safe_int(self, spec: str) -> Result[int, str]:
        """
        Get the integer value of a flag.

        Returns:
            Result[int, str]:
                - Ok with the value if it is a well-formed integer,
                - Err with an error message if it is absent or malformed.
        """
        text = self._scan_number(spec)
        if text is None:
            return Err(f"No integer value for '{spec}'")
        return strict_int(text)

    def safe_float(self, spec: str) -> Result[float, str]:
        """
        Get the floating point value of a flag.

        Returns:
            Result[float, str]:
                - Ok with the value if it is a well-formed number,
                - Err with an error message if it is absent or malformed.
        """
        text = self._scan_number(spec)
        if text is None:
            return Err(f"No floating point value for '{spec}'")
        return strict_float(text)

    def safe_string(self, spec: str) -> Result[str, str]:
        value = self._scan_string(spec)
        if value is None:
            return Err(f"No string value for '{spec}'")
        return Ok(value)


def _load_config_file(config_path: str) -> Any:
    """
    Read a recorded argument vector file and return its decoded content.

    The loader is picked from the extension: .yaml/.yml need PyYAML, .json
    uses the standard json module. Shape checks are left to the caller.

    Raises:
        FileNotFoundError: If config_path doesn't exist.
        ValueError: If the extension is unknown or the content can't be decoded.
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    file_ext = os.path.splitext(config_path)[1].lower()
    if file_ext not in (".yaml", ".yml", ".json"):
        raise ValueError(
            f"Unsupported file format: {file_ext}. "
            "Supported formats are: .yaml, .yml, .json"
        )
    if file_ext != ".json" and not HAS_YAML:
        raise ValueError(
            "YAML support not available. Please install PyYAML: pip install PyYAML"
        )

    with open(config_path, "r") as f:
        if file_ext == ".json":
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON file {config_path}: {e}") from e
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML file {config_path}: {e}") from e
