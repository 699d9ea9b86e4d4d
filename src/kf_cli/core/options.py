"""Option builder shared by every resource operation.

An operation is configured by an ordered sequence of options. Each option
sets one field on a zero-valued configuration record; options are applied
left to right so later options override earlier ones. Every operation
family declares a config model, an ``Options`` subclass bound to it, a
``with_*`` constructor per field, and a ``*_option_defaults()`` baseline.

Example:
    >>> class ListConfig(BaseModel):
    ...     namespace: str = ""
    >>> class ListOptions(Options[ListConfig]):
    ...     config_class = ListConfig
    >>> opts = ListOptions(FieldOption("namespace", "default"))
    >>> opts.extend([FieldOption("namespace", "prod")]).to_config().namespace
    'prod'
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import BaseModel

ConfigT = TypeVar("ConfigT", bound=BaseModel)

Option = Callable[[ConfigT], None]


@dataclass(frozen=True)
class FieldOption(Generic[ConfigT]):
    """A single named mutation: sets ``field`` to ``value`` on a config.

    The value is deep-copied when the option is built and again on every
    application, so a resolved config never aliases data owned by the caller.
    """

    field: str
    value: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", copy.deepcopy(self.value))

    def __call__(self, config: ConfigT) -> None:
        setattr(config, self.field, copy.deepcopy(self.value))


class Options(Generic[ConfigT]):
    """Immutable ordered sequence of options for one operation family.

    Subclasses set ``config_class`` to the pydantic model the options
    build and expose per-field accessors as properties.
    """

    config_class: ClassVar[type[BaseModel]]

    __slots__ = ("_options",)

    def __init__(self, *options: Option[ConfigT]) -> None:
        self._options: tuple[Option[ConfigT], ...] = tuple(options)

    def to_config(self) -> ConfigT:
        """Apply all options to a new zero-valued config and return it."""
        cfg: ConfigT = self.config_class()  # type: ignore[assignment]
        for option in self._options:
            option(cfg)
        return cfg

    def extend(self, other: Iterable[Option[ConfigT]]) -> Self:
        """Return a new sequence with ``other`` applied after these options.

        Values set in ``other`` override the values set here. Neither
        sequence is modified.
        """
        return type(self)(*self._options, *other)

    def __add__(self, other: Iterable[Option[ConfigT]]) -> Self:
        return self.extend(other)

    def __iter__(self) -> Iterator[Option[ConfigT]]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Options):
            return NotImplemented
        return type(self) is type(other) and self._options == other._options

    # Option values may be dicts or lists.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(o) for o in self._options)})"
