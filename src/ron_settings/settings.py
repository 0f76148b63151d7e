"""Settings handle"""

import copy
from pathlib import Path
from typing import Any, Generic, Optional, Type, TypeVar

from .resolver import resolve_path
from .ron import PrettyConfig
from .storage import PathLike, read_value, write_value

T = TypeVar("T")


class Settings(Generic[T]):
    """
    A configuration value together with the file it was loaded from

    Attribute reads and writes that are not part of the handle itself pass
    through to the wrapped value::

        @dataclass
        class Config:
            foo: str
            bar: int

        settings = Settings.load_from(Config, "settings.ron")
        settings.foo = "Hello World"
        settings.bar = 42
        settings.save()

    leaves ``settings.ron`` containing::

        Config(
            foo: "Hello World",
            bar: 42,
        )

    Fields sharing a name with the handle (``path``, ``value``, ``load``,
    ``load_from``, ``save``, ``save_to``, ``copy``) are shadowed by it; reach
    them through ``settings.value``.
    """

    __slots__ = ("_path", "_value")

    def __init__(self, path: PathLike, value: T):
        object.__setattr__(self, "_path", Path(path))
        object.__setattr__(self, "_value", value)

    @classmethod
    def load(
        cls,
        type_: Type[T],
        qualifier: str,
        organization: str,
        application: str,
    ) -> "Settings[T]":
        """
        Find and load the settings file for an application

        Looks at ``{APPLICATION}_CONFIG_PATH``, then ``settings.ron`` in the
        working directory, then ``settings.ron`` in the platform
        configuration directory.

        Raises:
            NotFoundError: If none of the locations exist
            OpenError: If the chosen file cannot be opened
            DeserializeError: If the chosen file does not parse as ``type_``
        """
        path = resolve_path(qualifier, organization, application)
        return cls.load_from(type_, path)

    @classmethod
    def load_from(cls, type_: Type[T], path: PathLike) -> "Settings[T]":
        """Load the settings file at ``path``"""
        value = read_value(path, type_)
        return cls(path, value)

    def save(self, pretty: Optional[PrettyConfig] = None) -> None:
        """Save the settings to the path they were loaded from"""
        self.save_to(self._path, pretty)

    def save_to(self, path: PathLike, pretty: Optional[PrettyConfig] = None) -> None:
        """Save the settings to ``path`` without changing the stored path"""
        write_value(path, self._value, pretty)

    @property
    def path(self) -> Path:
        return self._path

    @path.setter
    def path(self, path: PathLike) -> None:
        object.__setattr__(self, "_path", Path(path))

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def copy(self) -> "Settings[T]":
        """Independent handle with a deep copy of the value"""
        return type(self)(self._path, copy.deepcopy(self._value))

    # Delegation ----------------------------------------------------------

    def _own(self, name: str) -> bool:
        return (
            name in Settings.__slots__
            or (name.startswith("__") and name.endswith("__"))
            or hasattr(type(self), name)
        )

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        if self._own(name):
            raise AttributeError(name)
        return getattr(self._value, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if self._own(name):
            object.__setattr__(self, name, value)
        else:
            setattr(self._value, name, value)

    def __delattr__(self, name: str) -> None:
        if self._own(name):
            raise AttributeError(f"cannot delete {name!r} from a settings handle")
        delattr(self._value, name)

    def __getitem__(self, key: Any) -> Any:
        return self._value[key]

    def __setitem__(self, key: Any, item: Any) -> None:
        self._value[key] = item

    def __delitem__(self, key: Any) -> None:
        del self._value[key]

    def __contains__(self, key: Any) -> bool:
        return key in self._value

    def __copy__(self) -> "Settings[T]":
        return type(self)(self._path, copy.copy(self._value))

    def __deepcopy__(self, memo: dict) -> "Settings[T]":
        return type(self)(self._path, copy.deepcopy(self._value, memo))

    def __repr__(self) -> str:
        return f"Settings(path={str(self._path)!r}, value={self._value!r})"
