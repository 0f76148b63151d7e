"""Reading and writing settings files"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Type, TypeVar, Union

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from . import ron
from .errors import DeserializeError, OpenError, SerializeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

PathLike = Union[str, os.PathLike]


@lru_cache(maxsize=128)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def read_value(path: PathLike, type_: Type[T]) -> T:
    """
    Load a settings file into an instance of ``type_``

    Raises:
        OpenError: If the file cannot be opened
        DeserializeError: If the contents are not valid RON or do not
            validate as ``type_``, or if pydantic has no schema for ``type_``
    """
    path = Path(path)
    logger.debug("Loading settings from %s", path)

    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as e:
        raise OpenError(path, e) from e

    with f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise DeserializeError(e) from e
        except OSError as e:
            raise OpenError(path, e) from e

    try:
        data = ron.loads(text)
    except ron.RonSyntaxError as e:
        raise DeserializeError(e, e.position) from e

    try:
        return _adapter(type_).validate_python(data)
    except (ValidationError, PydanticSchemaGenerationError) as e:
        raise DeserializeError(e) from e


def write_value(path: PathLike, value: Any, pretty: Optional[ron.PrettyConfig] = None) -> None:
    """
    Write a value to a settings file as pretty RON with struct names

    The destination is truncated and rewritten in place, so an interrupted
    write can leave a partial file behind.

    Raises:
        SerializeError: If the value has no RON representation or writing fails
        OpenError: If the file cannot be created
    """
    path = Path(path)
    if pretty is None:
        pretty = ron.PrettyConfig()

    try:
        text = ron.dumps(value, pretty)
    except ron.RonEncodeError as e:
        raise SerializeError(e) from e

    logger.debug("Saving settings to %s", path)
    try:
        f = open(path, "w", encoding="utf-8", newline="")
    except OSError as e:
        raise OpenError(path, e) from e

    try:
        with f:
            f.write(text)
    except OSError as e:
        raise SerializeError(e) from e
