"""Typed placeholder values used to describe documents independently of a driver."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class DataType(str, Enum):
    """Logical data types a placeholder value may carry."""

    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    BOOLEAN = "boolean"
    TIME = "time"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValueType:
    """A value tagged with its logical data type."""

    type: DataType
    value: Any


def int_(value: int) -> ValueType:
    return ValueType(DataType.INT, value)


def int8(value: int) -> ValueType:
    return ValueType(DataType.INT8, value)


def int16(value: int) -> ValueType:
    return ValueType(DataType.INT16, value)


def int32(value: int) -> ValueType:
    return ValueType(DataType.INT32, value)


def int64(value: int) -> ValueType:
    return ValueType(DataType.INT64, value)


def float32(value: float) -> ValueType:
    return ValueType(DataType.FLOAT32, value)


def float64(value: float) -> ValueType:
    return ValueType(DataType.FLOAT64, value)


def string(value: str) -> ValueType:
    return ValueType(DataType.STRING, value)


def boolean(value: bool) -> ValueType:
    return ValueType(DataType.BOOLEAN, value)


def time_value(value: datetime) -> ValueType:
    return ValueType(DataType.TIME, value)


def array(*args: Any) -> list[Any]:
    """A one-element list wrapping the given children as a single list."""
    return [list(args)]


def to_value_type(value: Any) -> Any:
    """Convert a value, or every leaf of nested dicts and lists, to a ValueType.

    Unrecognized leaves become string values holding their textual form.
    The input is left unchanged.
    """
    if isinstance(value, dict):
        return {key: to_value_type(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_value_type(item) for item in value]
    if isinstance(value, bool):
        return boolean(value)
    if isinstance(value, int) and not isinstance(value, Enum):
        return int_(value)
    if isinstance(value, float):
        return float64(value)
    if isinstance(value, Enum):
        return string(str(value.value))
    if isinstance(value, str):
        return string(value)
    if isinstance(value, datetime):
        return time_value(value)
    if value is None:
        return string("<nil>")
    return string(str(value))