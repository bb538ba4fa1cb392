# engine/values.py
"""Typed values: a closed set of four variants, one per column DataType."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union

from ..sql.ast_nodes import DataType, TypeDefinition
from .config import DbaseOptions, DEFAULT_OPTIONS
from .errors import ValueCoercionError

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class Int32Value:
    value: int
    data_type: ClassVar[DataType] = DataType.INT32

    def __post_init__(self) -> None:
        # bool 是 int 的子类，这里不接受
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueCoercionError(repr(self.value), "int32", "payload is not an int")
        if not INT32_MIN <= self.value <= INT32_MAX:
            raise ValueCoercionError(str(self.value), "int32", "out of 32-bit range")


@dataclass(frozen=True)
class BoolValue:
    value: bool
    data_type: ClassVar[DataType] = DataType.BOOL

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise ValueCoercionError(repr(self.value), "bool", "payload is not a bool")


@dataclass(frozen=True)
class StringValue:
    value: str
    data_type: ClassVar[DataType] = DataType.STRING

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueCoercionError(repr(self.value), "string", "payload is not a str")


@dataclass(frozen=True)
class BytesValue:
    value: bytes = b""
    data_type: ClassVar[DataType] = DataType.BYTES

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            raise ValueCoercionError(repr(self.value), "bytes", "payload is not bytes")


Value = Union[Int32Value, BoolValue, StringValue, BytesValue]
Row = Tuple[Value, ...]

VALUE_CLASSES = {
    DataType.INT32: Int32Value,
    DataType.BOOL: BoolValue,
    DataType.STRING: StringValue,
    DataType.BYTES: BytesValue,
}


def _to_int32(text: str) -> Int32Value:
    s = text.strip()
    digits = s[1:] if s[:1] in ("+", "-") else s
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueCoercionError(text, "int32", "not a decimal integer")
    return Int32Value(int(s))


def _to_bytes(text: str, decode_hex: bool) -> BytesValue:
    # 默认 0x... 只在语法上识别，不解码，总是得到空字节串
    if not decode_hex:
        return BytesValue(b"")
    digits = text[2:] if text[:2].lower() == "0x" else text
    if len(digits) % 2:
        digits = "0" + digits
    try:
        return BytesValue(bytes.fromhex(digits))
    except ValueError as e:
        raise ValueCoercionError(text, "bytes", str(e)) from e


def coerce(text: str, type_def: Union[TypeDefinition, DataType],
           options: Optional[DbaseOptions] = None) -> Value:
    """
    把字面量文本按列类型转换为 Value：
    - int32: 十进制整数，非数字或越界抛 ValueCoercionError
    - bool: 只有精确的 "true" 为 True，其余一律 False
    - string: 原样返回
    - bytes: 默认得到空字节串；decode_hex_bytes 打开时解码十六进制
    """
    opts = options or DEFAULT_OPTIONS
    data_type = type_def.type if isinstance(type_def, TypeDefinition) else type_def
    if data_type is DataType.INT32:
        return _to_int32(text)
    if data_type is DataType.BOOL:
        return BoolValue(text == "true")
    if data_type is DataType.STRING:
        return StringValue(text)
    if data_type is DataType.BYTES:
        return _to_bytes(text, opts.decode_hex_bytes)
    raise ValueCoercionError(text, str(data_type), "unknown data type")


def row_to_python(row: Row) -> tuple:
    return tuple(v.value for v in row)
