import io
import struct
from enum import Enum

from notifications.util.channel_error import ChannelParseError, InvalidArgumentError

_BYTE = struct.Struct("B")


class StreamOutput:
    def __init__(self):
        self._buffer = io.BytesIO()

    def write_byte(self, value: int):
        self._buffer.write(_BYTE.pack(value))

    def write_vint(self, value: int):
        if value < 0:
            raise InvalidArgumentError(f"Negative value {value} can't be written as vint")
        while value > 0x7F:
            self.write_byte((value & 0x7F) | 0x80)
            value >>= 7
        self.write_byte(value)

    def write_vlong(self, value: int):
        self.write_vint(value)

    def write_string(self, value: str):
        data = value.encode("utf-8")
        self.write_vint(len(data))
        self._buffer.write(data)

    def write_boolean(self, value: bool):
        self.write_byte(1 if value else 0)

    def write_enum(self, value: Enum):
        self.write_vint(value.ordinal)

    def bytes(self) -> bytes:
        return self._buffer.getvalue()


class StreamInput:
    def __init__(self, data: bytes):
        self._buffer = io.BytesIO(bytes(data))
        self._length = len(data)

    def read_byte(self) -> int:
        chunk = self._buffer.read(1)
        if not chunk:
            raise ChannelParseError("Unexpected end of stream")
        return _BYTE.unpack(chunk)[0]

    def read_vint(self) -> int:
        result = 0
        shift = 0
        while True:
            byte = self.read_byte()
            result |= (byte & 0x7F) << shift
            if byte & 0x80 == 0:
                return result
            shift += 7
            if shift > 63:
                raise ChannelParseError("Variable-length integer is too long")

    def read_vlong(self) -> int:
        return self.read_vint()

    def read_string(self) -> str:
        length = self.read_vint()
        data = self._buffer.read(length)
        if len(data) != length:
            raise ChannelParseError(f"Expected {length} string bytes, got {len(data)}")
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ChannelParseError(f"Invalid UTF-8 string: {e}") from e

    def read_boolean(self) -> bool:
        byte = self.read_byte()
        if byte not in (0, 1):
            raise ChannelParseError(f"Unexpected boolean byte {byte:#04x}")
        return byte == 1

    def read_enum(self, enum_class):
        return enum_class.from_ordinal(self.read_vint())

    def remaining(self) -> int:
        return self._length - self._buffer.tell()
