import pytest

from notifications.entity.config_type import ConfigType
from notifications.util.channel_error import ChannelParseError, InvalidArgumentError
from notifications.util.stream import StreamInput, StreamOutput


def test_vint_uses_seven_bit_groups():
    stream_output = StreamOutput()
    stream_output.write_vint(0)
    stream_output.write_vint(127)
    stream_output.write_vint(128)
    stream_output.write_vint(300)
    assert stream_output.bytes() == b"\x00\x7f\x80\x01\xac\x02"

    stream_input = StreamInput(stream_output.bytes())
    assert [stream_input.read_vint() for _ in range(4)] == [0, 127, 128, 300]
    assert stream_input.remaining() == 0


def test_negative_vint_is_rejected():
    with pytest.raises(InvalidArgumentError):
        StreamOutput().write_vint(-1)


def test_string_is_length_prefixed_utf8():
    stream_output = StreamOutput()
    stream_output.write_string("héllo")
    assert stream_output.bytes() == b"\x06h\xc3\xa9llo"
    assert StreamInput(stream_output.bytes()).read_string() == "héllo"


def test_boolean_and_enum_encoding():
    stream_output = StreamOutput()
    stream_output.write_boolean(True)
    stream_output.write_boolean(False)
    stream_output.write_enum(ConfigType.EMAIL_GROUP)
    assert stream_output.bytes() == b"\x01\x00\x09"

    stream_input = StreamInput(stream_output.bytes())
    assert stream_input.read_boolean() is True
    assert stream_input.read_boolean() is False
    assert stream_input.read_enum(ConfigType) is ConfigType.EMAIL_GROUP


def test_truncated_string_fails():
    with pytest.raises(ChannelParseError):
        StreamInput(b"\x05abc").read_string()


def test_empty_stream_fails():
    with pytest.raises(ChannelParseError):
        StreamInput(b"").read_vint()


def test_invalid_boolean_byte_fails():
    with pytest.raises(ChannelParseError):
        StreamInput(b"\x02").read_boolean()


def test_invalid_utf8_fails():
    with pytest.raises(ChannelParseError):
        StreamInput(b"\x02\xff\xfe").read_string()


def test_unknown_enum_ordinal_fails():
    with pytest.raises(ChannelParseError):
        StreamInput(b"\x7f").read_enum(ConfigType)
