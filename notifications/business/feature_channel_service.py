import json
import logging
from collections.abc import Mapping
from typing import Union

from marshmallow import ValidationError

from notifications.controller.feature_channel_schema import FeatureChannelListSchema, FeatureChannelSchema
from notifications.entity.feature_channel import FeatureChannel
from notifications.entity.feature_channel_list import FeatureChannelList
from notifications.util.channel_error import ChannelParseError, InvalidArgumentError
from notifications.util.common_counter import CommonCounter
from notifications.util.stream import StreamInput, StreamOutput


class FeatureChannelService:
    def __init__(self, settings=None, channel_schema=None, channel_list_schema=None):
        self._logger_bot = logging.getLogger("")
        self._json_indent = settings.json_indent if settings is not None else None
        self._channel_schema = channel_schema or FeatureChannelSchema()
        self._channel_list_schema = channel_list_schema or FeatureChannelListSchema()

    def to_json(self, channel: FeatureChannel, session_id: str = "default") -> str:
        channel_json = self._channel_schema.dumps(channel, indent=self._json_indent)
        CommonCounter.increment_encoded(session_id)
        return channel_json

    def parse(self, channel_json: Union[str, bytes, Mapping], session_id: str = "default") -> FeatureChannel:
        channel = self._load(self._channel_schema, channel_json, session_id)
        self._logger_bot.debug("Parsed channel %s | Session: %s", channel.config_id, session_id)
        return channel

    def serialize(self, channel: FeatureChannel, session_id: str = "default") -> bytes:
        stream_output = StreamOutput()
        channel.write_to(stream_output)
        CommonCounter.increment_encoded(session_id)
        return stream_output.bytes()

    def deserialize(self, data: bytes, session_id: str = "default") -> FeatureChannel:
        return self._read(FeatureChannel, data, session_id)

    def recreate(self, channel: FeatureChannel, session_id: str = "default") -> FeatureChannel:
        return self.deserialize(self.serialize(channel, session_id), session_id)

    def list_to_json(self, channel_list: FeatureChannelList, session_id: str = "default") -> str:
        list_json = self._channel_list_schema.dumps(channel_list, indent=self._json_indent)
        CommonCounter.increment_encoded(session_id)
        return list_json

    def parse_list(self, list_json: Union[str, bytes, Mapping], session_id: str = "default") -> FeatureChannelList:
        channel_list = self._load(self._channel_list_schema, list_json, session_id)
        self._logger_bot.debug("Parsed %s of %s channels | Session: %s",
                               len(channel_list), channel_list.total_hits, session_id)
        return channel_list

    def serialize_list(self, channel_list: FeatureChannelList, session_id: str = "default") -> bytes:
        stream_output = StreamOutput()
        channel_list.write_to(stream_output)
        CommonCounter.increment_encoded(session_id)
        return stream_output.bytes()

    def deserialize_list(self, data: bytes, session_id: str = "default") -> FeatureChannelList:
        return self._read(FeatureChannelList, data, session_id)

    def _load(self, schema, document, session_id: str):
        try:
            if isinstance(document, (str, bytes, bytearray)):
                try:
                    document = json.loads(document)
                except ValueError as e:
                    raise ChannelParseError(f"Malformed JSON: {e}") from e
            if not isinstance(document, Mapping):
                raise ChannelParseError(f"Expected a JSON object, got {type(document).__name__}")
            try:
                loaded = schema.load(document)
            except ValidationError as e:
                raise ChannelParseError(f"Invalid JSON fields: {e.messages}", e.messages) from e
        except InvalidArgumentError as e:
            self._logger_bot.error("Error during parsing JSON: %s | Session: %s", str(e), session_id)
            CommonCounter.increment_error(session_id)
            raise
        CommonCounter.increment_decoded(session_id)
        return loaded

    def _read(self, entity_class, data: bytes, session_id: str):
        try:
            stream_input = StreamInput(data)
            loaded = entity_class.from_stream(stream_input)
            if stream_input.remaining() != 0:
                raise ChannelParseError(f"{stream_input.remaining()} trailing bytes after record")
        except InvalidArgumentError as e:
            self._logger_bot.error("Error during reading binary: %s | Session: %s", str(e), session_id)
            CommonCounter.increment_error(session_id)
            raise
        CommonCounter.increment_decoded(session_id)
        return loaded
