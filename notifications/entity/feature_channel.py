from dataclasses import dataclass

from notifications.entity.config_type import ConfigType
from notifications.util.channel_error import InvalidArgumentError
from notifications.util.stream import StreamInput, StreamOutput


@dataclass(frozen=True)
class FeatureChannel:
    config_id: str
    name: str
    description: str
    config_type: ConfigType
    is_enabled: bool = True

    def __post_init__(self):
        if not self.config_id:
            raise InvalidArgumentError("config_id is null or empty")
        if not self.name:
            raise InvalidArgumentError("name is null or empty")

    @classmethod
    def from_dict(cls, data: dict) -> "FeatureChannel":
        is_enabled = data.get("is_enabled")
        config_type = data.get("config_type")
        if not isinstance(config_type, ConfigType):
            config_type = ConfigType.from_tag_or_default(config_type)
        return cls(
            config_id=data.get("config_id"),
            name=data.get("name"),
            description=data.get("description"),
            config_type=config_type,
            is_enabled=True if is_enabled is None else is_enabled
        )

    @classmethod
    def from_stream(cls, stream_input: StreamInput) -> "FeatureChannel":
        return cls(
            config_id=stream_input.read_string(),
            name=stream_input.read_string(),
            description=stream_input.read_string(),
            config_type=stream_input.read_enum(ConfigType),
            is_enabled=stream_input.read_boolean()
        )

    def write_to(self, stream_output: StreamOutput):
        stream_output.write_string(self.config_id)
        stream_output.write_string(self.name)
        stream_output.write_string(self.description)
        stream_output.write_enum(self.config_type)
        stream_output.write_boolean(self.is_enabled)

    def as_dict(self) -> dict:
        return {
            "config_id": self.config_id,
            "name": self.name,
            "description": self.description,
            "config_type": self.config_type.tag,
            "is_enabled": self.is_enabled
        }
