from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from notifications.entity.feature_channel import FeatureChannel
from notifications.util.channel_error import ChannelParseError, InvalidArgumentError
from notifications.util.stream import StreamInput, StreamOutput


class TotalHitRelation(Enum):
    EQUAL_TO = "eq"
    GREATER_THAN_OR_EQUAL_TO = "gte"

    @property
    def ordinal(self) -> int:
        return list(TotalHitRelation).index(self)

    @classmethod
    def from_tag_or_default(cls, tag) -> "TotalHitRelation":
        for relation in cls:
            if relation.value == tag:
                return relation
        return cls.EQUAL_TO

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "TotalHitRelation":
        members = list(cls)
        if ordinal < 0 or ordinal >= len(members):
            raise ChannelParseError(f"Unknown total hit relation ordinal {ordinal}")
        return members[ordinal]


@dataclass(frozen=True)
class FeatureChannelList:
    channels: Tuple[FeatureChannel, ...] = field(default_factory=tuple)
    start_index: int = 0
    total_hits: Optional[int] = None
    total_hit_relation: TotalHitRelation = TotalHitRelation.EQUAL_TO

    def __post_init__(self):
        # frozen dataclass: normalized values are set through object.__setattr__
        object.__setattr__(self, "channels", tuple(self.channels))
        if self.total_hits is None:
            object.__setattr__(self, "total_hits", len(self.channels))
        if self.start_index < 0:
            raise InvalidArgumentError(f"start_index {self.start_index} is negative")
        if self.total_hits < len(self.channels):
            raise InvalidArgumentError(
                f"total_hits {self.total_hits} is less than the {len(self.channels)} channels in the list")

    def __len__(self) -> int:
        return len(self.channels)

    def __iter__(self):
        return iter(self.channels)

    @classmethod
    def from_stream(cls, stream_input: StreamInput) -> "FeatureChannelList":
        start_index = stream_input.read_vlong()
        total_hits = stream_input.read_vlong()
        total_hit_relation = stream_input.read_enum(TotalHitRelation)
        count = stream_input.read_vint()
        channels = tuple(FeatureChannel.from_stream(stream_input) for _ in range(count))
        return cls(channels=channels,
                   start_index=start_index,
                   total_hits=total_hits,
                   total_hit_relation=total_hit_relation)

    def write_to(self, stream_output: StreamOutput):
        stream_output.write_vlong(self.start_index)
        stream_output.write_vlong(self.total_hits)
        stream_output.write_enum(self.total_hit_relation)
        stream_output.write_vint(len(self.channels))
        for channel in self.channels:
            channel.write_to(stream_output)

    def as_dict(self) -> dict:
        return {
            "start_index": self.start_index,
            "total_hits": self.total_hits,
            "total_hit_relation": self.total_hit_relation.value,
            "feature_channel_list": [channel.as_dict() for channel in self.channels]
        }
