from marshmallow import EXCLUDE, Schema, fields, post_load

from notifications.entity.config_type import ConfigType
from notifications.entity.feature_channel import FeatureChannel
from notifications.entity.feature_channel_list import FeatureChannelList, TotalHitRelation


class ConfigTypeField(fields.Field):
    default_error_messages = {"invalid": "Not a valid config type string."}

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return value.tag

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, str):
            raise self.make_error("invalid")
        return ConfigType.from_tag_or_default(value)


class TotalHitRelationField(fields.Field):
    default_error_messages = {"invalid": "Not a valid total hit relation string."}

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return value.value

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, str):
            raise self.make_error("invalid")
        return TotalHitRelation.from_tag_or_default(value)


class StrictBooleanField(fields.Field):
    default_error_messages = {"invalid": "Not a valid boolean."}

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return bool(value)

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, bool):
            raise self.make_error("invalid")
        return value


class StrictIntegerField(fields.Integer):
    def _deserialize(self, value, attr, data, **kwargs):
        # bool is an int subclass and JSON true/false must not count as numbers
        if isinstance(value, bool):
            raise self.make_error("invalid", input=value)
        return super()._deserialize(value, attr, data, **kwargs)


class FeatureChannelSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    config_id = fields.String(required=True)
    name = fields.String(required=True)
    description = fields.String(load_default="")
    config_type = ConfigTypeField(load_default=ConfigType.NONE)
    is_enabled = StrictBooleanField()

    @post_load
    def make_channel(self, data, **kwargs) -> FeatureChannel:
        return FeatureChannel.from_dict(data)


class FeatureChannelListSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    start_index = StrictIntegerField(strict=True, load_default=0)
    total_hits = StrictIntegerField(strict=True)
    total_hit_relation = TotalHitRelationField(load_default=TotalHitRelation.EQUAL_TO)
    channels = fields.List(fields.Nested(FeatureChannelSchema), required=True, data_key="feature_channel_list")

    @post_load
    def make_channel_list(self, data, **kwargs) -> FeatureChannelList:
        return FeatureChannelList(channels=tuple(data["channels"]),
                                  start_index=data["start_index"],
                                  total_hits=data.get("total_hits"),
                                  total_hit_relation=data["total_hit_relation"])
