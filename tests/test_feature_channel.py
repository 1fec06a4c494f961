import dataclasses

import pytest

from notifications.business.feature_channel_service import FeatureChannelService
from notifications.entity.config_type import ConfigType
from notifications.entity.feature_channel import FeatureChannel
from notifications.util.channel_error import InvalidArgumentError


@pytest.fixture
def service():
    return FeatureChannelService()


def test_binary_round_trip_with_default_is_enabled(service):
    sample = FeatureChannel("config_id", "name", "description", ConfigType.SLACK)
    recreated = service.recreate(sample)
    assert recreated == sample
    assert recreated.is_enabled is True


def test_binary_round_trip_with_is_enabled_false(service):
    sample = FeatureChannel("config_id", "name", "description", ConfigType.CHIME, False)
    assert service.recreate(sample) == sample


def test_json_round_trip_with_default_is_enabled(service):
    sample = FeatureChannel("config_id", "name", "description", ConfigType.WEBHOOK)
    assert service.parse(service.to_json(sample)) == sample


def test_json_round_trip_with_is_enabled_false(service):
    sample = FeatureChannel("config_id", "name", "description", ConfigType.EMAIL_GROUP, False)
    assert service.parse(service.to_json(sample)) == sample


def test_parse_ignores_extra_fields(service):
    sample = FeatureChannel("config_id", "name", "description", ConfigType.EMAIL)
    channel_json = """
    {
        "config_id":"config_id",
        "name":"name",
        "description":"description",
        "config_type":"email",
        "is_enabled":true,
        "extra_field_1":["extra", "value"],
        "extra_field_2":{"extra":"value"},
        "extra_field_3":"extra value 3"
    }
    """
    assert service.parse(channel_json) == sample


def test_parse_maps_unknown_config_type_to_none(service):
    sample = FeatureChannel("config_id", "name", "description", ConfigType.NONE)
    channel_json = """
    {
        "config_id":"config_id",
        "name":"name",
        "description":"description",
        "config_type":"NewConfig"
    }
    """
    assert service.parse(channel_json) == sample


def test_empty_config_id_is_rejected():
    with pytest.raises(InvalidArgumentError):
        FeatureChannel("", "name", "description", ConfigType.EMAIL_GROUP)


def test_empty_name_is_rejected():
    with pytest.raises(InvalidArgumentError):
        FeatureChannel("config_id", "", "description", ConfigType.EMAIL_GROUP)


def test_empty_description_and_none_type_are_accepted():
    channel = FeatureChannel("config_id", "name", "", ConfigType.NONE)
    assert channel.description == ""
    assert channel.config_type is ConfigType.NONE


def test_channel_is_immutable():
    channel = FeatureChannel("config_id", "name", "description", ConfigType.SNS)
    with pytest.raises(dataclasses.FrozenInstanceError):
        channel.name = "other"


def test_equality_covers_every_field():
    channel = FeatureChannel("config_id", "name", "description", ConfigType.SLACK)
    assert channel == FeatureChannel("config_id", "name", "description", ConfigType.SLACK, True)
    assert channel != FeatureChannel("config_id", "name", "description", ConfigType.SLACK, False)
    assert channel != FeatureChannel("config_id", "name", "other", ConfigType.SLACK)
    assert channel != FeatureChannel("config_id", "name", "description", ConfigType.CHIME)
    assert hash(channel) == hash(FeatureChannel("config_id", "name", "description", ConfigType.SLACK))


def test_as_dict_uses_wire_keys():
    channel = FeatureChannel("config_id", "name", "description", ConfigType.MICROSOFT_TEAMS, False)
    assert channel.as_dict() == {
        "config_id": "config_id",
        "name": "name",
        "description": "description",
        "config_type": "microsoft_teams",
        "is_enabled": False,
    }


def test_from_dict_applies_defaults():
    channel = FeatureChannel.from_dict({"config_id": "id", "name": "name", "description": "", "config_type": "sns"})
    assert channel == FeatureChannel("id", "name", "", ConfigType.SNS, True)
