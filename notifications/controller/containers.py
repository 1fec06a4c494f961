from dependency_injector import containers, providers

from notifications.business.feature_channel_service import FeatureChannelService
from notifications.controller.feature_channel_schema import FeatureChannelListSchema, FeatureChannelSchema
from notifications.util.settings_parser import SettingsParser


class Containers(containers.DeclarativeContainer):
    settings = providers.Singleton(SettingsParser)

    feature_channel_schema = providers.Factory(FeatureChannelSchema)
    feature_channel_list_schema = providers.Factory(FeatureChannelListSchema)
    feature_channel_service = providers.Singleton(FeatureChannelService,
                                                  settings=settings,
                                                  channel_schema=feature_channel_schema,
                                                  channel_list_schema=feature_channel_list_schema)
