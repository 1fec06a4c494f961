from enum import Enum

from notifications.util.channel_error import ChannelParseError


class ConfigType(Enum):
    NONE = "none"
    SLACK = "slack"
    CHIME = "chime"
    MICROSOFT_TEAMS = "microsoft_teams"
    WEBHOOK = "webhook"
    EMAIL = "email"
    SNS = "sns"
    SES_ACCOUNT = "ses_account"
    SMTP_ACCOUNT = "smtp_account"
    EMAIL_GROUP = "email_group"

    @property
    def tag(self) -> str:
        return self.value

    # position in the declaration is the binary wire code
    @property
    def ordinal(self) -> int:
        return list(ConfigType).index(self)

    @classmethod
    def from_tag_or_default(cls, tag) -> "ConfigType":
        if isinstance(tag, str):
            for config_type in cls:
                if config_type.value == tag:
                    return config_type
        return cls.NONE

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "ConfigType":
        members = list(cls)
        if ordinal < 0 or ordinal >= len(members):
            raise ChannelParseError(f"Unknown config type ordinal {ordinal}")
        return members[ordinal]

    def __str__(self) -> str:
        return self.value
