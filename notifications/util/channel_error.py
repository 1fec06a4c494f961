class InvalidArgumentError(ValueError):
    pass


class ChannelParseError(InvalidArgumentError):
    def __init__(self, message: str, messages=None):
        super().__init__(message)
        self.messages = messages or {}
