class SettingsError(Exception):
    def __init__(self, message: str = "Settings are invalid or incomplete"):
        super().__init__(message)
