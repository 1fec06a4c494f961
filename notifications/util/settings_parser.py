import configparser
import logging
import os
from typing import Optional

from notifications.util.settings_error import SettingsError


class SettingsParser:
    log_file: Optional[str]
    log_level: str
    json_indent: Optional[int]
    work_dir: str

    def __init__(self):

        _settings_file_exists = True
        self.work_dir = os.environ.get('WORKDIR') or os.getcwd()
        config = configparser.ConfigParser()
        if os.path.exists(self.work_dir + '/settings.ini') is False:
            _settings_file_exists = False
        else:
            config.read(self.work_dir + '/settings.ini')

        if (os.environ.get('LOG_FILE') == '' or os.environ.get(
                'LOG_FILE') is None) and _settings_file_exists and config.has_option('config', 'log_file'):
            self.log_file = self.work_dir + '/log/' + config['config']['log_file']
        elif os.environ.get('LOG_FILE'):
            self.log_file = self.work_dir + '/log/' + os.environ.get('LOG_FILE')
        else:
            self.log_file = None

        if (os.environ.get('LOG_LEVEL') == '' or os.environ.get(
                'LOG_LEVEL') is None) and _settings_file_exists and config.has_option('config', 'log_level'):
            log_level = config['config']['log_level']
        else:
            log_level = os.environ.get('LOG_LEVEL') or 'INFO'

        if (os.environ.get('JSON_INDENT') == '' or os.environ.get(
                'JSON_INDENT') is None) and _settings_file_exists and config.has_option('json', 'indent'):
            json_indent = config['json']['indent']
        else:
            json_indent = os.environ.get('JSON_INDENT')

        self.log_level = log_level.strip().upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise SettingsError(f"Unknown log level: {log_level}")

        if json_indent is None or json_indent.strip() == '':
            self.json_indent = None
        else:
            try:
                self.json_indent = int(json_indent)
            except ValueError:
                raise SettingsError(f"JSON indent must be an integer, got {json_indent}")
            if self.json_indent < 0:
                raise SettingsError(f"JSON indent must not be negative, got {json_indent}")
