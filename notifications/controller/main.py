import json
import logging
import os
import secrets
import sys
from logging.handlers import TimedRotatingFileHandler

from notifications.controller.containers import Containers
from notifications.util.channel_error import ChannelParseError, InvalidArgumentError
from notifications.util.common_counter import CommonCounter
from notifications.util.settings_parser import SettingsParser

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def configure_logging(settings: SettingsParser):
    handlers = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        os.makedirs(os.path.dirname(settings.log_file), exist_ok=True)
        timed_handler = TimedRotatingFileHandler(settings.log_file, when='midnight', interval=1, backupCount=10)
        timed_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(timed_handler)

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, handlers=handlers, force=True)


def run(argv, stdin, stdout, container: Containers) -> int:
    logger_bot = logging.getLogger("")
    service = container.feature_channel_service()
    session_id = secrets.token_urlsafe(16)
    CommonCounter.init_counter(session_id)
    logger_bot.info(f'Channel validation started | Session: {session_id}')

    try:
        if argv:
            logger_bot.info(f'Got document path - {argv[0]} | Session: {session_id}')
            with open(argv[0], encoding='utf-8') as f:
                document = f.read()
        else:
            document = stdin.read()

        try:
            document = json.loads(document)
        except ValueError as e:
            CommonCounter.increment_error(session_id)
            raise ChannelParseError(f"Malformed JSON: {e}") from e

        if isinstance(document, dict) and 'feature_channel_list' in document:
            channel_list = service.parse_list(document, session_id)
            binary_size = len(service.serialize_list(channel_list, session_id))
            normalized = service.list_to_json(channel_list, session_id)
        else:
            channel = service.parse(document, session_id)
            binary_size = len(service.serialize(channel, session_id))
            normalized = service.to_json(channel, session_id)
    except (InvalidArgumentError, OSError) as e:
        logger_bot.error(f'Channel validation failed: {e} | Session: {session_id}')
        logger_bot.info(CommonCounter.get_str_statistic(session_id))
        CommonCounter.delete_session(session_id)
        return 1

    stdout.write(normalized + '\n')
    logger_bot.info(f'Binary size - {binary_size} bytes | Session: {session_id}')
    logger_bot.info(CommonCounter.get_str_statistic(session_id))
    logger_bot.info(f'Channel validation finished | Session: {session_id}')
    CommonCounter.delete_session(session_id)
    return 0


def main() -> int:
    container = Containers()
    configure_logging(container.settings())
    return run(sys.argv[1:], sys.stdin, sys.stdout, container)


if __name__ == '__main__':
    sys.exit(main())
