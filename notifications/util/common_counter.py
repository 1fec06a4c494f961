from threading import Lock


class CommonCounter:
    _encoded_count = {}
    _decoded_count = {}
    _error_count = {}
    _lock = Lock()

    @classmethod
    def init_counter(cls, session_id: str):
        with cls._lock:
            cls._encoded_count[session_id] = 0
            cls._decoded_count[session_id] = 0
            cls._error_count[session_id] = 0

    @classmethod
    def increment_encoded(cls, session_id: str):
        with cls._lock:
            cls._encoded_count.setdefault(session_id, 0)
            cls._encoded_count[session_id] += 1

    @classmethod
    def get_encoded_count(cls, session_id: str):
        return cls._encoded_count.get(session_id, 0)

    @classmethod
    def increment_decoded(cls, session_id: str):
        with cls._lock:
            cls._decoded_count.setdefault(session_id, 0)
            cls._decoded_count[session_id] += 1

    @classmethod
    def get_decoded_count(cls, session_id: str):
        return cls._decoded_count.get(session_id, 0)

    @classmethod
    def increment_error(cls, session_id: str):
        with cls._lock:
            cls._error_count.setdefault(session_id, 0)
            cls._error_count[session_id] += 1

    @classmethod
    def get_error_count(cls, session_id: str):
        return cls._error_count.get(session_id, 0)

    @classmethod
    def delete_session(cls, session_id: str):
        with cls._lock:
            cls._encoded_count.pop(session_id, None)
            cls._decoded_count.pop(session_id, None)
            cls._error_count.pop(session_id, None)

    @classmethod
    def get_str_statistic(cls, session_id: str) -> str:
        stat_str = (f'Common statistic | Session: {session_id}\n'
                    f'encoded - {cls._encoded_count.get(session_id, 0)}\n'
                    f'decoded - {cls._decoded_count.get(session_id, 0)}\n'
                    f'errors - {cls._error_count.get(session_id, 0)}')
        return stat_str
