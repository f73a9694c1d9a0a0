import threading


class HitCounter:
    """Счетчик посещений файлового сервера (живет в пределах процесса)"""

    def __init__(self):
        self._lock = threading.Lock()
        self._hits = 0

    def increment(self) -> int:
        with self._lock:
            self._hits += 1
            return self._hits

    def reset(self) -> None:
        with self._lock:
            self._hits = 0

    @property
    def value(self) -> int:
        with self._lock:
            return self._hits


fileserver_hits = HitCounter()
