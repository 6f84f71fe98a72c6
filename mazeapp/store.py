"""The single shared maze, owned by the app instead of living in module globals."""
import logging
import threading

log = logging.getLogger(__name__)


class MazeStore:
    """
    Holds the current MazeState.

    Generation builds a complete new state and swaps the reference under the
    lock, so readers only ever see a whole maze. States are immutable, which
    lets solves keep using the snapshot they took while a new maze replaces it.
    """

    def __init__(self, generator):
        self.generator = generator
        self._lock = threading.Lock()
        # the generator's rng is not thread safe
        self._generate_lock = threading.Lock()
        self._state = None
        self._version = 0

    def regenerate(self):
        with self._generate_lock:
            state = self.generator.generate()
        with self._lock:
            self._state = state
            self._version += 1
            version = self._version
        log.debug("maze replaced (version %d)", version)
        return state

    def snapshot(self):
        with self._lock:
            state = self._state
        if state is None:
            return self.regenerate()
        return state

    @property
    def version(self):
        with self._lock:
            return self._version
