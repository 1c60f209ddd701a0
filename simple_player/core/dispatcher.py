"""Single worker thread running callbacks outside the caller's thread."""

import logging
import queue
import threading

logger = logging.getLogger(__name__)

__all__ = [
    "CallbackDispatcher",
]

_STOP = object()


class CallbackDispatcher:
    """Run submitted callables in order on one daemon thread.

    Used by engines whose native event thread must not be re-entered from
    inside an event handler.
    """

    def __init__(self, name="CallbackDispatcher"):
        self._name = name
        self._queue = None
        self._thread = None
        self._lock = threading.RLock()

    def start(self):
        logger.debug("CallbackDispatcher.start()")
        with self._lock:
            if self._thread is None or not self._thread.is_alive():
                # each worker owns its queue so a restart never shares items with a stopping worker
                self._queue = queue.Queue()
                self._thread = threading.Thread(
                    target=self._thread_task, args=(self._queue,), daemon=True, name=self._name
                )
                self._thread.start()

    def submit(self, fn, *args):
        """Queue fn(*args), starting the worker if needed."""
        logger.debug("CallbackDispatcher.submit(%s)", getattr(fn, "__name__", fn))
        with self._lock:
            self.start()
            self._queue.put((fn, args))

    def stop(self, timeout=1.0):
        """Run what is already queued, then stop the worker."""
        logger.debug("CallbackDispatcher.stop()")
        with self._lock:
            thread = self._thread
            if thread is None:
                return
            self._queue.put((_STOP, ()))
            self._thread = None
            self._queue = None
        if thread is not threading.current_thread():
            thread.join(timeout=timeout)

    def is_running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def _thread_task(self, tasks):
        logger.debug("In %s Thread", self._name)
        while True:
            fn, args = tasks.get()
            if fn is _STOP:
                break
            try:
                fn(*args)
            except Exception:
                logger.exception("Dispatched callback %r failed", fn)
        logger.debug("Exit %s Thread", self._name)
