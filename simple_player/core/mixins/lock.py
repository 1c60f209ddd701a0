"""Lock mixin serializing UI calls with engine callbacks."""

import threading


class LockMixin:
    """Mixin that provides a reentrant lock.

    Engine callbacks may arrive on a native thread while the owning session
    is calling in; both paths take this lock. It is reentrant because a
    synchronous engine can fire its ready callback from inside load_async().
    """

    def __init__(self, *args, **kwargs):
        """Initialize the lock."""
        super().__init__(*args, **kwargs)
        self._lock = threading.RLock()
