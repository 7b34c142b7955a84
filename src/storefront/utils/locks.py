"""Per-user command serialization.

Cart mutations, address creation and order placement for one user must not
interleave. Each of those commands is dispatched through
:func:`process_for_user`, which holds that user's lock for the whole
``process`` call, unit-of-work commit included. Across processes the
aggregate ``_version`` check is what catches a stale write.
"""

import threading
import weakref

from protean.exceptions import ExpectedVersionError
from protean.utils.globals import current_domain

from storefront.errors import ConcurrentUpdate
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_registry_lock = threading.Lock()
# A user's lock lives only while some caller still holds it
_user_locks: weakref.WeakValueDictionary = weakref.WeakValueDictionary()


def lock_for(user_id) -> threading.RLock:
    key = str(user_id)
    with _registry_lock:
        lock = _user_locks.get(key)
        if lock is None:
            lock = _user_locks[key] = threading.RLock()
        return lock


def process_for_user(user_id, command):
    """Dispatch ``command`` synchronously while holding ``user_id``'s lock."""
    with lock_for(user_id):
        try:
            return current_domain.process(command, asynchronous=False)
        except ExpectedVersionError as exc:
            logger.warning(
                "Concurrent update rejected",
                user_id=str(user_id),
                command=command.__class__.__name__,
                error=str(exc),
            )
            raise ConcurrentUpdate() from exc
