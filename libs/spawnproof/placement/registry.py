"""TaskRegistry — at most one active placement task per owner."""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spawnproof.placement.task import PlacementTask


class TaskRegistry:
    """Keyed store of active tasks, guarded by a lock.

    Commands may be handled off the tick loop's thread, so every read and
    write goes through the lock. There is no process-wide instance: whoever
    runs the tick loop owns one and passes it around.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[str, "PlacementTask"] = {}

    def register(self, owner: str, task: "PlacementTask") -> bool:
        """Add a task for `owner`. Returns False if the owner already has one."""
        with self._lock:
            if owner in self._tasks:
                return False
            self._tasks[owner] = task
            return True

    def get(self, owner: str) -> "PlacementTask | None":
        with self._lock:
            return self._tasks.get(owner)

    def is_current(self, owner: str, task: "PlacementTask") -> bool:
        """True if `task` is the registered entry for `owner`."""
        with self._lock:
            return self._tasks.get(owner) is task

    def remove(self, owner: str) -> "PlacementTask | None":
        """Remove and return the owner's task, or None."""
        with self._lock:
            return self._tasks.pop(owner, None)

    def remove_if(self, owner: str, task: "PlacementTask") -> bool:
        """Remove the owner's entry only if it is `task`."""
        with self._lock:
            if self._tasks.get(owner) is not task:
                return False
            del self._tasks[owner]
            return True

    def cancel(self, owner: str) -> "PlacementTask | None":
        """Cancel the owner's task. Returns the cancelled task, or None."""
        task = self.get(owner)
        if task is not None and task.cancel():
            return task
        return None

    def active_tasks(self) -> list["PlacementTask"]:
        """Snapshot of the registered tasks, safe to iterate while stepping."""
        with self._lock:
            return list(self._tasks.values())

    def __contains__(self, owner: object) -> bool:
        with self._lock:
            return owner in self._tasks

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
