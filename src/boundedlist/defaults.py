from __future__ import annotations

# capacity used when BoundedList() is built without an explicit max_size
DEFAULT_CAPACITY = 10
