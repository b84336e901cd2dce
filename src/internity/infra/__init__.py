"""Infrastructure layer — persistence.

Every raw ``OSError`` or decoding failure must be caught here and
re-raised as :class:`~internity.exceptions.StorageError`.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from internity.infra.file_storage import FlatFileStorage

__all__: list[str] = ["FlatFileStorage"]
