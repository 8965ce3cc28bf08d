"""Infrastructure layer — the local filesystem and standard streams.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~tempstack.exceptions.TempStackError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output beyond the stdout sink.
* Must expose clean interfaces satisfying the core protocols.
"""

from tempstack.infra.local_store import LocalFileStore
from tempstack.infra.paths import new_slot_path, registry_file, state_dir
from tempstack.infra.streams import StdinSource, StdoutSink

__all__: list[str] = [
    "LocalFileStore",
    "StdinSource",
    "StdoutSink",
    "new_slot_path",
    "registry_file",
    "state_dir",
]
