"""Infrastructure layer — the HTTP boundary.

This layer wraps all interaction with ``httpx``.  Every raw ``httpx``
exception must be caught here and re-raised as a
:class:`~vidnavigator.exceptions.VidNavigatorError` subclass.

Rules
-----
* No imports from ``client``.
* The API key is never logged.
"""

from vidnavigator.infra.http_transport import HttpxTransport

__all__: list[str] = ["HttpxTransport"]
