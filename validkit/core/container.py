"""Composition root for infrastructure dependencies.

Adapter selection lives here so validators depend only on
``LoggerProtocol``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from validkit.core.config import get_settings

if TYPE_CHECKING:
    from validkit.domain.protocols import LoggerProtocol


@lru_cache
def get_logger() -> "LoggerProtocol":
    """Return the library-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from validkit.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)
