"""Domain protocols."""

from validkit.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
