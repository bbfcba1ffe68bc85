"""Domain protocols - structural interfaces for collaborators."""

from countrypick.domain.protocols.provider import DisplayNameProvider

__all__ = ["DisplayNameProvider"]
