"""Domain allowlist guard for the relay path."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AllowlistConfig:
    """Hosts the relay may fetch from. Built once at start-up."""

    enforced: bool = True
    hosts: frozenset[str] = field(default_factory=frozenset)

    def describe(self) -> str:
        if not self.enforced:
            return "disabled (all domains)"
        return ", ".join(sorted(self.hosts)) or "(empty)"


def is_allowed(host: str, config: AllowlistConfig) -> bool:
    """Return True if *host* may be fetched. Matching is exact, no suffix or wildcard."""
    if not config.enforced:
        return True
    return host in config.hosts
