from __future__ import annotations

from dataclasses import dataclass

from data_designer_text_metrics.characters import char_count


@dataclass(frozen=True)
class PlatformLimit:
    name: str
    limit: int
    warning_threshold: int


@dataclass(frozen=True)
class PlatformStatus:
    name: str
    limit: int
    remaining: int
    status: str

    def to_payload(self) -> dict[str, object]:
        return {
            "name": self.name,
            "limit": self.limit,
            "remaining": self.remaining,
            "status": self.status,
        }


PLATFORM_LIMITS = (
    PlatformLimit("twitter", 280, 70),
    PlatformLimit("instagram", 2200, 400),
    PlatformLimit("facebook", 63206, 2000),
    PlatformLimit("linkedin", 3000, 500),
)


def _status(remaining: int, warning_threshold: int) -> str:
    if remaining < 0:
        return "over"
    if remaining <= warning_threshold:
        return "warning"
    return "ok"


def platform_status(text: object, limits: tuple[PlatformLimit, ...] = PLATFORM_LIMITS) -> list[PlatformStatus]:
    """Remaining characters per platform post limit."""
    count = char_count(text)
    return [
        PlatformStatus(p.name, p.limit, p.limit - count, _status(p.limit - count, p.warning_threshold))
        for p in limits
    ]
