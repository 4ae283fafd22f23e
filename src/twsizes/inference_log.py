from __future__ import annotations

LOG_LEVELS = {"debug", "info", "warn"}


class InferenceLog:
    def __init__(self) -> None:
        self._events: list[dict] = []
        self._seq = 0

    def record(self, *, level: str, message: str, fields: dict | None = None) -> dict:
        normalized_level = level.lower().strip()
        if normalized_level not in LOG_LEVELS:
            normalized_level = "info"
        self._seq += 1
        event: dict = {
            "id": f"log:{self._seq:04d}",
            "level": normalized_level,
            "message": message,
        }
        if fields:
            event["fields"] = dict(fields)
        self._events.append(event)
        return event

    def debug(self, message: str, **fields: object) -> dict:
        return self.record(level="debug", message=message, fields=fields)

    def info(self, message: str, **fields: object) -> dict:
        return self.record(level="info", message=message, fields=fields)

    def warn(self, message: str, **fields: object) -> dict:
        return self.record(level="warn", message=message, fields=fields)

    def snapshot(self) -> list[dict]:
        return list(self._events)

    def messages(self, level: str | None = None) -> list[str]:
        return [event["message"] for event in self._events if level is None or event["level"] == level]


__all__ = ["InferenceLog", "LOG_LEVELS"]
