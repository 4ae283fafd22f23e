from __future__ import annotations


def build_guidance_message(
    *,
    what: str,
    why: str | None = None,
    fix: str | None = None,
    example: str | None = None,
) -> str:
    lines = [f"What happened: {what}"]
    if why:
        lines.append(f"Why: {why}")
    if fix:
        lines.append(f"Fix: {fix}")
    if example:
        lines.append(f"Example: {example}")
    return "\n".join(lines)


def parse_guidance(message: str) -> dict[str, str]:
    parts: dict[str, str] = {}
    labels = {
        "What happened:": "what",
        "Why:": "why",
        "Fix:": "fix",
        "Example:": "example",
    }
    for raw_line in message.splitlines():
        line = raw_line.strip()
        for label, key in labels.items():
            if line.startswith(label):
                parts[key] = line[len(label) :].strip()
                break
    return parts


__all__ = ["build_guidance_message", "parse_guidance"]
