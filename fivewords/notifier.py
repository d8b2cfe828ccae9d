import logging

import httpx

logger = logging.getLogger("fivewords")

# Solution lines included in the message body
PREVIEW_LINES = 10


def format_message(solutions: list[tuple[str, ...]], word_count: int, timings: dict) -> tuple[str, str]:
    title = f"Five words - {len(solutions)} solutions from {word_count} words"

    lines = [" ".join(s) for s in solutions[:PREVIEW_LINES]]
    if len(solutions) > PREVIEW_LINES:
        lines.append(f"... {len(solutions) - PREVIEW_LINES} more")
    stats = " | ".join(f"{name}:{ms}ms" for name, ms in timings.items())

    body = "\n".join(lines) + "\n\n" + stats if lines else stats
    return title, body


async def send_notification(
    solutions: list[tuple[str, ...]],
    word_count: int,
    timings: dict,
    topic: str,
    ntfy_url: str = "https://ntfy.sh",
    transport: httpx.AsyncBaseTransport | None = None,
) -> bool:
    """Post a run summary to ntfy. Best-effort: failures are logged, not raised."""
    title, body = format_message(solutions, word_count, timings)
    try:
        async with httpx.AsyncClient(timeout=10.0, transport=transport) as client:
            resp = await client.post(
                f"{ntfy_url}/{topic}",
                content=body.encode("utf-8"),
                headers={
                    "Title": title,
                    "Tags": "abc",
                },
            )
            resp.raise_for_status()
            logger.info("Notification sent to %s/%s (status %d)", ntfy_url, topic, resp.status_code)
            return True
    except httpx.HTTPError as e:
        logger.error("Failed to send notification: %s", e)
        return False
