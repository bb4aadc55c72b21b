from datetime import datetime, timezone


def utc_now() -> datetime:
    """Timezone-aware current time, used for every created/updated/deleted stamp."""
    return datetime.now(timezone.utc)
