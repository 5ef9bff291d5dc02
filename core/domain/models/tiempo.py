from datetime import datetime, timezone


def ahora() -> datetime:
    """Instante actual en UTC, con zona horaria."""
    return datetime.now(timezone.utc)
