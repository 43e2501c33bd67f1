from datetime import datetime, timezone

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def iso_z(dt: datetime) -> str:
    """``2025-01-01T12:00:00.000Z``, the shape browsers produce with toISOString()."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
