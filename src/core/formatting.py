from core.models import PlaylistHeader

ATTRIBUTION_SEP = " • "


def format_saves(count: int) -> str:
    count = max(0, int(count))
    noun = "save" if count == 1 else "saves"
    return f"{count:,} {noun}"


def format_duration(seconds: int) -> str:
    """
    Compact playlist length, e.g. "35m", "1h 5m", "45s".
    """
    seconds = max(0, int(seconds))
    if seconds < 60:
        return f"{seconds}s"
    m = seconds // 60
    h, m = divmod(m, 60)
    if h:
        return f"{h}h {m}m" if m else f"{h}h"
    return f"{m}m"


def attribution_line(header: PlaylistHeader) -> str:
    return ATTRIBUTION_SEP.join(
        [header.owner, format_saves(header.saves), format_duration(header.duration_s)]
    )
