"""Text helpers for comment bodies."""


def excerpt(s: str, n: int = 240) -> str:
    s = (s or "").strip().replace("\n", " ")
    return s if len(s) <= n else s[:n-1] + "…"
