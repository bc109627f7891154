import re

_SEPARATORS = re.compile(r"[_\-\s]+")


def pascal_case(name: str) -> str:
    parts = [part for part in _SEPARATORS.split(name.strip()) if part]
    return "".join(part[0].upper() + part[1:] for part in parts)


def snake_case(name: str) -> str:
    """Inverse of ``pascal_case`` for names built from lower-case words."""
    out: list[str] = []
    source = _SEPARATORS.sub("_", name.strip())
    for i, ch in enumerate(source):
        if ch.isupper() and i != 0 and source[i - 1] != "_":
            prev_lower = source[i - 1].islower() or source[i - 1].isdigit()
            next_lower = i + 1 < len(source) and source[i + 1].islower()
            if prev_lower or next_lower:
                out.append("_")
        out.append(ch.lower())
    return "".join(out)
