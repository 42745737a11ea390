"""Memory size parsing for executor memory requests."""

import re

_SIZE_RE = re.compile(r"^([0-9]+)([a-z]+)?$")
_FRACTION_RE = re.compile(r"^([0-9]+\.[0-9]+)([a-z]+)?$")

_BYTES_PER_UNIT: dict[str, int] = {
    "b": 1,
    "k": 1024,
    "kb": 1024,
    "m": 1024**2,
    "mb": 1024**2,
    "g": 1024**3,
    "gb": 1024**3,
    "t": 1024**4,
    "tb": 1024**4,
    "p": 1024**5,
    "pb": 1024**5,
}

_MIB = 1024**2


def byte_string_as_mb(value: int | str) -> int:
    """Convert a memory size into whole mebibytes.

    Integers are taken to already be in MiB. Strings are digits followed by
    an optional unit (``b``, ``k``/``kb``, ``m``/``mb``, ``g``/``gb``,
    ``t``/``tb``, ``p``/``pb``); a bare number is MiB. Results are rounded
    down, so ``"1536k"`` is ``1``.

    Raises:
        ValueError: If *value* is not a whole, non-negative size.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid memory size: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Memory size must not be negative: {value}")
        return value
    if not isinstance(value, str):
        raise ValueError(f"Invalid memory size: {value!r}")

    text = value.strip().lower()
    match = _SIZE_RE.match(text)
    if match:
        number = int(match.group(1))
        unit = match.group(2) or "m"
        if unit not in _BYTES_PER_UNIT:
            raise ValueError(f"Invalid suffix {unit!r} in memory size {value!r}")
        return number * _BYTES_PER_UNIT[unit] // _MIB

    if _FRACTION_RE.match(text):
        raise ValueError(
            f"Fractional values are not supported in memory size {value!r}. "
            "Use a smaller unit instead (e.g. 1536m rather than 1.5g)."
        )

    raise ValueError(
        f"Invalid memory size: {value!r}. "
        "Use a whole number with an optional unit (e.g. 512m, 4g)."
    )
