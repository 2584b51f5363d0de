"""Whole-string transforms: Burrows-Wheeler transform and reversal."""


def burrows_wheeler_transform(text: str) -> tuple[str, int]:
    """Return the Burrows-Wheeler transform of ``text`` and the row index of ``text``.

    Rotations are ordered case-insensitively.
    """
    rotations = sorted((text[i:] + text[:i] for i in range(len(text))), key=str.lower)
    encoded = "".join(rotation[-1] for rotation in rotations)
    index = 0
    for i, rotation in enumerate(rotations):
        if rotation == text:
            index = i
    return encoded, index


def inv_burrows_wheeler_transform(encoded: str, index: int) -> str:
    """Recover the original string from its transform and row index."""
    table = sorted(enumerate(encoded), key=lambda entry: entry[1])
    decoded = []
    position = index
    for _ in range(len(encoded)):
        position, ch = table[position]
        decoded.append(ch)
    return "".join(decoded)


def reverse(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]