"""Source directory specifier decoding.

A configured ``sourceDir`` may carry a custom label after a ``#``
(``packages/1#squash``). A literal ``#`` in the real path is written
doubled (``packages##/1``).
"""

from typing import NamedTuple

SEPARATOR = "#"


class SourceDir(NamedTuple):
    """A decoded source directory specifier."""

    display: str
    real: str
    label: str | None = None


def decode_source_dir(raw: str) -> SourceDir:
    """Decode a raw specifier into its display path, real path and label.

    Scans left to right. ``##`` is a literal ``#``; the first lone ``#``
    separates the real path from the label. The display form folds every
    ``##`` into ``#`` but keeps the separator and the label, while the real
    path stops at the separator. Never fails.

    >>> decode_source_dir("packages##/1#custom-name")
    SourceDir(display='packages#/1#custom-name', real='packages#/1', label='custom-name')
    """
    display: list[str] = []
    real: list[str] = []
    label: list[str] | None = None

    i = 0
    length = len(raw)
    while i < length:
        char = raw[i]
        if char == SEPARATOR and i + 1 < length and raw[i + 1] == SEPARATOR:
            display.append(SEPARATOR)
            if label is None:
                real.append(SEPARATOR)
            else:
                label.append(SEPARATOR)
            i += 2
            continue

        display.append(char)
        if label is not None:
            label.append(char)
        elif char == SEPARATOR:
            label = []
        else:
            real.append(char)
        i += 1

    return SourceDir(
        display="".join(display),
        real="".join(real),
        label="".join(label) if label is not None else None,
    )

