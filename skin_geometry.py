from typing import NamedTuple

WIDTH_MULTIPLE = 8
HEIGHT_MULTIPLE = 4


class Geometry(NamedTuple):
    width: int
    height: int
    x: int = 0
    y: int = 0

    def __str__(self):
        return f"{self.width}x{self.height}"


def round_up(value, multiple):
    if multiple < 1:
        raise ValueError(f"multiple must be at least 1, got {multiple}")
    rem = value % multiple
    if rem:
        value += multiple - rem
    return value


def normalize(source, width_multiple=WIDTH_MULTIPLE, height_multiple=HEIGHT_MULTIPLE):
    # the result is a canvas at the origin, never a region inside the source
    return Geometry(
        round_up(source.width, width_multiple),
        round_up(source.height, height_multiple),
    )
