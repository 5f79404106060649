from typing import Iterable, List, Optional


class Line:
    """One generated statement. ``type`` is None for formatting-only lines."""

    __slots__ = ("type", "value", "frame_id")

    def __init__(self, value: str, type: Optional[str] = None, frame_id: int = 0):
        self.type = type
        self.value = value
        self.frame_id = frame_id

    def __eq__(self, other) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return (self.type, self.value, self.frame_id) == (
            other.type,
            other.value,
            other.frame_id,
        )

    def __repr__(self) -> str:
        return f"Line(type={self.type!r}, value={self.value!r}, frame_id={self.frame_id})"


class Block:
    """An ordered group of lines generated from a single event.

    The block's frame id is stamped on every line added to it so the frame
    declaration pass can tell which frame a line talks to.
    """

    def __init__(self, frame_id: int = 0, lines: Optional[Iterable[Line]] = None):
        self.frame_id = frame_id or 0
        self._lines: List[Line] = []
        for line in lines or []:
            self.add_line(line)

    @classmethod
    def blank(cls) -> "Block":
        return cls(lines=[Line("")])

    def _stamp(self, line: Line) -> Line:
        line.frame_id = self.frame_id
        return line

    def add_line(self, line: Line) -> "Block":
        self._lines.append(self._stamp(line))
        return self

    def add_line_to_top(self, line: Line) -> "Block":
        self._lines.insert(0, self._stamp(line))
        return self

    def get_lines(self) -> List[Line]:
        return list(self._lines)

    def frame_ids(self) -> List[int]:
        return [line.frame_id for line in self._lines]

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)

    def __repr__(self) -> str:
        return f"Block(frame_id={self.frame_id}, lines={self._lines!r})"
