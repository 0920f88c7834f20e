# core/uv.py
class UV:
    """
    Represents a 2D texture coordinate. Components are fractional wrap
    positions and may fall outside [0, 1].
    """
    __slots__ = ['u', 'v']

    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
