from typing import NamedTuple


class Segment:
    """One slice of the wheel.

    Only the label matters to selection and targeting. The icon and the
    colors are handed straight to the renderer.
    """

    def __init__(self, label: str, icon=None, text_color: tuple = None, background: tuple = None):
        self.label = label
        self.icon = icon  # Image path or pygame.Surface
        self.text_color = text_color
        self.background = background

    def __repr__(self):
        return f"Segment({self.label!r})"

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return (self.label, self.icon, self.text_color, self.background) == \
            (other.label, other.icon, other.text_color, other.background)

    def __hash__(self):
        return hash(self.label)


class SpinResult(NamedTuple):
    """Outcome of one completed spin."""
    index: int
    segment: Segment


def as_segments(items) -> list:
    """Accept Segment objects or bare labels and return a list of Segments."""
    segments = []
    for item in items:
        if isinstance(item, Segment):
            segments.append(item)
        else:
            segments.append(Segment(str(item)))
    return segments
