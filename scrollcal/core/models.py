class ItemLayout:
    """Position of one fixed-size page inside the scrolling list."""
    def __init__(self, length, offset, index):
        self.length = length
        self.offset = offset
        self.index = index

    def __eq__(self, other):
        if not isinstance(other, ItemLayout):
            return NotImplemented
        return (self.length, self.offset, self.index) == (other.length, other.offset, other.index)

    def __repr__(self):
        return f"ItemLayout(length={self.length}, offset={self.offset}, index={self.index})"

class ViewToken:
    """A page reported as visible by the scrolling list."""
    def __init__(self, item, index, key=None, is_viewable=True):
        self.item = item
        self.index = index
        self.key = key
        self.is_viewable = is_viewable

    def __repr__(self):
        return f"ViewToken(key={self.key!r}, index={self.index}, is_viewable={self.is_viewable})"
