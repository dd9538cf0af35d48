from gridledger import config
from gridledger.db.orm import Variable
from gridledger.exceptions import InvalidColor


def is_color(value):
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= config.MAX_COLOR


class ColorPolicy:
    def __init__(self, contract, driver):
        self.valid_colors = Variable(contract, 'valid_colors', driver=driver)

    def get_valid_colors(self):
        return list(self.valid_colors.get() or [])

    def validate(self, color):
        if not is_color(color):
            return False

        allowed = self.get_valid_colors()

        # An empty list means the admin has not restricted the palette
        return len(allowed) == 0 or color in allowed

    def assert_valid(self, color):
        if not self.validate(color):
            raise InvalidColor(color=color)

    def set_valid_colors(self, colors):
        if colors is None:
            colors = []

        if not isinstance(colors, (list, tuple)):
            raise InvalidColor(color=colors)

        ordered = []
        for color in colors:
            if not is_color(color):
                raise InvalidColor(color=color)
            if color not in ordered:
                ordered.append(color)

        self.valid_colors.set(ordered)
        return ordered
