from gridledger import config
from gridledger.components import validate_amount
from gridledger.db.orm import Hash, Variable
from gridledger.exceptions import OutOfBounds, InvalidConfiguration, InvalidAmount


class PixelStore:
    def __init__(self, contract, driver, access):
        self.pixels = Hash(contract, 'pixels', driver=driver)
        self._size = Variable(contract, 'size', driver=driver)
        self._default_price = Variable(contract, 'default_price', driver=driver)
        self.access = access

    def initialize(self, size, default_price):
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise InvalidConfiguration(reason='size must be a positive integer, got {!r}'.format(size))

        try:
            validate_amount(default_price)
        except InvalidAmount:
            raise InvalidConfiguration(reason='default_price must be a non-negative integer')

        self._size.set(size)
        self._default_price.set(default_price)

    @property
    def size(self):
        return self._size.get()

    @property
    def default_price(self):
        return self._default_price.get()

    def key_of(self, row, column):
        size = self.size

        # Coordinates are signed so that negatives fail here instead of wrapping into another row
        for coordinate in (row, column):
            if isinstance(coordinate, bool) or not isinstance(coordinate, int):
                raise OutOfBounds(row=row, column=column, size=size)

        if not (0 <= row < size and 0 <= column < size):
            raise OutOfBounds(row=row, column=column, size=size)

        return row * size + column

    def get(self, key):
        cell = self.pixels[key]

        # Cells that were never sold belong to whoever is admin right now
        if cell is None:
            cell = {
                'owner': self.access.get_admin(),
                'price': self.default_price,
                'color': config.DEFAULT_COLOR
            }

        return cell

    def set(self, key, cell):
        self.pixels[key] = {
            'owner': cell['owner'],
            'price': cell['price'],
            'color': cell['color']
        }
