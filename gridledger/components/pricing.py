"""
Pricing policies for grid cells.

Exactly one policy is chosen when the grid is seeded and it is rebuilt from the
stored parameters on every call:

- ``PercentageMarkup`` raises the asking price by ``increment_rate`` percent
  after every sale and rejects manual prices above that markup.
- ``GrowthLimitClamp`` keeps every price inside ``[min_price, min_price * growth_limit]``
  and silently clamps anything outside of it. The floor is deliberate: the
  configured minimum is also the price of an unsold cell, so no owner or buyer
  can push a cell below what the grid itself asks for it.
"""

from gridledger import config
from gridledger.components import validate_amount
from gridledger.exceptions import PriceCeilingExceeded, InvalidConfiguration, InvalidAmount


def _parameter(name, value, minimum):
    try:
        validate_amount(value)
    except InvalidAmount:
        raise InvalidConfiguration(reason='{} must be an integer, got {!r}'.format(name, value))

    if value < minimum:
        raise InvalidConfiguration(reason='{} must be at least {}, got {}'.format(name, minimum, value))

    return value


class PricingPolicy:
    tag = None

    def next_price(self, paid, proposed=None):
        """Asking price after a sale at ``paid``, given the buyer's proposal (or None)."""
        raise NotImplementedError

    def owner_price(self, requested, last_sale):
        """Price actually stored when the owner asks for ``requested``."""
        raise NotImplementedError

    def ceiling(self, last_sale):
        raise NotImplementedError

    def parameters(self):
        raise NotImplementedError


class PercentageMarkup(PricingPolicy):
    tag = config.MARKUP_POLICY

    def __init__(self, increment_rate):
        self.increment_rate = _parameter('increment_rate', increment_rate, 0)

    def markup(self, price):
        return price * (100 + self.increment_rate) // 100

    def ceiling(self, last_sale):
        return self.markup(last_sale)

    def _within(self, price, ceiling):
        validate_amount(price)
        if price > ceiling:
            raise PriceCeilingExceeded(price=price, ceiling=ceiling)
        return price

    def next_price(self, paid, proposed=None):
        if proposed is None:
            return self.markup(paid)
        return self._within(proposed, self.markup(paid))

    def owner_price(self, requested, last_sale):
        return self._within(requested, self.ceiling(last_sale))

    def parameters(self):
        return {'increment_rate': self.increment_rate}


class GrowthLimitClamp(PricingPolicy):
    tag = config.CLAMP_POLICY

    def __init__(self, growth_limit, min_price):
        self.growth_limit = _parameter('growth_limit', growth_limit, 1)
        self.min_price = _parameter('min_price', min_price, 0)

    def ceiling(self, last_sale=None):
        return self.min_price * self.growth_limit

    def clamp(self, price):
        validate_amount(price)
        return max(self.min_price, min(price, self.ceiling()))

    def next_price(self, paid, proposed=None):
        # Without a proposal the price the buyer paid carries over
        if proposed is None:
            return self.clamp(paid)
        return self.clamp(proposed)

    def owner_price(self, requested, last_sale):
        return self.clamp(requested)

    def parameters(self):
        return {'growth_limit': self.growth_limit, 'min_price': self.min_price}


def build_policy(increment_rate=None, growth_limit=None, min_price=0):
    if increment_rate is not None and growth_limit is not None:
        raise InvalidConfiguration(reason='increment_rate and growth_limit are mutually exclusive')

    if growth_limit is not None:
        return GrowthLimitClamp(growth_limit=growth_limit, min_price=min_price)

    if increment_rate is None:
        increment_rate = config.INCREMENT_RATE

    return PercentageMarkup(increment_rate=increment_rate)
