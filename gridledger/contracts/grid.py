from gridledger import config
from gridledger.components import validate_account
from gridledger.components.access import AccessControl
from gridledger.components.board import MessageBoard
from gridledger.components.colors import ColorPolicy
from gridledger.components.ledger import FeeLedger
from gridledger.components.pricing import build_policy
from gridledger.components.store import PixelStore
from gridledger.contracts.base import Contract, export, construct
from gridledger.exceptions import OutOfBounds, NotOwner, InvalidConfiguration
from gridledger.logger import get_logger

log = get_logger('Grid')


class Grid(Contract):
    """
    A square grid of pixels that can be bought, repriced, recolored and given away.

    Purchases carry their payment as the transaction value. Payments that cannot
    be applied (bad coordinates, underpayment, disallowed color) are not rejected;
    they are credited back to the buyer's pending balance so that nothing is
    trapped. Proceeds are credited the same way, and every account pulls its
    own funds out with `withdraw`.
    """
    def __init__(self, name, executor):
        super().__init__(name, executor)

        self.access = AccessControl(self.name, self.driver)
        self.store = PixelStore(self.name, self.driver, self.access)
        self.colors = ColorPolicy(self.name, self.driver)
        self.ledger = FeeLedger(self.name, self.driver)
        self.board = MessageBoard(self.name, self.driver)

        self.policy_tag = self.variable('policy')
        self.rate = self.variable('increment_rate')
        self.limit = self.variable('growth_limit')
        self.sales = self.hash('sales')
        self.currency = self.variable('currency')

    @construct
    def seed(self, size=config.GRID_SIZE, default_price=config.DEFAULT_PRICE, fee_ratio=config.FEE_RATIO,
             increment_rate=None, growth_limit=None, currency=config.CURRENCY_CONTRACT):

        self.store.initialize(size, default_price)
        self.ledger.initialize(fee_ratio)
        self.access.initialize(self.ctx.caller)

        policy = build_policy(increment_rate=increment_rate, growth_limit=growth_limit, min_price=default_price)

        self.policy_tag.set(policy.tag)
        self.rate.set(getattr(policy, 'increment_rate', None))
        self.limit.set(getattr(policy, 'growth_limit', None))

        if not isinstance(currency, str) or currency == '':
            raise InvalidConfiguration(reason='currency must name a contract')
        self.currency.set(currency)

        log.info('Seeded {}x{} grid at {} with {} policy {}'.format(
            size, size, default_price, policy.tag, policy.parameters()))

    @property
    def policy(self):
        return build_policy(increment_rate=self.rate.get(),
                            growth_limit=self.limit.get(),
                            min_price=self.store.default_price)

    def _owned(self, row, column):
        key = self.store.key_of(row, column)
        cell = self.store.get(key)

        if cell['owner'] != self.ctx.caller:
            raise NotOwner(caller=self.ctx.caller, row=row, column=column)

        return key, cell

    def _last_sale(self, key):
        last_sale = self.sales[key]
        if last_sale is None:
            return self.store.default_price
        return last_sale

    def _refund(self, account, amount, reason):
        self.ledger.credit(account, amount)
        log.info('Refunded {} to {}: {}'.format(amount, account, reason))
        return False

    def _pay(self, account, amount):
        currency = self.import_contract(self.currency.get())
        currency.transfer(amount=amount, to=account)

    # Purchases

    @export
    def buy_pixel(self, row, column, next_price=None, color=None):
        # Refunds and proceeds are keyed by account name
        buyer = validate_account(self.ctx.caller)
        payment = self.ctx.value

        try:
            key = self.store.key_of(row, column)
        except OutOfBounds as e:
            return self._refund(buyer, payment, str(e))

        cell = self.store.get(key)
        price = cell['price']

        if payment < price:
            return self._refund(buyer, payment, 'paid {} for a pixel priced at {}'.format(payment, price))

        new_price = self.policy.next_price(price, next_price)

        if color is not None and not self.colors.validate(color):
            return self._refund(buyer, payment, 'color {!r} is not allowed'.format(color))

        seller = cell['owner']
        proceeds, fee = self.ledger.settle(seller=seller, admin=self.access.get_admin(), price=price)

        if payment > price:
            self.ledger.credit(buyer, payment - price)

        cell['owner'] = buyer
        cell['price'] = new_price
        if color is not None:
            cell['color'] = color

        self.store.set(key, cell)
        self.sales[key] = price

        log.info('{} bought ({}, {}) from {} for {} ({} to seller, {} fee), now priced at {}'.format(
            buyer, row, column, seller, price, proceeds, fee, new_price))

        return True

    # Owner operations

    @export
    def set_pixel_price(self, row, column, price):
        key, cell = self._owned(row, column)

        cell['price'] = self.policy.owner_price(price, self._last_sale(key))
        self.store.set(key, cell)

        return cell['price']

    @export
    def set_pixel_color(self, row, column, color):
        key, cell = self._owned(row, column)

        self.colors.assert_valid(color)

        cell['color'] = color
        self.store.set(key, cell)

    @export
    def transfer_pixel(self, row, column, new_owner):
        key, cell = self._owned(row, column)

        cell['owner'] = validate_account(new_owner)
        self.store.set(key, cell)

        log.info('{} gave ({}, {}) to {}'.format(self.ctx.caller, row, column, new_owner))

    # Administration

    @export
    def set_admin(self, new_admin):
        self.access.set_admin(self.ctx.caller, new_admin)
        log.info('Admin changed from {} to {}'.format(self.ctx.caller, new_admin))

    @export
    def set_valid_colors(self, colors):
        self.access.assert_admin(self.ctx.caller)
        return self.colors.set_valid_colors(colors)

    # Escrow

    @export
    def withdraw(self):
        amount = self.ledger.withdraw(self.ctx.caller, self._pay)

        if amount > 0:
            log.info('{} withdrew {}'.format(self.ctx.caller, amount))

        return amount

    @export
    def check_pending_withdrawal(self):
        return self.ledger.check(self.ctx.caller)

    # Messages

    @export
    def set_user_message(self, message):
        self.board.set(self.ctx.caller, message)

    @export
    def get_user_message(self, account):
        return self.board.get(account)

    # Views

    @export
    def get_key(self, row, column):
        return self.store.key_of(row, column)

    @export
    def get_pixel(self, row, column):
        return self.store.get(self.store.key_of(row, column))

    @export
    def get_pixel_owner(self, row, column):
        return self.get_pixel(row, column)['owner']

    @export
    def get_pixel_price(self, row, column):
        return self.get_pixel(row, column)['price']

    @export
    def get_pixel_color(self, row, column):
        return self.get_pixel(row, column)['color']

    @export
    def get_price_ceiling(self, row, column):
        return self.policy.ceiling(self._last_sale(self.store.key_of(row, column)))

    @export
    def get_admin(self):
        return self.access.get_admin()

    @export
    def get_valid_colors(self):
        return self.colors.get_valid_colors()

    @export
    def size(self):
        return self.store.size

    @export
    def default_price(self):
        return self.store.default_price

    @export
    def min_price(self):
        return self.store.default_price

    @export
    def fee_ratio(self):
        return self.ledger.fee_ratio.get()

    @export
    def increment_rate(self):
        return self.rate.get()

    @export
    def growth_limit(self):
        return self.limit.get()

    @export
    def pricing_policy(self):
        return self.policy_tag.get()
