from gridledger.components import validate_amount, validate_account
from gridledger.db.orm import Hash, Variable
from gridledger.exceptions import InvalidConfiguration


class FeeLedger:
    """
    Escrow of pending balances.

    Sales and refunds only ever credit an account here. Funds leave through
    `withdraw`, which clears the balance before handing the amount to the
    transfer callable, so anything the recipient does while being paid sees
    a zero balance.
    """
    def __init__(self, contract, driver):
        self.pending = Hash(contract, 'pending', driver=driver, default_value=0)
        self.fee_ratio = Variable(contract, 'fee_ratio', driver=driver)

    def initialize(self, fee_ratio):
        if isinstance(fee_ratio, bool) or not isinstance(fee_ratio, int) or fee_ratio <= 0:
            raise InvalidConfiguration(reason='fee_ratio must be a positive integer, got {!r}'.format(fee_ratio))
        self.fee_ratio.set(fee_ratio)

    def credit(self, account, amount):
        validate_account(account)
        validate_amount(amount)

        if amount == 0:
            return

        self.pending[account] += amount

    def check(self, account):
        return self.pending[account]

    def withdraw(self, account, transfer):
        amount = self.pending[account]

        if amount == 0:
            return 0

        self.pending[account] = 0
        transfer(account, amount)

        return amount

    def fee(self, price):
        return price // self.fee_ratio.get()

    def settle(self, seller, admin, price):
        fee = self.fee(price)

        self.credit(seller, price - fee)
        self.credit(admin, fee)

        return price - fee, fee

    def total(self):
        return sum(self.pending.all())
