from gridledger import config
from gridledger.components import validate_amount, validate_account
from gridledger.contracts.base import Contract, export, construct
from gridledger.exceptions import InsufficientFunds, NotAdmin
from gridledger.logger import get_logger

log = get_logger('Currency')


class Currency(Contract):
    """
    Native balances. Transaction values are moved through `move`, contracts
    pay out through `transfer`.

    An account may register a receive hook that runs synchronously whenever a
    `transfer` credits it. The hook can call back into any contract, which is
    exactly what a hostile payee would do.
    """
    def __init__(self, name, executor):
        super().__init__(name, executor)
        self.balances = self.hash(config.BALANCES_HASH, default_value=0)
        self.owner = self.variable('owner')
        self.receivers = {}

    @construct
    def seed(self):
        self.owner.set(self.ctx.caller)

    def on_receive(self, account, callback):
        if callback is None:
            self.receivers.pop(account, None)
        else:
            self.receivers[account] = callback

    def move(self, sender, to, amount):
        validate_account(to)
        validate_amount(amount)

        balance = self.balances[sender]
        if balance < amount:
            raise InsufficientFunds(account=sender, balance=balance, amount=amount)

        self.balances[sender] = balance - amount
        self.balances[to] += amount

    @export
    def transfer(self, amount, to):
        self.move(self.ctx.caller, to, amount)

        log.debug('{} sent {} to {}'.format(self.ctx.caller, amount, to))

        hook = self.receivers.get(to)
        if hook is not None:
            hook(to, amount)

        return amount

    @export
    def balance_of(self, account):
        return self.balances[account]

    @export
    def mint(self, amount, to):
        if self.ctx.caller != self.owner.get():
            raise NotAdmin(caller=self.ctx.caller)

        validate_account(to)
        self.balances[to] += validate_amount(amount)
