from functools import wraps

from gridledger import config
from gridledger.db.orm import Variable, Hash


def export(f):
    """
    Make a contract method callable from outside the contract.

    When one contract calls into another, a new frame is pushed onto the call
    context so the callee sees the calling contract as `ctx.caller`.
    """
    @wraps(f)
    def call(self, *args, **kwargs):
        ctx = self.ctx

        if not ctx._context_changed(self.name):
            return f(self, *args, **kwargs)

        ctx._add_state({
            'this': self.name,
            'caller': ctx.this,
            'signer': ctx.signer,
            'value': 0
        })

        try:
            return f(self, *args, **kwargs)
        finally:
            ctx._pop_state()

    setattr(call, config.EXPORT_ATTRIBUTE, True)
    return call


def construct(f):
    setattr(f, config.CONSTRUCT_ATTRIBUTE, True)
    return f


class Contract:
    def __init__(self, name, executor):
        self.name = name
        self.executor = executor
        self.driver = executor.driver
        self.ctx = executor.context

    def variable(self, name, **kwargs):
        return Variable(self.name, name, driver=self.driver, **kwargs)

    def hash(self, name, default_value=None):
        return Hash(self.name, name, driver=self.driver, default_value=default_value)

    def import_contract(self, name):
        return self.executor.get_contract(name)

    @classmethod
    def exported(cls):
        return sorted(name for name in dir(cls)
                      if getattr(getattr(cls, name), config.EXPORT_ATTRIBUTE, False))

    @classmethod
    def constructor(cls):
        for name in dir(cls):
            if getattr(getattr(cls, name), config.CONSTRUCT_ATTRIBUTE, False):
                return name
        return None

    @classmethod
    def is_exported(cls, function_name):
        return getattr(getattr(cls, function_name, None), config.EXPORT_ATTRIBUTE, False)
