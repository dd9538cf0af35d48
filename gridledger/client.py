from gridledger import config
from gridledger.contracts.currency import Currency
from gridledger.db.driver import ContractDriver
from gridledger.db.orm import Datum
from gridledger.exceptions import ContractExists
from gridledger.execution.executor import Executor
from functools import partial


class AbstractContract:
    def __init__(self, name, signer, executor: Executor, funcs):
        self.name = name
        self.signer = signer
        self.executor = executor
        self.functions = funcs

        # each function is a partial that allows signer and value overriding per call
        for func in funcs:
            setattr(self, func, partial(self._abstract_function_call,
                                        signer=self.signer,
                                        contract_name=self.name,
                                        executor=self.executor,
                                        func=func))

    def keys(self):
        return self.executor.driver.get_contract_keys(self.name)

    def run_private_function(self, f, signer=None, **kwargs):
        signer = signer or self.signer

        # Let executor access private functions
        self.executor.bypass_privates = True

        try:
            return self._abstract_function_call(signer=signer, executor=self.executor, contract_name=self.name,
                                                func=f, **kwargs)
        finally:
            # Set executor back to restricted mode
            self.executor.bypass_privates = False

    def __getattr__(self, item):
        # Expose the contract's state objects, e.g. client.get_contract('currency').balances['stu']
        contract = self.executor.contracts.get(self.name)
        attribute = getattr(contract, item, None)

        if isinstance(attribute, Datum):
            return attribute

        raise AttributeError(item)

    def _abstract_function_call(self, signer, executor, contract_name, func, value=0, **kwargs):
        output = executor.execute(sender=signer,
                                  contract_name=contract_name,
                                  function_name=func,
                                  kwargs=kwargs,
                                  value=value)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']


class ContractingClient:
    def __init__(self, signer='sys', driver=None, currency=Currency):
        self.raw_driver = driver or ContractDriver()
        self.executor = Executor(driver=self.raw_driver)
        self.signer = signer
        self.currency_type = currency

        self.currency = self._seed_genesis()

    def _seed_genesis(self):
        return self.submit(self.currency_type, name=config.CURRENCY_CONTRACT)

    def flush(self):
        # flushes db and resubmits genesis contracts
        self.raw_driver.flush()
        self.executor.contracts.clear()

        self.currency = self._seed_genesis()

    # Returns abstract contract which has partial methods mapped to each exported function.
    def get_contract(self, name):
        contract = self.executor.contracts.get(name)

        if contract is None:
            return None

        return AbstractContract(name=name,
                                signer=self.signer,
                                executor=self.executor,
                                funcs=type(contract).exported())

    def submit(self, contract, name=None, signer=None, constructor_args={}):
        if name is None:
            name = contract.__name__.lower()

        if name in self.executor.contracts or self.raw_driver.get_contract(name) is not None:
            raise ContractExists(contract_name=name)

        instance = contract(name=name, executor=self.executor)
        self.executor.register(instance)

        # Registered as a pending write so that a failing constructor discards it with everything else
        self.raw_driver.set_contract(name=name, contract_type=contract.__name__)

        constructor = contract.constructor()

        if constructor is None:
            self.raw_driver.commit()
        else:
            try:
                self.get_contract(name).run_private_function(constructor, signer=signer, **constructor_args)
            except Exception:
                del self.executor.contracts[name]
                raise

        return self.get_contract(name)

    def get_contracts(self):
        return sorted(self.executor.contracts.keys())

    def on_receive(self, account, callback):
        self.executor.get_contract(config.CURRENCY_CONTRACT).on_receive(account, callback)

    def get_var(self, contract, variable, arguments=[]):
        return self.raw_driver.get_var(contract, variable, arguments)
