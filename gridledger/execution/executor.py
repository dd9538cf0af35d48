from gridledger import config
from gridledger.components import validate_amount
from gridledger.db.driver import ContractDriver
from gridledger.exceptions import GridError, ContractNotFound, PrivateMethodCall
from gridledger.execution.runtime import Context, empty_state
from gridledger.logger import get_logger
from copy import deepcopy
import traceback

log = get_logger('Executor')


class Executor:
    def __init__(self, driver=None, context=None, bypass_privates=False,
                 currency_contract=config.CURRENCY_CONTRACT):

        self.driver = driver

        if not self.driver:
            self.driver = ContractDriver()

        self.context = context or Context()
        self.contracts = {}

        self.currency_contract = currency_contract
        self.bypass_privates = bypass_privates

        self._depth = 0

    def register(self, contract):
        self.contracts[contract.name] = contract

    def get_contract(self, name):
        contract = self.contracts.get(name)
        if contract is None:
            raise ContractNotFound(contract_name=name)
        return contract

    def _resolve(self, contract_name, function_name):
        contract = self.get_contract(contract_name)

        if not self.bypass_privates:
            if function_name.startswith(config.PRIVATE_METHOD_PREFIX) or not contract.is_exported(function_name):
                raise PrivateMethodCall(contract_name=contract_name, function_name=function_name)

        return getattr(contract, function_name)

    def _attach_value(self, sender, contract_name, value):
        validate_amount(value)

        if value > 0:
            currency = self.get_contract(self.currency_contract)
            currency.move(sender, contract_name, value)

    def execute(self, sender, contract_name, function_name, kwargs={}, value=0) -> dict:
        # Called from inside a running transaction, e.g. by a receive hook
        if self._depth > 0:
            return self._execute_nested(sender, contract_name, function_name, kwargs, value)

        log.debug('{} calling {}.{} with {} attached'.format(sender, contract_name, function_name, value))

        self._depth += 1
        writes = {}

        try:
            func = self._resolve(contract_name, function_name)

            self.context._reset()
            self.context._base_state = {
                'signer': sender,
                'caller': sender,
                'this': contract_name,
                'value': value
            }

            self._attach_value(sender, contract_name, value)

            result = func(**kwargs)
            status_code = 0

            writes = deepcopy(self.driver.pending_writes)
            self.driver.commit()
        except Exception as e:
            result = e
            status_code = 1

            if isinstance(e, GridError):
                log.warning('{}.{} rejected for {}: {}'.format(contract_name, function_name, sender, e))
            else:
                log.error(str(e))
                log.error(traceback.format_exc())

            self.driver.clear_pending_state()
        finally:
            self._depth -= 1
            self.context._reset()
            self.context._base_state = empty_state()

        return {
            'status_code': status_code,
            'result': result,
            'writes': writes,
        }

    def _execute_nested(self, sender, contract_name, function_name, kwargs, value):
        func = self._resolve(contract_name, function_name)

        self.context._add_state({
            'signer': sender,
            'caller': sender,
            'this': contract_name,
            'value': value
        })
        self._depth += 1

        # Nothing is committed or rolled back here. A failure aborts the enclosing transaction.
        try:
            self._attach_value(sender, contract_name, value)
            result = func(**kwargs)
        finally:
            self._depth -= 1
            self.context._pop_state()

        return {
            'status_code': 0,
            'result': result,
            'writes': deepcopy(self.driver.pending_writes),
        }
