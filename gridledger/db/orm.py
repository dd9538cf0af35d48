from gridledger import config
from gridledger.db.driver import ContractDriver
from gridledger.exceptions import InvalidKey


def is_plain_key(key: str):
    # Hash keys are spliced into 'contract.name:key', so the separators cannot appear inside them
    return config.DELIMITER not in key and config.INDEX_SEPARATOR not in key and len(key) <= config.MAX_KEY_SIZE


def check_key(key):
    key = str(key)

    if not is_plain_key(key):
        raise InvalidKey(key=key[:64])

    return key


class Datum:
    def __init__(self, contract, name, driver: ContractDriver):
        self._driver = driver
        self._key = self._driver.make_key(contract, name)


class Variable(Datum):
    def __init__(self, contract, name, driver: ContractDriver, default_value=None):
        super().__init__(contract, name, driver=driver)
        self._default_value = default_value

    def set(self, value):
        self._driver.set(self._key, value)

    def get(self):
        value = self._driver.get(self._key)
        if value is None:
            return self._default_value
        return value


class Hash(Datum):
    """
    Single level mapping stored under ``contract.name:key``.

    Missing keys read as ``default_value``, which is what lets contracts write
    ``balances[account] += amount`` without seeding the account first.
    """
    def __init__(self, contract, name, driver: ContractDriver, default_value=None):
        super().__init__(contract, name, driver=driver)
        self._prefix = self._key + config.DELIMITER
        self._default_value = default_value

    def all(self):
        return self._driver.values(prefix=self._prefix)

    def __setitem__(self, key, value):
        self._driver.set(self._prefix + check_key(key), value)

    def __getitem__(self, key):
        value = self._driver.get(self._prefix + check_key(key))
        if value is None:
            return self._default_value
        return value
