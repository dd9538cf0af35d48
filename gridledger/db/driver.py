from gridledger.db.encoder import encode_kv, decode_kv, decode
from gridledger import config
from gridledger.logger import get_logger
from gridledger.exceptions import ContractExists
from copy import deepcopy

# DB maps bytes to bytes
# Driver maps string to python object


class InMemDriver:
    def __init__(self):
        self.db = {}

    def get(self, item: str):
        key = item.encode()
        return decode(self.db.get(key))

    def set(self, key: str, value):
        if value is None:
            self.__delitem__(key)
        else:
            k, v = encode_kv(key, value)
            self.db[k] = v

    def delete(self, key: str):
        self.__delitem__(key)

    def items(self, prefix=''):
        p = prefix.encode()
        return dict(decode_kv(k, v) for k, v in sorted(self.db.items()) if k.startswith(p))

    def keys(self):
        return sorted([k.decode() for k in self.db.keys()])

    def flush(self):
        self.db.clear()

    def __getitem__(self, item: str):
        value = self.get(item)
        if value is None:
            raise KeyError
        return value

    def __setitem__(self, key: str, value):
        self.set(key, value)

    def __delitem__(self, key: str):
        k = key.encode()
        try:
            del self.db[k]
        except KeyError:
            pass


class CacheDriver:
    def __init__(self, driver=None):
        self.pending_writes = {}
        self.pending_reads = {}
        self.driver = driver or InMemDriver()

    def find(self, key: str):
        # A pending None is a pending delete and shadows whatever is on disk
        if key in self.pending_writes:
            return self.pending_writes[key]

        return self.driver.get(key)

    def get(self, key: str):
        value = self.find(key)

        if key not in self.pending_reads:
            self.pending_reads[key] = value

        # Hand out copies so that mutating a returned dict never edits pending state behind the driver's back
        return deepcopy(value)

    def set(self, key, value):
        if key not in self.pending_reads:
            self.get(key)

        self.pending_writes[key] = deepcopy(value)

    def delete(self, key):
        self.set(key, None)

    def commit(self):
        for k, v in self.pending_writes.items():
            if v is None:
                self.driver.delete(k)
            else:
                self.driver.set(k, v)

        self.pending_writes.clear()
        self.pending_reads = {}

    def rollback(self):
        # Returns to disk state which should be whatever it was prior to the current write session
        self.pending_reads = {}
        self.pending_writes.clear()

    def clear_pending_state(self):
        self.rollback()

    def flush(self):
        self.rollback()
        self.driver.flush()


class ContractDriver(CacheDriver):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.delimiter = config.INDEX_SEPARATOR
        self.log = get_logger('Driver')

    def items(self, prefix=''):
        # Disk state first, then overlay whatever is pending in this session
        _items = self.driver.items(prefix=prefix)

        for k, v in self.pending_writes.items():
            if k.startswith(prefix):
                if v is None:
                    _items.pop(k, None)
                else:
                    _items[k] = deepcopy(v)

        return _items

    def keys(self, prefix=''):
        return sorted(self.items(prefix).keys())

    def values(self, prefix=''):
        return list(self.items(prefix).values())

    def make_key(self, contract, variable, args=[]):
        contract_variable = self.delimiter.join((contract, variable))
        if args:
            return config.DELIMITER.join((contract_variable, *[str(arg) for arg in args]))
        return contract_variable

    def get_var(self, contract, variable, arguments=[]):
        key = self.make_key(contract, variable, arguments)
        return self.get(key)

    def set_var(self, contract, variable, arguments=[], value=None):
        key = self.make_key(contract, variable, arguments)
        self.set(key, value)

    def get_contract(self, name):
        return self.get_var(name, config.TYPE_KEY)

    def set_contract(self, name, contract_type, overwrite=False):
        if not overwrite:
            if self.get_contract(name) is not None:
                raise ContractExists(contract_name=name)

        self.log.debug('Registering contract {} of type {}'.format(name, contract_type))

        self.set_var(name, config.TYPE_KEY, value=contract_type)

    def get_contract_keys(self, name):
        return self.keys(prefix=name + self.delimiter)
