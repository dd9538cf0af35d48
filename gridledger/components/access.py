from gridledger.components import validate_account
from gridledger.db.orm import Variable
from gridledger.exceptions import NotAdmin


class AccessControl:
    def __init__(self, contract, driver):
        self.admin = Variable(contract, 'admin', driver=driver)

    def initialize(self, account):
        self.admin.set(validate_account(account))

    def get_admin(self):
        return self.admin.get()

    def is_admin(self, account):
        return account is not None and account == self.admin.get()

    def assert_admin(self, account):
        if not self.is_admin(account):
            raise NotAdmin(caller=account)

    def set_admin(self, caller, new_admin):
        self.assert_admin(caller)
        self.admin.set(validate_account(new_admin))
