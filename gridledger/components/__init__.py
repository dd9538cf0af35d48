from gridledger.db.orm import is_plain_key
from gridledger.exceptions import InvalidAmount, InvalidAccount


def validate_amount(amount):
    # bool is an int subclass and would otherwise slip through as 0 or 1
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        raise InvalidAmount(amount=amount)
    return amount


def validate_account(account):
    # Accounts end up as hash keys in the ledger, so they obey the same rules
    if not isinstance(account, str) or account == '' or not is_plain_key(account):
        raise InvalidAccount(account=account)
    return account
