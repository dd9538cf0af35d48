from gridledger.components import validate_account
from gridledger.db.orm import Hash
from gridledger.exceptions import InvalidMessage


class MessageBoard:
    def __init__(self, contract, driver):
        self.messages = Hash(contract, 'messages', driver=driver, default_value='')

    def set(self, account, message):
        if not isinstance(message, str):
            raise InvalidMessage(reason='expected str, got {}'.format(type(message).__name__))

        try:
            message.encode('utf-8')
        except UnicodeEncodeError as e:
            raise InvalidMessage(reason=str(e))

        self.messages[validate_account(account)] = message

    def get(self, account):
        return self.messages[account]
