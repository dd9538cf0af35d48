from gridledger import config
from gridledger.exceptions import CallDepthExceeded


def empty_state():
    return {
        'this': None,
        'caller': None,
        'signer': None,
        'value': 0
    }


class Context:
    """
    Stack of call frames for the transaction being executed.

    The executor sets the base frame for the top-level call. Every time control
    crosses into another contract, or a receive hook re-enters the executor, a
    new frame is pushed, so `caller` is always the account or contract that
    made the current call and `signer` is whoever signed the transaction.
    """
    def __init__(self, base_state=None, maxlen=config.CALL_DEPTH_LIMIT):
        self._state = []
        self._base_state = base_state or empty_state()
        self._maxlen = maxlen

    def _context_changed(self, contract):
        if self._get_state()['this'] == contract:
            return False
        return True

    def _get_state(self):
        if len(self._state) == 0:
            return self._base_state
        return self._state[-1]

    def _add_state(self, state: dict):
        if len(self._state) >= self._maxlen:
            raise CallDepthExceeded(limit=self._maxlen)
        self._state.append(state)

    def _pop_state(self):
        if len(self._state) > 0:
            self._state.pop(-1)

    def _reset(self):
        self._state = []

    @property
    def depth(self):
        return len(self._state)

    @property
    def this(self):
        return self._get_state()['this']

    @property
    def caller(self):
        return self._get_state()['caller']

    @property
    def signer(self):
        return self._get_state()['signer']

    @property
    def value(self):
        return self._get_state().get('value', 0)
