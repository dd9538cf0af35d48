from unittest import TestCase
from gridledger.client import ContractingClient
from gridledger.contracts.base import Contract, export, construct
from gridledger.exceptions import ContractExists, PrivateMethodCall, NotAdmin, InvalidConfiguration


class Notes(Contract):
    def __init__(self, name, executor):
        super().__init__(name, executor)
        self.notes = self.hash('notes', default_value='')
        self.author = self.variable('author')

    @construct
    def seed(self, author=None):
        if author == 'nobody':
            raise InvalidConfiguration(reason='nobody cannot author')
        self.author.set(author or self.ctx.caller)

    @export
    def write(self, text):
        self.notes[self.ctx.caller] = text

    @export
    def read(self, account):
        return self.notes[account]

    def scratch(self):
        return 'private'


class TestClient(TestCase):
    def setUp(self):
        self.c = ContractingClient(signer='stu')

    def tearDown(self):
        self.c.flush()

    def test_currency_seeded(self):
        self.assertEqual(self.c.get_contracts(), ['currency'])
        self.assertEqual(self.c.currency.owner.get(), 'stu')

    def test_submit_runs_constructor(self):
        notes = self.c.submit(Notes)

        self.assertEqual(notes.name, 'notes')
        self.assertEqual(notes.author.get(), 'stu')

    def test_submit_with_name_and_args(self):
        notes = self.c.submit(Notes, name='journal', constructor_args={'author': 'raghu'})

        self.assertEqual(notes.name, 'journal')
        self.assertEqual(self.c.get_var('journal', 'author'), 'raghu')

    def test_submit_twice_fails(self):
        self.c.submit(Notes)
        with self.assertRaises(ContractExists):
            self.c.submit(Notes)

    def test_failed_constructor_leaves_nothing_behind(self):
        with self.assertRaises(InvalidConfiguration):
            self.c.submit(Notes, constructor_args={'author': 'nobody'})

        self.assertIsNone(self.c.get_contract('notes'))
        self.assertIsNone(self.c.raw_driver.get_contract('notes'))

        # and the name is free again
        self.c.submit(Notes)

    def test_exported_functions_only(self):
        notes = self.c.submit(Notes)

        self.assertEqual(sorted(notes.functions), ['read', 'write'])
        self.assertFalse(hasattr(notes, 'scratch'))

    def test_signer_override(self):
        notes = self.c.submit(Notes)
        notes.write(text='hi')
        notes.write(text='yo', signer='raghu')

        self.assertEqual(notes.read(account='stu'), 'hi')
        self.assertEqual(notes.read(account='raghu'), 'yo')

    def test_keys(self):
        notes = self.c.submit(Notes)
        notes.write(text='hi')

        self.assertIn('notes.notes:stu', notes.keys())

    def test_failure_reraises(self):
        with self.assertRaises(NotAdmin):
            self.c.currency.mint(amount=10, to='raghu', signer='raghu')

    def test_run_private_function(self):
        notes = self.c.submit(Notes)
        self.assertEqual(notes.run_private_function('scratch'), 'private')

        # executor is back in restricted mode
        output = self.c.executor.execute('stu', 'notes', 'scratch')
        self.assertIsInstance(output['result'], PrivateMethodCall)

    def test_mint_and_transfer(self):
        self.c.currency.mint(amount=100, to='stu')
        self.c.currency.transfer(amount=40, to='raghu')

        self.assertEqual(self.c.currency.balance_of(account='stu'), 60)
        self.assertEqual(self.c.currency.balance_of(account='raghu'), 40)

    def test_value_attached_through_proxy(self):
        notes = self.c.submit(Notes)
        self.c.currency.mint(amount=100, to='stu')

        notes.write(text='paid', value=30)

        self.assertEqual(self.c.currency.balances['notes'], 30)

    def test_flush_resets_state(self):
        self.c.submit(Notes)
        self.c.currency.mint(amount=100, to='stu')

        self.c.flush()

        self.assertEqual(self.c.get_contracts(), ['currency'])
        self.assertEqual(self.c.currency.balance_of(account='stu'), 0)
