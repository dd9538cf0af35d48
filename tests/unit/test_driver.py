from unittest import TestCase
from gridledger.db.driver import InMemDriver, ContractDriver
from gridledger.exceptions import ContractExists


class TestInMemDriver(TestCase):
    def setUp(self):
        self.d = InMemDriver()

    def tearDown(self):
        self.d.flush()

    def test_get_set(self):
        self.d.set('b', 'a')
        self.assertEqual(self.d.get('b'), 'a')

    def test_set_none_deletes(self):
        self.d.set('b', 'a')
        self.d.set('b', None)
        self.assertIsNone(self.d.get('b'))

    def test_delete(self):
        self.d.set('b', 'a')
        self.d.delete('b')
        self.assertIsNone(self.d.get('b'))

    def test_delete_missing_is_fine(self):
        self.d.delete('nothing')

    def test_items(self):
        self.d.set('a.x', 1)
        self.d.set('a.y', 2)
        self.d.set('b.z', 3)

        self.assertEqual(self.d.items('a.'), {'a.x': 1, 'a.y': 2})

    def test_getitem_missing_raises(self):
        with self.assertRaises(KeyError):
            self.d['missing']

    def test_setitem_getitem(self):
        self.d['key'] = {'price': 5}
        self.assertEqual(self.d['key'], {'price': 5})


class TestContractDriver(TestCase):
    def setUp(self):
        self.d = ContractDriver()

    def tearDown(self):
        self.d.flush()

    def test_pending_write_visible_before_commit(self):
        self.d.set('grid.size', 10)

        self.assertEqual(self.d.get('grid.size'), 10)
        self.assertIsNone(self.d.driver.get('grid.size'))

    def test_commit_persists(self):
        self.d.set('grid.size', 10)
        self.d.commit()

        self.assertEqual(self.d.driver.get('grid.size'), 10)
        self.assertEqual(self.d.pending_writes, {})

    def test_rollback_discards_pending(self):
        self.d.set('grid.size', 10)
        self.d.commit()

        self.d.set('grid.size', 20)
        self.d.rollback()

        self.assertEqual(self.d.get('grid.size'), 10)

    def test_pending_delete_shadows_disk(self):
        self.d.set('grid.size', 10)
        self.d.commit()

        self.d.delete('grid.size')
        self.assertIsNone(self.d.get('grid.size'))

        self.d.commit()
        self.assertIsNone(self.d.driver.get('grid.size'))

    def test_returned_values_are_copies(self):
        self.d.set('grid.pixels:0', {'owner': 'stu', 'price': 1, 'color': 0})

        cell = self.d.get('grid.pixels:0')
        cell['owner'] = 'raghu'

        self.assertEqual(self.d.get('grid.pixels:0')['owner'], 'stu')

    def test_pending_reads_record_original_value(self):
        self.d.set('grid.size', 10)
        self.d.commit()

        self.d.set('grid.size', 20)
        self.assertEqual(self.d.pending_reads['grid.size'], 10)

    def test_items_overlay_pending(self):
        self.d.set('grid.pending:a', 1)
        self.d.set('grid.pending:b', 2)
        self.d.commit()

        self.d.set('grid.pending:b', 5)
        self.d.delete('grid.pending:a')
        self.d.set('grid.pending:c', 7)

        self.assertEqual(self.d.items('grid.pending:'), {'grid.pending:b': 5, 'grid.pending:c': 7})
        self.assertEqual(sorted(self.d.values('grid.pending:')), [5, 7])

    def test_make_key(self):
        self.assertEqual(self.d.make_key('grid', 'pixels'), 'grid.pixels')
        self.assertEqual(self.d.make_key('grid', 'pixels', [1, 2]), 'grid.pixels:1:2')

    def test_get_set_var(self):
        self.d.set_var('currency', 'balances', ['stu'], value=100)
        self.assertEqual(self.d.get_var('currency', 'balances', ['stu']), 100)
        self.assertEqual(self.d.get('currency.balances:stu'), 100)

    def test_set_contract_twice_fails(self):
        self.d.set_contract('grid', 'Grid')
        self.assertEqual(self.d.get_contract('grid'), 'Grid')

        with self.assertRaises(ContractExists):
            self.d.set_contract('grid', 'Grid')

    def test_set_contract_overwrite(self):
        self.d.set_contract('grid', 'Grid')
        self.d.set_contract('grid', 'OtherGrid', overwrite=True)
        self.assertEqual(self.d.get_contract('grid'), 'OtherGrid')

    def test_flush_clears_everything(self):
        self.d.set('a', 1)
        self.d.commit()
        self.d.set('b', 2)

        self.d.flush()

        self.assertIsNone(self.d.get('a'))
        self.assertIsNone(self.d.get('b'))
