from unittest import TestCase
from gridledger.execution.runtime import Context
from gridledger.exceptions import CallDepthExceeded


class TestContext(TestCase):
    def setUp(self):
        self.ctx = Context()

    def test_empty_base_state(self):
        self.assertIsNone(self.ctx.this)
        self.assertIsNone(self.ctx.caller)
        self.assertIsNone(self.ctx.signer)
        self.assertEqual(self.ctx.value, 0)

    def test_add_and_pop_state(self):
        self.ctx._base_state = {'this': 'grid', 'caller': 'stu', 'signer': 'stu', 'value': 5}
        self.ctx._add_state({'this': 'currency', 'caller': 'grid', 'signer': 'stu', 'value': 0})

        self.assertEqual(self.ctx.this, 'currency')
        self.assertEqual(self.ctx.caller, 'grid')
        self.assertEqual(self.ctx.signer, 'stu')
        self.assertEqual(self.ctx.value, 0)
        self.assertEqual(self.ctx.depth, 1)

        self.ctx._pop_state()

        self.assertEqual(self.ctx.this, 'grid')
        self.assertEqual(self.ctx.caller, 'stu')
        self.assertEqual(self.ctx.value, 5)

    def test_pop_on_empty_is_noop(self):
        self.ctx._pop_state()
        self.assertEqual(self.ctx.depth, 0)

    def test_context_changed(self):
        self.ctx._base_state = {'this': 'grid', 'caller': 'stu', 'signer': 'stu', 'value': 0}
        self.assertFalse(self.ctx._context_changed('grid'))
        self.assertTrue(self.ctx._context_changed('currency'))

    def test_depth_limit(self):
        ctx = Context(maxlen=2)
        ctx._add_state({'this': 'a', 'caller': None, 'signer': None, 'value': 0})
        ctx._add_state({'this': 'b', 'caller': 'a', 'signer': None, 'value': 0})

        with self.assertRaises(CallDepthExceeded):
            ctx._add_state({'this': 'c', 'caller': 'b', 'signer': None, 'value': 0})

    def test_reset(self):
        self.ctx._add_state({'this': 'a', 'caller': None, 'signer': None, 'value': 0})
        self.ctx._reset()
        self.assertEqual(self.ctx.depth, 0)
