# calculator.py - the unit under test

def add(a: int, b: int) -> int:
    """Add two integers together"""
    return a + b


r"""
# ==========================================================================================================
# Unit Testing
# ==========================================================================================================
A unit test exercises one unit (here, one function) in isolation: no database, no network, no browser.

```
import unittest
from qa_types.examples.unit import add

class TestAdd(unittest.TestCase):
    def test_add(self):
        self.assertEqual(add(2, 3), 5)
```

The same check in pytest style is a bare `assert add(2, 3) == 5`; see
`qa_types/tests/test_examples/test_unit_calculator.py` for both.
"""
