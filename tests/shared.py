from typing import List, Tuple

# Parametrised test cases: (input, expected output) pairs
type TTestCase[I, O] = List[Tuple[I, O]]
