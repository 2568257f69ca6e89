from typing import Dict, Tuple

import attrs

from slide_bib_sdk.logic.models import EquationEntry


@attrs.define
class EquationRegistry:
    """
    Sequential numbering of display equations.

    Every registration takes the next number, labelled or not. Registering a label again rebinds it to the new number.
    """

    _equations: Dict[str, EquationEntry] = attrs.field(init=False, factory=dict)
    _counter: int = attrs.field(init=False, default=0)

    @property
    def counter(self) -> int:
        return self._counter

    def register_equation(self, label: str | None = None, slide_number: int | None = None) -> int:
        self._counter += 1

        if label:
            self._equations[label] = EquationEntry(label=label, number=self._counter, slide_number=slide_number)

        return self._counter

    def get_equation(self, label: str) -> EquationEntry | None:
        return self._equations.get(label)

    def get_equation_number(self, label: str) -> int | None:
        equation = self._equations.get(label)
        return equation.number if equation is not None else None

    def format_equation_reference(self, label: str) -> str:
        number = self.get_equation_number(label)
        return f"({number})" if number is not None else "(?)"

    def labels(self) -> Tuple[str, ...]:
        """Labels in order of first registration."""
        return tuple(self._equations)

    def reset(self) -> None:
        self._equations = {}
        self._counter = 0
