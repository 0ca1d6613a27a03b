from __future__ import annotations

from argparse import Namespace
from typing import Any, List


class Settings(Namespace):
    def __init__(self, **kwargs: Any):
        self.command: str|None = None
        self.values: List[str] = []
        self.minimum: float|None = None  # no minimum
        self.separator: str = ','
        self.decimal: str = '.'
        self.threshold: float = 1000
        self.long: bool = False
        self.no_color: bool = False
        self.debug: bool = False

        super().__init__(**kwargs)

    @property
    def color(self) -> bool:
        return not self.no_color
