from __future__ import annotations

import dataclasses as dc
from typing import ClassVar

from loguru import logger
from rich.text import Text

from byte_amount.unit import Unit


@dc.dataclass(frozen=True, slots=True)
class Amount:
    """
    Byte count paired with the unit it is displayed in.

    `bytes` is never scaled; `unit` only selects how the amount is rendered.
    """

    bytes: float
    unit: Unit = Unit.BYTE

    STEP: ClassVar[float] = 1024.0

    def __str__(self) -> str:
        return self.render()

    def __rich__(self) -> Text:
        return Text(self.render(), style='repr.amount')

    @property
    def quantity(self) -> float:
        return self.bytes / float(self.unit.scale)

    def render(self) -> str:
        return f'{self.quantity:.1f} {self.unit.prefix}B'

    @classmethod
    def auto_detect(cls, byte: float) -> Amount:
        if byte <= 0:
            logger.trace('auto_detect({}) | non-positive, clamped to 0', byte)
            return cls(0.0, Unit.BYTE)

        ladder = Unit.ladder()
        value = byte
        rung = 0
        while value > 1.0 and rung < len(ladder):
            value /= cls.STEP
            rung += 1

        # 0 < byte <= 1 never climbs
        unit = ladder[rung - 1] if rung else Unit.BYTE
        logger.trace('auto_detect({}) | unit={}', byte, unit.name)

        return cls(byte, unit)
