import enum


class Unit(enum.Enum):
    """Binary (IEC) magnitude. The value of each member is its scale in bytes."""

    BYTE = 1 << 0
    KILO = 1 << 10
    MEGA = 1 << 20
    GIGA = 1 << 30
    TERA = 1 << 40

    def __str__(self) -> str:
        return self.prefix

    @property
    def scale(self) -> int:
        return self.value

    @property
    def prefix(self) -> str:
        match self:
            case Unit.BYTE:
                return ''
            case Unit.KILO:
                return 'Ki'
            case Unit.MEGA:
                return 'Mi'
            case Unit.GIGA:
                return 'Gi'
            case Unit.TERA:
                return 'Ti'

    @property
    def index(self) -> int:
        return self.ladder().index(self)

    @classmethod
    def ladder(cls) -> tuple['Unit', ...]:
        return tuple(cls)
