from enum import Enum, auto


class VarCat(str, Enum):
    def _generate_next_value_(name, start, count, last_values):
        return name

    terraform = auto()
    env = auto()

    def __str__(self):
        return self.value
