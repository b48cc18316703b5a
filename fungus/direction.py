""" Headings of the instruction pointer. """

import enum


class Direction(enum.Enum):
    """ One of the four cardinal directions, valued by its (dx, dy) step """
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def is_horizontal(self):
        return self.dy == 0

    @classmethod
    def random(cls, rng):
        """ Pick a direction uniformly using the given random generator """
        return rng.choice(list(cls))
