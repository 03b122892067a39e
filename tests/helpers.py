import random


class IdentityShuffle(random.Random):
    """Random source whose shuffle keeps the given order."""

    def shuffle(self, x, *args, **kwargs) -> None:
        return None


class LcgShuffle(random.Random):
    """Fisher-Yates shuffle driven by a 4-bit LCG, x -> (5x + 3) mod 16."""

    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self._state = seed % 16

    def shuffle(self, x, *args, **kwargs) -> None:
        for i in reversed(range(1, len(x))):
            self._state = (5 * self._state + 3) % 16
            j = self._state % (i + 1)
            x[i], x[j] = x[j], x[i]


GOLDEN_7X7_UNSOLVED = (
    "#E#####\n"
    "# #   #\n"
    "# # # #\n"
    "# # # #\n"
    "# ### #\n"
    "#     #\n"
    "#####S#\n"
)

GOLDEN_7X7_SOLVED = (
    "#E#####\n"
    "#*#   #\n"
    "#*# # #\n"
    "#*# # #\n"
    "#*### #\n"
    "#*****#\n"
    "#####S#\n"
)

# LcgShuffle(7) on a 7x7 grid
SEEDED_7X7_UNSOLVED = (
    "#E#####\n"
    "# #   #\n"
    "# ### #\n"
    "# #   #\n"
    "# # # #\n"
    "#   # #\n"
    "#####S#\n"
)

SEEDED_7X7_SOLVED = (
    "#E#####\n"
    "#*#  *#\n"
    "#*###*#\n"
    "#*#***#\n"
    "#*#*#*#\n"
    "#***#*#\n"
    "#####S#\n"
)

SEEDED_7X7_TRACE = (
    "#E#####\n"
    "#*#   #\n"
    "#*### #\n"
    "#*#***#\n"
    "#*#*#*#\n"
    "#***#*#\n"
    "#####S#\n"
)
