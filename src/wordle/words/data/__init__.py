# Built-in word lists shipped with the game.
# final.txt holds the words that may be drawn as answers; acceptable.txt holds
# every word accepted as a guess (a superset of final.txt).

from pathlib import Path
from typing import List

_DATA_DIR = Path(__file__).parent


def _load(name):
    '''
    Returns the uppercased words of a bundled list, in file order.
    '''
    text = (_DATA_DIR / name).read_text(encoding="utf-8")
    return [word.upper() for word in text.split()]


FINAL: List[str] = _load("final.txt")
ACCEPTABLE: List[str] = sorted(_load("acceptable.txt"))
