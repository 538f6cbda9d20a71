"""
Keyboard hint state: the best evaluation seen for each letter.

The map is a derived view of (rows, evaluations). It is rebuilt from scratch
whenever it is asked for and is never kept as separate state.
"""

from typing import Dict, Iterable, Optional, Sequence

from .scoring import Evaluation

LetterStateMap = Dict[str, Evaluation]


def aggregate(rows: Iterable[str],
              evaluations: Iterable[Optional[Sequence[int]]]) -> LetterStateMap:
    """
    Fold every submitted row into letter -> max severity (WRONG < CLOSE < CORRECT).

    Rows whose evaluation is unset (None or empty) have not been submitted and
    contribute nothing, even if letters were typed into them.
    """
    states: LetterStateMap = {}
    for row, codes in zip(rows, evaluations):
        if not codes:
            continue
        for ch, code in zip(row, codes):
            code = Evaluation(code)
            best = states.get(ch)
            if best is None or code > best:
                states[ch] = code
    return states
