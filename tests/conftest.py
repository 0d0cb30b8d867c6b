"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_tuning.core import Interval, Scale

BREMMER_NAME = "bremmer_ebvt3.scl"
BREMMER_DESCRIPTION = "Bill Bremmer EBVT III temperament (2011)"
BREMMER_TOKENS = [
    "94.87252",
    "197.05899",
    "297.8",
    "395.79561",
    "4/3",
    "595.89736",
    "699.31190",
    "796.82704",
    "896.20299",
    "999.1",
    "1096.17389",
    "2/1",
]

BREMMER_SCALA = """! bremmer_ebvt3.scl
!
Bill Bremmer EBVT III temperament (2011)
12
!
94.8725
197.059
297.8
395.796
4/3
595.897
699.312
796.827
896.203
999.1
1096.17
2/1
"""


@pytest.fixture
def bremmer_tokens() -> list[str]:
    """EBVT III interval tokens as they appear in a .scl file."""
    return list(BREMMER_TOKENS)


@pytest.fixture
def bremmer_scala() -> str:
    """Expected Scala rendering of EBVT III."""
    return BREMMER_SCALA


@pytest.fixture
def bremmer_scale() -> Scale:
    """Bill Bremmer's EBVT III: ten cents values, 4/3 and 2/1."""
    return Scale(
        BREMMER_NAME,
        BREMMER_DESCRIPTION,
        (
            Interval(94.87252),
            Interval(197.05899),
            Interval(297.8),
            Interval(395.79561),
            Interval.from_ratio(4, 3),
            Interval(595.89736),
            Interval(699.31190),
            Interval(796.82704),
            Interval(896.20299),
            Interval(999.1),
            Interval(1096.17389),
            Interval.from_ratio(2, 1),
        ),
    )


@pytest.fixture
def just_triad_scale() -> Scale:
    """A three-step just scale: 5/4, 3/2, 2/1."""
    return Scale(
        "just_triad.scl",
        "5-limit major triad",
        [Interval.from_ratio(5, 4), Interval.from_ratio(3, 2), Interval.OCTAVE],
    )
