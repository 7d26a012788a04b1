"""
Age bracket thresholds
"""

from .models import AgeBracket

ADULT_AGE = 18
SENIOR_AGE = 65


def classify_age(age: int) -> AgeBracket:
    """
    Place an age into exactly one bracket

    Args:
        age: Age in whole years (negative values are minors)

    Returns:
        AgeBracket: MINOR below 18, ADULT from 18 to 64, SENIOR from 65
    """
    if age < ADULT_AGE:
        return AgeBracket.MINOR
    if age < SENIOR_AGE:
        return AgeBracket.ADULT
    return AgeBracket.SENIOR
