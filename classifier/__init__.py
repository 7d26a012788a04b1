"""
Age Bracket Classification Module
"""

from .classify import AgeBracketClassifier
from .models import AgeBracket, Person, ClassificationResult, GreetingReport
from .parsing import AgeParseError, MissingAgeError, parse_age

__all__ = [
    'AgeBracketClassifier',
    'AgeBracket',
    'Person',
    'ClassificationResult',
    'GreetingReport',
    'AgeParseError',
    'MissingAgeError',
    'parse_age'
]
