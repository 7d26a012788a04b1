"""
Pydantic models for age-bracket classification outputs
"""

from enum import Enum
from pydantic import BaseModel, Field


class AgeBracket(str, Enum):
    """Age bracket a person falls into"""

    MINOR = "minor"
    ADULT = "adult"
    SENIOR = "senior"


class Person(BaseModel):
    """Name and age as entered by the user"""

    name: str = Field(
        description="Name exactly as typed, without the line break"
    )
    age: int = Field(
        strict=True,
        description="Age in whole years; no range is enforced"
    )


class ClassificationResult(BaseModel):
    """Age bracket classification result"""

    bracket: AgeBracket = Field(
        description="The bracket the age falls into"
    )
    message: str = Field(
        description="The classification line shown to the user"
    )


class GreetingReport(BaseModel):
    """Complete greeting: who was greeted and how they were classified"""

    person: Person = Field(
        description="The person that was classified"
    )
    classification: ClassificationResult = Field(
        description="The classification result"
    )
