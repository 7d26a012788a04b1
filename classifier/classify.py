"""
Age bracket classification of a person
"""

from .brackets import classify_age
from .messages import CLASSIFICATION_MESSAGES
from .models import ClassificationResult, GreetingReport, Person


class AgeBracketClassifier:
    """Classifies people into minor / adult / senior brackets"""

    def classify(self, age: int) -> ClassificationResult:
        """
        Classify an age

        Args:
            age: Age in whole years

        Returns:
            ClassificationResult: bracket and the line to show
        """
        bracket = classify_age(age)
        return ClassificationResult(
            bracket=bracket,
            message=CLASSIFICATION_MESSAGES[bracket]
        )

    def classify_person(self, name: str, age: int) -> GreetingReport:
        """
        Classify a person and bundle the result with their details

        Args:
            name: Name as entered
            age: Age as parsed

        Returns:
            GreetingReport: Pydantic model with person and classification
        """
        person = Person(name=name, age=age)
        return GreetingReport(
            person=person,
            classification=self.classify(person.age)
        )
