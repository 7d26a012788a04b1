"""
Prompt and output templates for the interactive greeter
"""

from typing import List

from .models import AgeBracket, GreetingReport


NAME_PROMPT = "Enter your name: "
AGE_PROMPT = "Enter your age: "

GREETING_TEMPLATE = "\nHello, {name}!"
AGE_TEMPLATE = "You are {age} years old."

CLASSIFICATION_MESSAGES = {
    AgeBracket.MINOR: "You are a minor.",
    AgeBracket.ADULT: "You are an adult.",
    AgeBracket.SENIOR: "You are a senior citizen.",
}

RETRY_TEMPLATE = "'{token}' is not a whole number. Please try again."


def build_report_lines(report: GreetingReport) -> List[str]:
    """
    Build the output lines for a finished classification

    Args:
        report: Person plus classification

    Returns:
        list: Greeting, age statement and classification line, in order
    """
    return [
        GREETING_TEMPLATE.format(name=report.person.name),
        AGE_TEMPLATE.format(age=report.person.age),
        report.classification.message,
    ]
