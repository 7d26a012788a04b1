"""
Interactive prompt / read / print session
"""

import sys
from typing import Optional, TextIO

from classifier import AgeBracketClassifier, AgeParseError, MissingAgeError, parse_age
from classifier.messages import AGE_PROMPT, NAME_PROMPT, RETRY_TEMPLATE, build_report_lines
from classifier.models import GreetingReport
from config import Settings

from .reader import ConsoleReader


def status(message: str, settings: Settings) -> None:
    """Print a status line to stderr when verbose output is on"""
    if settings.verbose:
        print(message, file=sys.stderr)


class InteractiveSession:
    """Asks for a name and an age, then prints the greeting and bracket"""

    def __init__(self,
                 settings: Optional[Settings] = None,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None):
        self.settings = settings or Settings()
        self.reader = ConsoleReader(stdin if stdin is not None else sys.stdin)
        self.stdout = stdout if stdout is not None else sys.stdout
        self.classifier = AgeBracketClassifier()

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _prompt(self, text: str) -> None:
        # Flushed so the prompt shows before the read blocks
        self._write(text)

    def read_name(self) -> str:
        """Prompt for and read the name line"""
        self._prompt(NAME_PROMPT)
        return self.reader.read_line()

    def read_age(self) -> int:
        """
        Prompt for and read the age, applying the malformed-age policy

        Returns:
            int: The age

        Raises:
            AgeParseError: if the policy gives up on a malformed token
            MissingAgeError: if input ends before any age is given
        """
        policy = self.settings.age_parse_policy
        attempts = 0

        while True:
            self._prompt(AGE_PROMPT)
            token = self.reader.read_token()

            if token is None:
                if policy == "default":
                    status(f"⚠️ No age entered, using {self.settings.age_default}", self.settings)
                    return self.settings.age_default
                raise MissingAgeError()

            try:
                return parse_age(token)
            except AgeParseError:
                attempts += 1
                status(f"⚠️ Malformed age token {token!r} (attempt {attempts})", self.settings)

                if policy == "default":
                    return self.settings.age_default
                if policy == "error" or attempts >= self.settings.age_max_attempts:
                    raise

                self._write(RETRY_TEMPLATE.format(token=token) + "\n")
                self.reader.discard_line()

    def run(self) -> GreetingReport:
        """
        Run the full script: name, age, greeting, age line, bracket line

        Returns:
            GreetingReport: what was printed, as a model
        """
        name = self.read_name()
        age = self.read_age()

        report = self.classifier.classify_person(name, age)
        status(f"✓ Classified as {report.classification.bracket.value}", self.settings)

        for line in build_report_lines(report):
            self._write(line + "\n")

        return report
