#!/usr/bin/env python3
"""
Interactive greeter: asks for a name and age, prints a greeting and
whether the person is a minor, an adult or a senior citizen.
"""

import sys

from classifier import AgeParseError, MissingAgeError
from config import env_path, load_env_file, load_settings


def main():
    """Run one interactive session and exit with its status"""
    loaded = load_env_file()

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    from console import InteractiveSession, status

    if loaded:
        status(f"✓ Loaded local .env file from {env_path}", settings)
    status(f"✓ Malformed age policy: {settings.age_parse_policy}", settings)

    session = InteractiveSession(settings=settings)

    try:
        session.run()
    except AgeParseError as e:
        print(f"\nInvalid age: {e}", file=sys.stderr)
        sys.exit(1)
    except MissingAgeError as e:
        print(f"\n{e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        sys.exit(130)

    sys.exit(0)


if __name__ == "__main__":
    main()
