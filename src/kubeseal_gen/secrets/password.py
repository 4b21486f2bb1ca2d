"""Random password generation.

Passwords are drawn from the OS CSPRNG. The default policy mixes digits,
lowercase and uppercase letters and symbols, leaves out characters that are
easy to confuse with each other and, being strict, guarantees at least one
character from every enabled class.
"""

import secrets
import string
from dataclasses import dataclass

from kubeseal_gen.exceptions import GenerationError

SIMILAR_CHARACTERS = frozenset("iI1loO0\"'`|")

_SYMBOLS = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"

_random = secrets.SystemRandom()


@dataclass(frozen=True, slots=True)
class PasswordPolicy:
    """Character classes and guarantees for generated passwords.

    Attributes:
        numbers: Include digits.
        lowercase_letters: Include lowercase ASCII letters.
        uppercase_letters: Include uppercase ASCII letters.
        symbols: Include ASCII punctuation.
        spaces: Include the space character.
        exclude_similar_characters: Drop look-alike characters such as 0/O and 1/l/I.
        strict: Require at least one character from every enabled class.

    """

    numbers: bool = True
    lowercase_letters: bool = True
    uppercase_letters: bool = True
    symbols: bool = True
    spaces: bool = False
    exclude_similar_characters: bool = True
    strict: bool = True

    def character_classes(self) -> list[str]:
        """Return the enabled character classes as strings of candidate characters."""
        candidates = [
            (self.numbers, string.digits),
            (self.lowercase_letters, string.ascii_lowercase),
            (self.uppercase_letters, string.ascii_uppercase),
            (self.symbols, _SYMBOLS),
            (self.spaces, " "),
        ]

        classes: list[str] = []
        for enabled, chars in candidates:
            if not enabled:
                continue
            if self.exclude_similar_characters:
                chars = "".join(c for c in chars if c not in SIMILAR_CHARACTERS)
            classes.append(chars)
        return classes


DEFAULT_POLICY = PasswordPolicy()


def generate_password(length: int, policy: PasswordPolicy = DEFAULT_POLICY) -> str:
    """Generate a random password.

    Args:
        length: Number of characters in the password.
        policy: Character classes and guarantees to apply.

    Returns:
        A password of exactly ``length`` characters.

    Raises:
        GenerationError: If no character class is enabled, or the policy is
            strict and ``length`` is shorter than the number of classes.

    """
    classes = policy.character_classes()
    if not classes:
        raise GenerationError("At least one character class must be enabled to generate a password")

    if length < 0:
        raise GenerationError(f"Password length cannot be negative, got {length}")

    if policy.strict and length < len(classes):
        raise GenerationError(
            f"A password of length {length} cannot contain a character from each of the "
            f"{len(classes)} required character classes"
        )

    pool = "".join(classes)
    chars = [_random.choice(chars) for chars in classes] if policy.strict else []
    chars.extend(_random.choice(pool) for _ in range(length - len(chars)))
    _random.shuffle(chars)
    return "".join(chars)
