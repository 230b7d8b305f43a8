"""
Morse code table registry.

Usage:
    from lighthouse_sim.characteristic.morse import get_morse, MORSE_CODES

    get_morse("U")   # "..-"
    print(MORSE_CODES.keys())  # Available characters
"""

# Global Morse table (character -> dot/dash string)
MORSE_CODES: dict[str, str] = {}

# Code used when a character has no entry ("A")
DEFAULT_MORSE = ".-"


def register_morse(char: str, code: str) -> None:
    """Register (or replace) a character in the global table."""
    MORSE_CODES[char] = code


def get_morse(char: str, table: dict[str, str] | None = None) -> str:
    """
    Look up the dot/dash code for a character.

    Tries the character as written, then upper-cased. Falls back to
    the code for "A" when neither is present.
    """
    codes = MORSE_CODES if table is None else table
    if char in codes:
        return codes[char]
    return codes.get(char.upper(), DEFAULT_MORSE)


def list_morse() -> list[str]:
    """Get list of all registered characters."""
    return list(MORSE_CODES.keys())


_BUILTINS: dict[str, str] = {
    # === Letters ===
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".",
    "F": "..-.", "G": "--.", "H": "....", "I": "..", "J": ".---",
    "K": "-.-", "L": ".-..", "M": "--", "N": "-.", "O": "---",
    "P": ".--.", "Q": "--.-", "R": ".-.", "S": "...", "T": "-",
    "U": "..-", "V": "...-", "W": ".--", "X": "-..-", "Y": "-.--",
    "Z": "--..",
    # === Digits ===
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
}

# Register all built-in characters on module import
for _char, _code in _BUILTINS.items():
    register_morse(_char, _code)
