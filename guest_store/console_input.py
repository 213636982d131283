"""
Typed console prompts.  Bad input is re-asked, never raised.

EOFError from input() is left to the caller so a closed stdin can end
the menu loop.
"""

_TRUE = {"y", "yes", "true", "1"}
_FALSE = {"n", "no", "false", "0"}


def read_line(prompt: str) -> str:
    return input(prompt)


def read_int(prompt: str) -> int:
    while True:
        raw = input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            print(f"\tEnter a whole number, not {raw!r}")


def read_bool(prompt: str) -> bool:
    while True:
        raw = input(prompt).strip().lower()
        if raw in _TRUE:
            return True
        if raw in _FALSE:
            return False
        print("\tEnter y or n")
