"""Beta plugin."""

NAME = "beta"
ORDER = 2


def run(value: int) -> int:
    return value * ORDER
