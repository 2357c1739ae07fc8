"""Alpha plugin."""

NAME = "alpha"
ORDER = 1


def run(value: int) -> int:
    return value + ORDER
