class ContractViolation(Exception):
    """Caller broke an invariant of the permutation engine or a container."""


class SwapRangeError(ContractViolation, IndexError):
    pass


class SizeMismatchError(ContractViolation, ValueError):
    pass


def check_positions(a: int, b: int, length: int) -> None:
    if not (0 <= a < length and 0 <= b < length):
        raise SwapRangeError(
            f"cannot swap positions {a} and {b} in a container of length "
            f"{length}"
        )


class UnstableGraphemeError(ContractViolation, ValueError):
    """Two grapheme clusters fuse into one when placed next to each other."""
