"""Integer puzzles: Fibonacci numbers and palindromic integers."""


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of n below 2 are returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def is_palindrome_number(x: int) -> bool:
    """Return True if the decimal digits of x read the same in both directions."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]