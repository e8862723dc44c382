"""Stack-based algorithms: brackets, expressions, paths and monotonic stacks."""

from __future__ import annotations

import re
from collections.abc import Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPERATORS = frozenset("+-*/")
_CALC_LEXEME = re.compile(r"\d+|[-+()]")


def is_valid(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Any character that does not close the bracket on top of the stack is
    pushed, so characters other than brackets make the string invalid.
    """
    stack: list[str] = []
    for ch in s:
        if stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def max_depth(s: str) -> int:
    """Return the deepest nesting of parentheses in ``s``."""
    depth = 0
    deepest = 0
    for ch in s:
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                raise ValueError("unbalanced ')' in expression")
            deepest = max(deepest, depth)
            depth -= 1
    return deepest


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minimums: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        self._items.append(val)
        if not self._minimums or val <= self._minimums[-1]:
            self._minimums.append(val)

    def pop(self) -> None:
        """Remove the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        value = self._items.pop()
        if value == self._minimums[-1]:
            self._minimums.pop()

    def top(self) -> int:
        """Return the top element."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest element on the stack."""
        if not self._minimums:
            raise IndexError("stack is empty")
        return self._minimums[-1]


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def eval_rpn(tokens: Sequence[str]) -> int:
    """Evaluate an integer expression in reverse Polish notation.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for item in tokens:
        if item in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {item!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            if item == "+":
                stack.append(left + right)
            elif item == "-":
                stack.append(left - right)
            elif item == "*":
                stack.append(left * right)
            else:
                stack.append(_truncating_div(left, right))
        else:
            stack.append(int(item))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def simplify_path(path: str) -> str:
    """Return the canonical form of a Unix-style absolute path."""
    parts: list[str] = []
    for part in path.split("/"):
        if part == "..":
            if parts:
                parts.pop()
        elif part and part != ".":
            parts.append(part)
    return "/" + "/".join(parts)


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, which may nest, in ``s``.

    Only digits, lower-case letters and square brackets are significant.
    """
    counts: list[int] = []
    prefixes: list[str] = []
    number = 0
    current = ""
    for ch in s:
        if "0" <= ch <= "9":
            number = number * 10 + int(ch)
        elif "a" <= ch <= "z":
            current += ch
        elif ch == "[":
            counts.append(number)
            prefixes.append(current)
            number = 0
            current = ""
        elif ch == "]":
            if not counts:
                raise ValueError("unbalanced ']' in encoded string")
            current = prefixes.pop() + current * counts.pop()
    return current


def calculate(s: str) -> int:
    """Evaluate an expression of integers, ``+``, ``-`` and parentheses."""
    stack: list[tuple[int, int]] = []
    result = 0
    sign = 1
    for lexeme in _CALC_LEXEME.findall(s):
        if lexeme == "-":
            sign = -1
        elif lexeme == "+":
            sign = 1
        elif lexeme == "(":
            stack.append((result, sign))
            result = 0
            sign = 1
        elif lexeme == ")":
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            outer, sign = stack.pop()
            result = outer + result * sign
        else:
            result += sign * int(lexeme)
    return result


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed parenthesis substring.

    Every character other than ``(`` counts as a closing parenthesis.
    """
    open_positions: list[int] = []
    start = 0
    longest = 0
    for index, ch in enumerate(s):
        if ch == "(":
            open_positions.append(index)
        elif not open_positions:
            start = index + 1
        else:
            open_positions.pop()
            left = open_positions[-1] + 1 if open_positions else start
            longest = max(longest, index - left + 1)
    return longest


def final_prices(prices: Sequence[int]) -> list[int]:
    """Apply to each price the discount of the next price not above it."""
    stack: list[int] = []
    result = [0] * len(prices)
    for index in reversed(range(len(prices))):
        price = prices[index]
        while stack and price < stack[-1]:
            stack.pop()
        result[index] = price - stack[-1] if stack else price
        stack.append(price)
    return result


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, count the days until a warmer one; 0 if none comes."""
    stack: list[int] = []
    result = [0] * len(temperatures)
    for index in reversed(range(len(temperatures))):
        temperature = temperatures[index]
        while stack and temperature >= temperatures[stack[-1]]:
            stack.pop()
        if stack:
            result[index] = stack[-1] - index
        stack.append(index)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle in a histogram."""
    padded = [0, *heights, 0]
    stack: list[int] = []
    best = 0
    for index, height in enumerate(padded):
        while stack and height < padded[stack[-1]]:
            bar = padded[stack.pop()]
            width = index - stack[-1] - 1
            best = max(best, width * bar)
        stack.append(index)
    return best


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``height`` holds."""
    stack: list[int] = []
    water = 0
    for index, level in enumerate(height):
        while stack and height[stack[-1]] < level:
            bottom = height[stack.pop()]
            if not stack:
                break
            left = stack[-1]
            depth = min(height[left], level) - bottom
            water += (index - left - 1) * depth
        stack.append(index)
    return water