# practicekit

Small programming exercises as a Python library, plus a command that runs a
few of them interactively. It needs nothing beyond the standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Library

### `practicekit.arrays`

- `missing_number(nums)`: the value of `0..len(nums)` absent from `nums`.
- `find_max_consecutive_ones(nums)`: the longest run of 1s; only a 0 breaks a
  run.
- `search_range(nums, target)`: a `(first, last)` tuple of indices of
  `target`. Any element before the first match resets both to -1, and with a
  single match the second index keeps whatever it held before.
- `search_insert(nums, target)`: the index of `target` in a sorted list, or
  where it would be inserted.
- `rotate(nums, k)`: rotates the list right by `k` places, in place.
- `plus_one(digits)`: a new list of decimal digits for the number plus one.
- `remove_element(nums, val)`: how many elements differ from `val`.
- `set_zeroes(matrix)`: zeroes, in place, every row and column holding a 0.
- `is_rotated_sorted(nums)`: whether the list is a rotated non-decreasing list.
- `sort_colors(nums)`: sorts the list ascending, in place.
- `final_value_after_operations(operations)`: applies `X++`/`++X` and
  `X--`/`--X` to a counter starting at 0; other strings are ignored.

### `practicekit.strings`

- `str_str(haystack, needle)`: index of the first occurrence of `needle`, or
  -1 (also -1 for an empty needle).
- `length_of_last_word(s)`: length of the last space-separated word.
- `longest_common_prefix(strs)`: the prefix shared by all strings.
- `roman_to_int(s)`: value of a Roman numeral in either case; any other
  character raises `InvalidRomanNumeral` (a `ValueError`).
- `substitute(message)`: encrypts letters with the fixed key `KEY` over
  `ALPHABET`; other characters pass through unchanged.

### `practicekit.numbers`

- `climb_stairs(n)`: ways to climb `n` steps one or two at a time; negative
  `n` raises `ValueError`.
- `is_palindrome(x)`: whether the decimal digits read the same both ways;
  negative numbers are not palindromes.
- `celsius_to_fahrenheit(celsius)`: whole-degree conversion, truncating
  toward zero.
- `double_and_sum(num1, num2)`: sets the first number to twice the second,
  adds it to the second, and returns both.
- `numbers_equal(num1, num2)`.
- `make_change(cents)`: a `Change` with `dollars`, `quarters`, `dimes`,
  `nickels` and `pennies`.
- `estimate_cleaning(small_rooms, large_rooms)`: a `CleaningEstimate` with
  `cost`, `tax` and `total`, using `PRICE_PER_SMALL_ROOM` (25),
  `PRICE_PER_LARGE_ROOM` (35) and `TAX_RATE` (0.06).

### `practicekit.patterns`

Each function returns a string, one line per row, every line ending in a
newline: `hollow_square(size)`, `filled_square(size)`,
`number_triangle(size)`, `reverse_triangle(size)`, `right_triangle(size)` and
`mirrored_pyramid(text)`.

### `practicekit.account`

`Account(name="None", balance=0.0)` with `deposit(amount)` and
`withdraw(amount)`, each returning the new balance. A withdrawal larger than
the balance raises `InsufficientBalance` (a `ValueError`).

### `practicekit.employees`

- `Employee(emp_id, name, salary)`.
- `format_employee(employee)`: a three-line description, salary to two
  decimals.
- `total_expenditure(employees)`: the salaries summed, the running total
  truncated to whole units after each addition.
- `highest_salary(employees)`: the last employee who earns more than the one
  before, else the first; `None` for an empty list.
- `sort_by_salary(employees)`: a new list, highest salary first, ties in
  their original order.
- `read_employees(lines, count)`: reads `count` employees, each from an ID
  line, a name line and a salary line; missing or malformed lines raise
  `ValueError`.

### `practicekit.cli`

`vectors_demo()` returns the report showing that rows copied into a nested
list do not change when the original list does. `main(argv=None)` runs the
command below.

## Example

```python
from practicekit.strings import roman_to_int
from practicekit.numbers import make_change
from practicekit.patterns import hollow_square

roman_to_int("MCMXCIV")   # 1994
make_change(92)           # Change(dollars=0, quarters=3, dimes=1, nickels=1, pennies=2)
print(hollow_square(3))
```

## Command line

    practicekit vectors
    practicekit account
    practicekit employees

- `vectors` prints the report of `vectors_demo()`.
- `account` reads an account name and an opening balance from standard input,
  then menu choices: 1 to deposit, 2 to withdraw, 3 to show the balance, 4 to
  quit. The session ends at choice 4 or at the end of input.
- `employees` reads the number of employees, then an ID, a name and a salary
  line for each, and prints the total expenditure, the top earner and all
  employees sorted by salary.

Bad input prints `error: ...` to standard error and exits with status 1.

## What it does not do

Nothing is stored: the account and the employee register live only for one
run of the command.