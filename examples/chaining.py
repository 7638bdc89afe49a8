"""
Chaining Example

This example demonstrates the two equivalent styles offered by stringpie:
free functions that take the sequence first, and chained methods on Strings.
"""

from stringpie import Strings, prefix, strings_only, to_upper, trim

names = ["Bob", "Sally", "John", "Jane"]

# Example 1: Free functions
short_names = strings_only(names, lambda s: len(s) <= 3)
print("SHORT NAMES:")
print(short_names)  # ['Bob']
print("\n" + "-" * 50 + "\n")

# Example 2: Chained methods
last_non_j = Strings(elements=names).without(prefix("J")).transform(to_upper()).last()
print("LAST NAME NOT STARTING WITH J, UPPERCASED:")
print(last_non_j)  # SALLY
print("\n" + "-" * 50 + "\n")

# Example 3: Defaults for empty results
raw = Strings.of("  kiwi ", " fig", "apple  ").transform(trim())
print("SHORTEST AFTER TRIM:")
print(raw.only(lambda s: len(s) < 3).first_or("<none>"))  # <none>
print(raw.min(), raw.max())  # apple kiwi
