# algokit

Compact solutions to classic algorithm problems. The package covers arrays,
strings, integer arithmetic, singly linked lists and binary trees. It is pure
Python and has no runtime dependencies.

## Installation

```
pip install .
```

To install the test tools as well and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.arrays`

- `search_insert(nums, target)`: the index of the first element of a sorted list that is not less than `target`, or `len(nums)` if every element is smaller.
- `binary_search(nums, target)`: an index of `target` in a sorted list, or `-1` if it is absent.
- `plus_one(digits)`: adds one to a number given as a list of decimal digits, most significant first, and returns a new list.
- `merge_sorted(nums1, m, nums2, n)`: merges the first `n` items of `nums2` into `nums1` in place. `nums1` holds `m` sorted items followed by room for `n` more. Raises `ValueError` for negative counts or when a list is too short.
- `pascal_triangle(num_rows)`: the first `num_rows` rows of Pascal's triangle.
- `max_profit(prices)`: the best profit from one buy followed by one sell (`0` if none is possible). Raises `ValueError` for an empty input.
- `single_number(nums)`: the value that appears once when every other value appears twice.
- `majority_element(nums)`: the value that occurs more than half the time. Raises `ValueError` for an empty input.
- `contains_duplicate(nums)`: whether any value repeats.
- `contains_nearby_duplicate(nums, k)`: whether two equal values stand at most `k` positions apart.
- `two_sum(nums, target)`: the first pair of indices whose values add up to `target`. If there is no such pair, a copy of `nums` is returned.

### `algokit.strings`

- `length_of_last_word(s)`: the length of the last space-separated word.
- `add_binary(a, b)`: the sum of two binary strings. Raises `ValueError` if an operand contains anything but `0` and `1`.
- `is_palindrome(s)`: compares only ASCII letters and digits and ignores case.
- `column_title(column_number)` and `column_number(title)`: convert between 1-based numbers and spreadsheet column labels (`1` ↔ `"A"`, `28` ↔ `"AB"`). `column_number` raises `ValueError` for anything but the uppercase letters `A` to `Z`.

### `algokit.arith`

- `int_sqrt(x)`: the integer square root, rounded down. Values up to 1 are returned unchanged.
- `climb_stairs(n)`: the number of ways to climb `n` steps taking 1 or 2 at a time (`0` for `n <= 0`).
- `reverse_bits(n)`: reverses the bits of an unsigned 32-bit value. Raises `ValueError` if `n` is outside that range.

### `algokit.linked_lists`

- `ListNode(val, next)`: a list node. Nodes compare by identity.
- `build_list(values)` builds a list and returns its head. `list_values(head)` returns its values and raises `ValueError` if the list has a cycle.
- `delete_duplicates(head)`: removes consecutive repeated values in place.
- `has_cycle(head)`: whether following `next` ever revisits a node.
- `get_intersection_node(head_a, head_b)`: the first node the two lists share, or `None`.

### `algokit.trees`

- `TreeNode(val, left, right)` and `build_tree(values)`, which takes a level-order list in which `None` marks a missing child.
- `inorder`, `preorder`, `postorder`: return the node values as lists.
- `is_same_tree(p, q)`, `is_balanced(root)`, `is_symmetric(root)`. An empty tree counts as balanced but not as symmetric.
- `max_depth(root)`, `min_depth(root)`: the number of nodes on the longest and shortest root-to-leaf paths.
- `has_path_sum(root, target_sum)`: whether some root-to-leaf path adds up to `target_sum`.
- `sorted_array_to_bst(nums)`: a height-balanced search tree built from a sorted list.

## Example

```python
from algokit.arrays import two_sum
from algokit.strings import column_title
from algokit.trees import build_tree, inorder, is_symmetric

two_sum([2, 7, 11, 15], 9)          # [0, 1]
column_title(701)                   # "ZY"

root = build_tree([1, 2, 2, 3, 4, 4, 3])
is_symmetric(root)                  # True
inorder(root)                       # [3, 2, 4, 1, 4, 2, 3]
```

## Scope

This is a library only. It provides no command-line program; use the
functions from Python code.