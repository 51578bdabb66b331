# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no dependencies outside the standard library.

## What is inside

| Module               | Contents                                                                      |
|----------------------|-------------------------------------------------------------------------------|
| `dsakit.avl`         | `AVLTree`: a self-balancing search tree of unique keys                        |
| `dsakit.bst`         | `BinarySearchTree`: an unbalanced search tree of unique values                |
| `dsakit.binary_tree` | `TreeNode` plus counting, height, traversal and search-tree building helpers  |
| `dsakit.queues`      | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `QueueOverflow`, `QueueUnderflow` |
| `dsakit.stacks`      | `ArrayStack`, `LinkedStack`, `StackOverflow`, `StackUnderflow`                |
| `dsakit.infix`       | `infix_to_postfix`, `precedence`, `is_operand`                                |
| `dsakit.accounts`    | `Account`, `SavingsAccount`, `CurrentAccount`, `InsufficientFunds`            |

## Installation

```console
pip install .
```

For running the tests:

```console
pip install ".[test]"
pytest
```

## Usage

### AVL tree

`AVLTree` ignores duplicate inserts and removals of absent keys.
`height_of(key)` returns the height of the subtree rooted at `key` (a leaf
has height 1) and raises `KeyError` if the key is absent.

```python
from dsakit.avl import AVLTree

tree = AVLTree()
for key in (20, 4, 15, 70, 50, 100, 80):
    tree.insert(key)

print(tree.in_order())     # keys in ascending order
print(tree.height_of(70))
tree.remove(70)
print(70 in tree, len(tree))
```

### Binary search tree

```python
from dsakit.bst import BinarySearchTree

bst = BinarySearchTree([6, 4, 125, 22, 23, 21, 68, 21, 66])
print(bst.inorder())       # duplicates are stored once
print(bst.search(26))      # False
bst.remove(22)
print(list(bst), len(bst))
```

### Binary tree helpers

`dsakit.binary_tree` works on plain `TreeNode(value, left, right)` nodes.
`bst_insert` and `build_bst` put values equal to a node into its right
subtree, so duplicates are kept.

```python
from dsakit.binary_tree import (
    TreeNode, build_bst, count_nodes, count_full_nodes, count_leaves,
    count_degree_one, total_value, height, level_order,
    preorder, inorder, postorder,
)

root = build_bst([5, 3, 8, 1, 4])
print(inorder(root), preorder(root), postorder(root), level_order(root))
print(count_nodes(root), count_leaves(root), height(root), total_value(root))
```

### Stacks

`ArrayStack(size)` holds at most `size` values and raises `StackOverflow`
when full; both stacks raise `StackUnderflow` when popped empty.
`ArrayStack.peek(pos)` returns the value `pos` places from the top (1 is the
top) and raises `IndexError` for a position outside the stack. Iterating a
stack goes from top to bottom.

```python
from dsakit.stacks import ArrayStack, LinkedStack

stack = ArrayStack(5)
stack.push(10)
stack.push(20)
print(stack.peek(1), stack.pop(), stack.is_empty(), stack.is_full())

linked = LinkedStack([1, 2, 3])
print(linked.peek(), list(linked))   # 3 [3, 2, 1]
```

### Queues

- `ArrayQueue(size=10)` hands out each of its `size` slots only once: after
  `size` enqueues it raises `QueueOverflow`, even if values were dequeued.
- `CircularQueue(size=10)` is a ring buffer holding at most `size - 1` values.
- `LinkedQueue()` is unbounded.

All three raise `QueueUnderflow` when dequeued empty.

```python
from dsakit.queues import CircularQueue

queue = CircularQueue(10)
for value in (10, 20, 30):
    queue.enqueue(value)
print(queue.dequeue(), list(queue), len(queue))
```

### Infix to postfix

Operands are single characters; `+ - * /` are the only operators and there
is no support for parentheses.

```python
from dsakit.infix import infix_to_postfix

print(infix_to_postfix("a+b*c"))  # abc*+
```

### Accounts

`withdraw` raises `InsufficientFunds` when the amount exceeds the balance
(or, for `CurrentAccount`, the balance plus the overdraft limit).
`add_interest` credits `balance * rate / 100` and returns the interest.

```python
from dsakit.accounts import SavingsAccount, CurrentAccount, InsufficientFunds

savings = SavingsAccount("Alice", 5000, 5)
savings.deposit(1000)
savings.withdraw(2000)
savings.add_interest()
print(savings.describe())

current = CurrentAccount("Bob", 3000, 1000)
try:
    current.withdraw(5000)
except InsufficientFunds as exc:
    print(exc)
```

## Command-line demos

```console
dsakit-avl        # builds an AVL tree, prints it, deletes 70
dsakit-bst        # builds a search tree, searches for 26, deletes 22
dsakit-accounts   # a short session on a savings and a current account
dsakit-infix      # prints the postfix form of a+b*c
dsakit-tree       # statistics and traversals of a sample tree
dsakit-tree 5 3 8 # the same for a search tree built from integers
```

## What it does not do

The package offers no interactive prompts or menus: containers are driven
from Python code, and the commands above only print fixed demonstrations.
Accounts live in memory only; nothing is stored between runs.