# algokit

A small collection of classic data structures written in plain Python with
no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.stack` | `ArrayStack` (fixed capacity), `LinkedStack`, `StackEmptyError`, `StackFullError` |
| `algokit.expressions` | `is_balanced`, `precedence`, `is_operand`, `infix_to_postfix`, `evaluate_postfix` |
| `algokit.queues` | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `QueueEmptyError`, `QueueFullError` |
| `algokit.binary_tree` | `TreeNode`, `build_tree`, recursive and iterative traversals, `level_order`, `height`, `count`, `sum_elements`, `leaf_count`, `degree2_count`, `internal_count`, `main` |
| `algokit.bst` | `BSTNode`, `BinarySearchTree` with insert, search and delete |
| `algokit.avl` | `AVLNode`, `AVLTree` with self-balancing insert and delete, `Rotation` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Stacks and queues raise exceptions instead of returning sentinel values:

```python
from algokit.stack import ArrayStack, StackFullError

stack = ArrayStack(2)
stack.push(10)
stack.push(20)
try:
    stack.push(30)
except StackFullError:
    print("stack is full")
print(stack.pop())  # 20
```

`ArrayStack.peek(i)` counts from the top, so `peek(1)` is the top element.
`ArrayQueue` uses each of its slots once: after `size` enqueues it is full
even if it has been emptied. `CircularQueue(size)` reuses freed slots but
holds at most `size - 1` elements.

Expression helpers work on single-character operands and the operators
`+ - * /`. `infix_to_postfix` handles expressions without parentheses;
`evaluate_postfix` takes single-digit operands and truncates division
toward zero:

```python
from algokit.expressions import infix_to_postfix, evaluate_postfix, is_balanced

infix_to_postfix("a+b*c-d/e")      # 'abc*+de/-'
evaluate_postfix("234*+82/-")      # 10
is_balanced("((a+b)*(c-d))")       # True
```

Binary trees are built from values in level order, with `-1` for a missing
child:

```python
from algokit.binary_tree import build_tree, inorder, level_order, height

root = build_tree([1, 2, 3, -1, -1, -1, -1])
inorder(root)       # [2, 1, 3]
level_order(root)   # [1, 2, 3]
height(root)        # 2
```

Search trees keep their keys ordered and ignore duplicates. `AVLTree`
reports the rotations each insert or delete performed:

```python
from algokit.avl import AVLTree

tree = AVLTree()
for key in (10, 20, 30, 25, 28, 27, 5):
    tree.insert(key)
print(tree.inorder())   # [5, 10, 20, 25, 27, 28, 30]
print(25 in tree)       # True
print(tree.rotations)
```

## Command line

```
algokit-tree 1 2 3 -1 -1 -1 -1
```

builds a binary tree from integers given in level order, where `-1` marks a
missing child, and prints its recursive, iterative and level-order
traversals together with the node count, height, sum of values and the
numbers of leaf, degree-2 and internal nodes. With no arguments the values
are read from standard input. Malformed or incomplete input is reported on
standard error with exit status 1.

## What it does not do

algokit provides only the structures listed above. It has no sorting
routines, no hash tables and no graph traversals, and nothing is stored
between runs.