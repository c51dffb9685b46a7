# cli.py
import logging
from typing import Callable, Optional

from avltree.avl_tree import AVLTree, InvalidArgument, RotationEvent, Traversal
from avltree.config import DEFAULT_RANGE, LOGGING_CONFIG, TRAVERSAL_SEPARATOR

MENU_OPTIONS = [
    "1. Create a binary search tree",
    "2. Add a node",
    "3. Delete a node",
    "4. Print nodes (InOrder)",
    "5. Print nodes (PreOrder)",
    "6. Print nodes (PostOrder)",
    "7. Exit program",
]

TRAVERSAL_CHOICES = {
    "4": Traversal.IN_ORDER,
    "5": Traversal.PRE_ORDER,
    "6": Traversal.POST_ORDER,
}


class TreeMenu:
    """Text menu over a single AVLTree.

    ``input_fn`` and ``print_fn`` default to the builtins and are swapped out
    in tests.
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        print_fn: Optional[Callable[..., None]] = None,
    ):
        self.input_fn = input_fn or input
        self.print_fn = print_fn or print
        self.tree: AVLTree[int] = AVLTree(on_rotate=self.report_rotation)

    def report_rotation(self, event: RotationEvent) -> None:
        self.print_fn(
            f"Rebalancing tree by rotating nodes around {event.key} "
            f"to the {event.direction.value}..."
        )

    def read_int(self, prompt: str) -> Optional[int]:
        raw = self.input_fn(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            self.print_fn(f"'{raw}' is not an integer.")
            return None

    def create_tree(self) -> None:
        min_value, max_value = DEFAULT_RANGE
        try:
            self.tree = AVLTree.from_inclusive_range(
                min_value, max_value, on_rotate=self.report_rotation
            )
        except InvalidArgument as e:
            self.print_fn(f"Error creating tree: {e}")
            return
        self.print_fn(
            f"\nBalanced tree created with values from {min_value} to {max_value}"
        )

    def add_node(self) -> None:
        key = self.read_int("Enter an integer to add: ")
        if key is None:
            return
        if self.tree.contains(key):
            self.print_fn(f"{key} is already in the tree.")
            return
        self.tree.add(key)
        self.print_fn(f"Added {key}.")

    def delete_node(self) -> None:
        key = self.read_int("Enter an integer to delete: ")
        if key is None:
            return
        if not self.tree.contains(key):
            self.print_fn(f"{key} is not in the tree.")
            return
        self.tree.delete(key)
        self.print_fn(f"Deleted {key}.")

    def print_traversal(self, order: Traversal) -> None:
        if self.tree.is_empty():
            self.print_fn("The tree is empty.")
            return
        keys = self.tree.traverse(order)
        self.print_fn(TRAVERSAL_SEPARATOR.join(str(k) for k in keys))

    def show_menu(self) -> str:
        self.print_fn("\n=== Binary Search Tree CLI ===")
        for option in MENU_OPTIONS:
            self.print_fn(option)
        return self.input_fn("Enter your choice: ").strip()

    def run(self) -> None:
        while True:
            try:
                choice = self.show_menu()
            except EOFError:
                choice = "7"

            try:
                if choice == "1":
                    self.create_tree()
                elif choice == "2":
                    self.add_node()
                elif choice == "3":
                    self.delete_node()
                elif choice in TRAVERSAL_CHOICES:
                    self.print_traversal(TRAVERSAL_CHOICES[choice])
                elif choice == "7":
                    self.print_fn("\nExiting...")
                    return
                else:
                    self.print_fn("Invalid choice. Please try again.")
            except EOFError:
                self.print_fn("\nExiting...")
                return
            except Exception as e:
                logging.error(f"Menu action {choice} failed: {e}")


def main():
    logging.basicConfig(**LOGGING_CONFIG)
    TreeMenu().run()


if __name__ == "__main__":
    main()
