"""Classic algorithm and data-structure exercises: linked lists, arrays, containers and tic-tac-toe."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "containers",
    "linked_list",
    "tictactoe",
]