"""A binary decision tree that plays a branching story."""

from __future__ import annotations

import sys
from typing import Callable, Optional

from .story import Node, Story, parse_story_line

MAX_EVENT = 16

Reader = Callable[[], str]
Writer = Callable[[str], object]


def _path(event_number: int) -> Optional[str]:
    """Left/right steps ('0'/'1') from the root to an event's position."""
    if not 1 <= event_number <= MAX_EVENT:
        return None
    return bin(event_number)[3:]


def _token(read: Reader) -> str:
    while True:
        words = read().split()
        if words:
            return words[0]


def _read_int(read: Reader) -> Optional[int]:
    try:
        return int(_token(read))
    except ValueError:
        return None


class GameDecisionTree:
    """Story events placed by number: event n has children 2n and 2n + 1."""

    def __init__(self) -> None:
        self.root: Optional[Node[Story]] = None
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def _walk(self, path: str, event_number: int) -> Node[Story]:
        node = self.root
        for step in path:
            if node is None:
                break
            node = node.left if step == "0" else node.right
        if node is None:
            raise LookupError(f"event {event_number} is not in the story")
        return node

    def add_story_node(self, story: Story) -> Node[Story]:
        """Place a story event in the tree and return its node.

        The first event becomes the root. Later events numbered 2 to 16 go
        to their fixed position; other numbers are counted but not placed.
        """
        node = Node(story)
        if self.root is None:
            self.root = node
        else:
            path = _path(story.event_number)
            if path:
                parent = self._walk(path[:-1], story.event_number)
                if path[-1] == "0":
                    parent.left = node
                else:
                    parent.right = node
        self._length += 1
        return node

    def node_at(self, event_number: int) -> Node[Story]:
        """Return the node at the position of the given event number."""
        path = _path(event_number)
        if path is None:
            raise LookupError(f"event {event_number} is outside 1..{MAX_EVENT}")
        return self._walk(path, event_number)

    def describe(self, event_number: int) -> str:
        """Return the event's number and description as shown to the player."""
        story = self.node_at(event_number).data
        return f"{story.event_number} {story.description}"

    def load_story_from_file(self, filename: str, delimiter: str = "|") -> None:
        """Read one event per line and add each to the tree."""
        with open(filename, encoding="utf-8") as file:
            for line in file:
                self.add_story_node(parse_story_line(line.rstrip("\n"), delimiter))

    def _show(self, write: Writer, event_number: int) -> None:
        write(self.describe(event_number) + "\n")

    def _offer(self, write: Writer, first: int, second: int,
               show_first: bool = True, show_second: bool = True) -> None:
        if show_first:
            write("What do you do?\n")
            self._show(write, first)
        if show_second:
            write("Or\n")
            self._show(write, second)

    @staticmethod
    def _choose(read: Reader, write: Writer, options: set[int]) -> int:
        while True:
            choice = _read_int(read)
            if choice in options:
                return choice
            write("Invalid input! Please try again!\n")

    def _play_round(self, read: Reader, write: Writer) -> None:
        write("Welcome to my adventure fellow programmer!\n\n")
        self._show(write, 1)
        self._offer(write, 2, 3)
        choice = self._choose(read, write, {2, 3})

        if choice == 2:
            self._offer(write, 4, 5, len(self) >= 4, len(self) >= 5)
            choice = self._choose(read, write, {4, 5})
            if choice == 4:
                self._offer(write, 8, 9, len(self) >= 4, len(self) >= 5)
                choice = self._choose(read, write, {8, 9})
                self._show(write, 16 if choice == 8 else 9)
            else:
                self._show(write, 5)
        else:
            self._offer(write, 6, 7)
            choice = self._choose(read, write, {6, 7})
            self._show(write, choice)

        write("\nYou have determined your ending! Good Job!\n")

    def play_game(self, read: Optional[Reader] = None,
                  write: Optional[Writer] = None) -> None:
        """Play a round, then offer to play again until the player declines."""
        read = read or input
        write = write or sys.stdout.write
        self._play_round(read, write)
        self.play_again(read, write)

    def play_again(self, read: Optional[Reader] = None,
                   write: Optional[Writer] = None) -> None:
        """Ask whether to play again; 'y' plays another round, 'n' stops."""
        read = read or input
        write = write or sys.stdout.write
        while True:
            write("Do you want to play again?(y/n) \n")
            answer = _token(read)
            if answer == "y":
                write("Awesome! Try another path if you'd like!\n\n")
                self._play_round(read, write)
            elif answer == "n":
                write("Until next Time\n")
                return
            else:
                write("try again\nEnter a y or n \n")