# storypath

storypath is a small text adventure for the console. It reads story events
from a text file and places them in a binary decision tree. It then walks
through that tree with you. At each step you pick one of two event numbers.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Story file format

Each line of the story file describes one event. A line has four fields,
separated by `|` by default:

    <event number>|<description>|<left event number>|<right event number>

For example:

    1|You wake up in a dark forest.|2|3
    2|Follow the river downstream.|4|5
    3|Climb the nearest hill.|6|7

Fields after the fourth are ignored. If a number field is missing or does
not start with an integer, loading fails with `ValueError`. Blank lines are
not skipped, so they also cause this error.

Events are placed by number. The first line loaded becomes the root. After
that, event `n` goes to the position whose left child is `2n` and whose
right child is `2n + 1`. Events 2 to 16 are placed at those positions.
Events with any other number are counted but are not placed in the tree. The
parent of an event has to be loaded before the event itself, otherwise
`LookupError` is raised.

## Playing

    storypath

With no argument the command reads `story.txt` in the current directory.
You can name a different story file, and `-d`/`--delimiter` sets a different
one-character field delimiter:

    storypath my_story.txt
    storypath my_story.txt --delimiter ';'

The game shows event 1 and the two choices that follow it. Type the number
of the choice you want. Any other answer prints
`Invalid input! Please try again!`. When you reach an ending, the game asks
`Do you want to play again?(y/n)`. Answer `y` to start another round or `n`
to stop.

If the file cannot be opened, the command prints `Couldn't open the file`
and exits with status 1. A malformed file, or a story that lacks an event
the game needs to show, is reported on standard error and also gives
status 1. When input ends (end of file), the game stops quietly.

## Using it from Python

    import sys
    from storypath.tree import GameDecisionTree

    game = GameDecisionTree()
    game.load_story_from_file("story.txt", "|")
    game.play_game(input, sys.stdout.write)

`play_game(read, write)` and `play_again(read, write)` take a `read`
callable that returns a line of input and a `write` callable that receives
output text, newlines included. When they are left out, `input` and
`sys.stdout.write` are used. Passing your own callables lets you run the
game with scripted input.

Other members of `GameDecisionTree`:

- `add_story_node(story)` places a `Story` in the tree and returns its `Node`.
- `node_at(event_number)` returns the node at an event's position. It raises
  `LookupError` for numbers outside 1 to 16 and for positions that are still
  empty.
- `describe(event_number)` returns the event's number and description,
  separated by a space.
- `len(game)` gives the number of events loaded.

`storypath.story` provides the `Story` and `Node` dataclasses, and
`parse_story_line(line, delimiter)`, which turns one line of a story file
into a `Story`.

## Limitations

The rounds follow a fixed shape. The left and right event numbers in the
file are stored on each `Story`, but they are not used to choose the next
event. A round offers 2 or 3, then 4 or 5 (after 2), 6 or 7 (after 3), and
8 or 9 (after 4). Choosing 8 shows event 16 as the ending. Choosing 5, 6, 7
or 9 shows that event again as the ending. Trees deeper than this, or with
events above 16, are not played.