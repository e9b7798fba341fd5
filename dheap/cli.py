import argparse
import sys

from dheap.dway_heap.dway_heap import KEY_MAX, KEY_MIN
from dheap.dway_heap.errors import HeapError
from dheap.logger import logger, setup_logging
from dheap.session.loader import ArrayFileError, is_number
from dheap.session.session import Session
from dheap.settings import MAX_ARRAYS, MAX_CAPACITY, MAX_DEGREE, MAX_LINE_LENGTH, Settings

MENU = """
Choose an operation:
1. Insert Key
2. Increase Key
3. Extract Max
4. Delete Key
5. Exit"""

INSERT, INCREASE, EXTRACT, DELETE, EXIT = range(1, 6)


class Console:
    """Line-oriented prompts over a pair of text streams."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def read(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def int_input(self, prompt: str, minimum: int, maximum: int) -> int:
        """Ask until the answer is an integer in ``[minimum, maximum]``."""
        while True:
            token = self.read(prompt)
            if is_number(token):
                number = int(token)
                if minimum <= number <= maximum:
                    return number
            self.write(
                f"Invalid input. Please enter a number between "
                f"{minimum} and {maximum}."
            )


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dheap",
        description="Build a d-ary max-heap from an array file and operate on it."
    )
    parser.add_argument('--file', type=str,
                        help="file with one whitespace-separated array of integers per line.")
    parser.add_argument('--array', type=positive_int,
                        help="1-based number of the array to build the heap from.")
    parser.add_argument('--degree', type=positive_int,
                        help="degree (d) of the heap.")
    parser.add_argument('--capacity', type=positive_int, default=MAX_CAPACITY,
                        help="maximum number of keys in the heap.")
    parser.add_argument('--unbounded', action='store_true',
                        help="let the heap grow without a capacity bound.")
    parser.add_argument('--max_arrays', type=positive_int, default=MAX_ARRAYS,
                        help="maximum number of arrays to read from the file.")
    parser.add_argument('--max_line_length', type=positive_int, default=MAX_LINE_LENGTH,
                        help="maximum number of characters on a line of the file.")
    parser.add_argument('--verbosity', type=int, choices=[0, 1, 2], default=1,
                        help='the logger level (0: NOTSET, 1: INFO, 2: DEBUG).')
    return parser


def _heap_is_empty(session: Session, console: Console) -> bool:
    if session.heap.is_empty():
        console.write("Heap is empty!")
        return True
    return False


def run_operation(session: Session, console: Console, choice: int) -> None:
    """Prompt for the arguments of one menu operation and apply it."""
    if choice == INSERT:
        key = console.int_input("Enter the key to insert: ", KEY_MIN, KEY_MAX)
        session.insert(key)
    elif choice == INCREASE:
        if _heap_is_empty(session, console):
            return
        index = console.int_input("Enter the index: ", 0, len(session.heap) - 1)
        key = console.int_input("Enter the new key: ", KEY_MIN, KEY_MAX)
        session.increase_key(index, key)
    elif choice == EXTRACT:
        if _heap_is_empty(session, console):
            return
        console.write(f"Extracted Max: {session.extract_max()}")
    elif choice == DELETE:
        if _heap_is_empty(session, console):
            return
        index = console.int_input(
            "Enter the index of the key to delete: ", 0, len(session.heap) - 1
        )
        console.write(f"Deleted Key: {session.delete(index)}")
    else:
        console.write("Invalid choice. Please try again.")


def run_menu(session: Session, console: Console) -> None:
    """Show the heap and the menu until the user picks Exit."""
    while True:
        console.write(
            f"\nYour array with the d={session.degree} is now heaped like this:"
        )
        console.write(session.heap.format())
        console.write(MENU)
        choice = console.int_input("Enter your choice: ", INSERT, EXIT)
        if choice == EXIT:
            console.write("Exiting program.")
            return
        try:
            run_operation(session, console, choice)
        except HeapError as e:
            logger.warning(f"[!] Rejected operation {choice}: {e}")
            console.write(f"Error: {e}")


def main(argv=None, stdin=None, stdout=None) -> int:
    args = build_parser().parse_args(argv)
    Settings.setup(args)
    setup_logging(args.verbosity)
    console = Console(stdin, stdout)

    try:
        path = args.file or console.read(
            "Enter the name of the file containing heap data: "
        )
        try:
            session = Session.from_file(
                path,
                capacity=Settings.capacity,
                max_arrays=Settings.max_arrays,
                max_line_length=Settings.max_line_length
            )
        except ArrayFileError as e:
            console.write(f"Error: {e}")
            return 1
        if not len(session):
            console.write(f"Error: no arrays found in {path}")
            return 1

        console.write("Available arrays:")
        for line in session.describe():
            console.write(line)

        number = args.array
        if number is None:
            number = console.int_input(
                f"\nSelect an array number (1 to {len(session)}): ", 1, len(session)
            )
        elif number > len(session):
            console.write(f"Error: there is no array {number}, the file has {len(session)}")
            return 2

        d = args.degree
        if d is None:
            d = console.int_input(
                "Enter the degree (d) of the heap (at least 1): ", 1, MAX_DEGREE
            )

        try:
            session.select(number, d)
        except ValueError as e:
            console.write(f"Error: {e}")
            return 1

        run_menu(session, console)
    except EOFError:
        console.write("\nEnd of input, exiting.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
