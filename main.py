import os
import sys

from classifiers.line_relationship import analyze_line_set, classify_relationship
from classifiers.quadrilateral_classifier import classify_quadrilateral
from models.errors import GeometryError, LineDataError
from models.line import Line
from utils.data_io import load_line_sets
from visualization.render import render_quadrilateral, render_relationship
from visualization.reports import (
    format_line_set_report,
    format_line_sets,
    format_quadrilateral,
    format_relationship,
)

from config import LINES_DATA_PATH, LINES_PER_SET


# ------------------------------
# SCREEN HELPERS
# ------------------------------

def clear_screen():
    os.system("cls" if os.name == "nt" else "clear")


def display_header(title: str):
    clear_screen()
    print("=" * 34)
    print(f"{'':10}{title}")
    print("=" * 34 + "\n")


def pause_screen(input_fn=input):
    input_fn("\nPress Enter to continue...")


# ------------------------------
# INPUT VALIDATION
# ------------------------------

def get_valid_integer(prompt: str = "", input_fn=input) -> int:
    """
    Keeps asking until the answer is exactly one integer.
    """
    while True:
        raw = input_fn(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            prompt = "Invalid input. Please enter a number: "


def get_valid_coefficient(prompt: str = "", input_fn=input) -> float:
    """
    Integer coefficient, returned as a float. Integers too large for a
    float are refused and asked again.
    """
    while True:
        value = get_valid_integer(prompt, input_fn)
        try:
            return float(value)
        except OverflowError:
            print("[ERROR] That number is too large. Please enter a smaller one.")


def get_choice(prompt: str, low: int, high: int, input_fn=input, exclude=None) -> int:
    """
    Integer in [low, high], optionally different from 'exclude'.
    """
    while True:
        value = get_valid_integer(prompt, input_fn)
        if low <= value <= high and value != exclude:
            return value
        if exclude is not None:
            print(f"Invalid choice! Please choose a different number between {low} and {high}")
        else:
            print(f"Invalid choice! Please choose between {low} and {high}")


def get_line_from_user(name: str, input_fn=input) -> Line:
    print(f"\nEnter coefficients for {name} (ax + by = c):")

    while True:
        a = get_valid_coefficient("Enter a: ", input_fn)
        b = get_valid_coefficient("Enter b: ", input_fn)

        if a == 0 and b == 0:
            print("[ERROR] Both a and b cannot be zero. Please enter valid coefficients.")
            continue

        c = get_valid_coefficient("Enter c: ", input_fn)
        return Line(a, b, c)


def ask_next_step(repeat_label: str, input_fn=input) -> int:
    """
    1 = repeat, 2 = back to main menu, 3 = exit program
    """
    print("\nWhat would you like to do?")
    print(f"1. {repeat_label}")
    print("2. Return to main menu")
    print("3. Exit program")
    return get_choice("\nChoice: ", 1, 3, input_fn)


# ------------------------------
# RESULT VIEWS
# ------------------------------

def show_relationship(line1: Line, line2: Line):
    result = classify_relationship(line1, line2)
    print(format_relationship(result))
    print()
    print(render_relationship(line1, line2, result=result).display())


def show_shape(lines):
    """
    Prints the line facts, the shape verdict and the ASCII render
    for one set of lines.
    """
    try:
        result = classify_quadrilateral(lines)
    except GeometryError as exc:
        print(f"[ERROR] {exc}")
        return

    print(f"Analyzing the shape formed by these {LINES_PER_SET} lines...\n")
    print(format_line_set_report(analyze_line_set(lines)))
    print()
    print(format_quadrilateral(result))
    print()
    print(render_quadrilateral(lines, result=result).display())


# ------------------------------
# MENUS
# (each returns True when the user chose to exit the program)
# ------------------------------

def compare_lines_menu(line_sets, input_fn=input) -> bool:
    while True:
        display_header("Compare Lines")
        print(format_line_sets(line_sets))

        set_no = get_choice(f"Choose a set of lines (1-{len(line_sets)}): ", 1, len(line_sets), input_fn)
        first = get_choice(f"Choose first line to compare (1-{LINES_PER_SET}): ", 1, LINES_PER_SET, input_fn)
        second = get_choice(
            f"Choose second line to compare (1-{LINES_PER_SET}): ", 1, LINES_PER_SET, input_fn, exclude=first
        )

        display_header("Line Comparison Results")
        lines = line_sets[set_no - 1]
        show_relationship(lines[first - 1], lines[second - 1])

        option = ask_next_step("Compare more lines", input_fn)
        if option == 2:
            return False
        if option == 3:
            return True


def show_shapes_menu(line_sets, input_fn=input) -> bool:
    while True:
        display_header("Shape Analysis")
        print(format_line_sets(line_sets))

        set_no = get_choice(f"Choose a set of lines (1-{len(line_sets)}): ", 1, len(line_sets), input_fn)

        display_header("Shape Analysis Results")
        show_shape(line_sets[set_no - 1])

        option = ask_next_step("Analyze another shape", input_fn)
        if option == 2:
            return False
        if option == 3:
            return True


def compare_custom_lines_menu(input_fn=input) -> bool:
    while True:
        display_header("Compare Custom Lines")

        line1 = get_line_from_user("first line", input_fn)
        line2 = get_line_from_user("second line", input_fn)

        display_header("Line Comparison Results")
        show_relationship(line1, line2)

        option = ask_next_step("Compare more lines", input_fn)
        if option == 2:
            return False
        if option == 3:
            return True


def create_custom_shape_menu(input_fn=input) -> bool:
    while True:
        display_header("Create Custom Shape")
        print(f"Enter coefficients for {LINES_PER_SET} lines to create a quadrilateral.")

        lines = [get_line_from_user(f"line {i}", input_fn) for i in range(1, LINES_PER_SET + 1)]

        display_header("Shape Analysis Results")
        show_shape(lines)

        option = ask_next_step("Create another shape", input_fn)
        if option == 2:
            return False
        if option == 3:
            return True


def run(line_sets, input_fn=input) -> int:
    """
    Main menu loop. Returns the process exit status.
    """
    while True:
        display_header("Main Menu")
        print("1. Compare Lines from File")
        print("2. Show Shapes from File")
        print("3. Compare Custom Lines")
        print("4. Create and Analyze Custom Shape")
        print("5. Exit")

        option = get_valid_integer("\nChoose an option: ", input_fn)

        quit_requested = False
        match option:
            case 1 | 2 if not line_sets:
                print("[WARN] No line sets were loaded from the data file.")
                pause_screen(input_fn)
            case 1:
                quit_requested = compare_lines_menu(line_sets, input_fn)
            case 2:
                quit_requested = show_shapes_menu(line_sets, input_fn)
            case 3:
                quit_requested = compare_custom_lines_menu(input_fn)
            case 4:
                quit_requested = create_custom_shape_menu(input_fn)
            case 5:
                quit_requested = True
            case _:
                print("Invalid option. Please choose again.")
                pause_screen(input_fn)

        if quit_requested:
            print("Thank you for using the program!")
            return 0


def main(data_path: str = LINES_DATA_PATH) -> int:
    """
    Main entry point:
      - Loads the line sets
      - Runs the interactive menu
    """
    try:
        line_sets = load_line_sets(data_path)
    except LineDataError as exc:
        print(f"[ERROR] {exc}")
        return 1

    print(f"[OK] Loaded {len(line_sets)} line set(s) from {data_path}")
    return run(line_sets)


if __name__ == "__main__":
    sys.exit(main())
