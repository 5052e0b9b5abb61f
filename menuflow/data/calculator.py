from typing import List

from menuflow.domain.directors import back, branch_on_int, next_state, stop
from menuflow.execution.console import Console
from menuflow.formatting.colorizer import Effect, Fg, colorize

# Object store key for the most recent result of any operation
LAST_RESULT = "last_result"

MAIN_MENU = ["Addition", "Subtraction", "Multiplication", "Fibonacci"]


def fibonacci(n: int) -> List[int]:
    """Returns [F(0), F(1), ..., F(n)]."""
    sequence = [0, 1]
    for _ in range(2, n + 1):
        sequence.append(sequence[-1] + sequence[-2])
    return sequence[: n + 1]


# ==============================================================================
# ACTIONS
# ==============================================================================


def main_menu(cns: Console) -> None:
    cns.print_menu(MAIN_MENU, title="Hello please choose an option:")
    cns.prompt("Your choice: ")


def _binary_operation(cns: Console, symbol: str, operation) -> None:
    x = cns.read_int("Enter number #1: ")
    y = cns.read_int("Enter number #2: ")
    result = operation(x, y)
    cns.print(f"{x} {symbol} {y} = {result}")
    cns.store.store(LAST_RESULT, result)


def add(cns: Console) -> None:
    _binary_operation(cns, "+", lambda x, y: x + y)


def sub(cns: Console) -> None:
    _binary_operation(cns, "-", lambda x, y: x - y)


def mul(cns: Console) -> None:
    _binary_operation(cns, "*", lambda x, y: x * y)


def fibo_menu(cns: Console) -> None:
    cns.prompt("Do you want to see all steps (0 for no, 1 for yes): ")


def fibo_last(cns: Console) -> None:
    n = cns.read_int("Enter number: ", minimum=2)
    result = fibonacci(n)[-1]
    cns.print(f"Fibonacci({n}) = {result}")
    cns.store.store(LAST_RESULT, result)


def fibo_all(cns: Console) -> None:
    n = cns.read_int("Enter number: ", minimum=2)
    sequence = fibonacci(n)
    for index, value in enumerate(sequence):
        cns.print(f"Fibonacci({index}) = {value}")
    cns.store.store(LAST_RESULT, sequence[-1])


# ==============================================================================
# CALLBACKS
# ==============================================================================


def farewell(cns: Console) -> None:
    if LAST_RESULT in cns.store:
        cns.print(f"Last result: {cns.store.get(LAST_RESULT, int)}")
    cns.print(colorize("Thanks for using this program!", Effect.BOLD, Fg.GREEN))


def input_closed(cns: Console) -> None:
    cns.print()
    cns.print("Input closed, stopping early.")


# ==============================================================================
# PROGRAM
# ==============================================================================


def build_calculator(console: Console) -> Console:
    """
    Registers the calculator states on `console`.

    menu -> add (goes back to the menu), sub (returns to the menu),
            mul (ends), fibo -> fibo_last / fibo_all (both end)
    """
    console.exit_callback = farewell
    console.terminate_callback = input_closed

    return (
        console
        .register("menu", main_menu, branch_on_int(1, 4, ["add", "sub", "mul", "fibo"]))
        .register("add", add, back(1))
        .register("sub", sub, next_state("menu"))
        .register("mul", mul, stop())
        .register("fibo", fibo_menu, branch_on_int(0, 1, ["fibo_last", "fibo_all"]))
        .register("fibo_last", fibo_last, stop())
        .register("fibo_all", fibo_all, stop())
    )
