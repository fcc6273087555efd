#!/usr/bin/env python3
"""
Example script demonstrating the usage of ArgStore.

Run it as:
    python basic_example.py --int 69420 --float 3.14 --string "Hello, World!"
"""

from argstore import ArgStore


def show_help_message() -> None:
    print("Usage: basic_example.py [options]")
    print("Options:")
    print("  -h, --help, help                      Show this help message")
    print("  -i <number>, --int <number>           Print an integer")
    print("  -f <number>, --float <number>         Print a floating point number")
    print("  -s <string>, --string <string>        Print a string")
    print("  --dump                                Print the raw arguments")


def main() -> None:
    """Main function demonstrating the lookups."""
    store = ArgStore.from_sys_argv()

    show_help = store.get_bool("-h|--help|help")
    int_number = store.get_int("-i|--int")
    float_number = store.get_float("-f|--float")
    string = store.get_string("-s|--string")

    if show_help:
        show_help_message()
        return

    if store.get_bool("--dump"):
        store.dump()

    if int_number:
        print(f"Int: {int_number}")
    if float_number:
        print(f"Float: {float_number:f}")
    if string is not None:
        print(f"String: {string}")

    # The safe_* variants report malformed input instead of returning 0.
    checked = store.safe_int("-i|--int")
    if checked.is_err() and store.get_string("-i|--int") is not None:
        print(f"Warning: {checked.unwrap_err()}")


if __name__ == "__main__":
    main()
