"""
jsoncomb demonstration script.
"""

from dataclasses import dataclass

import jsoncomb
from jsoncomb import Failure, ParseError


@dataclass
class Server:
    host: str
    port: int
    tags: list


def main():
    print("jsoncomb - Parser Combinator Demo")
    print("=" * 40)

    examples = [
        ("null", "Null literal"),
        ("true", "Boolean"),
        ("  42  ", "Number with surrounding whitespace"),
        ('"hello"', "String"),
        ("True", "Capitalised boolean"),
        ("-5", "Signed number (unsupported)"),
        ("[1, 2]", "Array (not parsed by the grammar)"),
    ]

    for i, (text, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {text!r}")

        try:
            result = jsoncomb.loads(text)
            print(f"Output: {result!r}")
        except ParseError as e:
            print(f"Error:  {e}")

    print(f"\n{len(examples) + 1}. Raw outcome with remainder")
    outcome = jsoncomb.parse("123abc", "number")
    print(f"Outcome: {outcome!r}")

    print(f"\n{len(examples) + 2}. Failure as a value")
    outcome = jsoncomb.parse("{}")
    if isinstance(outcome, Failure):
        print(f"Failure: {outcome.message}")

    print(f"\n{len(examples) + 3}. Rendering a converted object")
    value = jsoncomb.from_python(Server("localhost", 8080, ["a", "b"]))
    print(f"Compact: {jsoncomb.to_compact(value)}")
    print(f"Pretty:\n{jsoncomb.to_pretty(value)}")


if __name__ == "__main__":
    main()
