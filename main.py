from __future__ import annotations
import json
import logging
from typing import List, Optional
from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import ParseResult, parse_program
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render


DEMO_PROGRAM = """
    var a
    var b
    init a = 1
    init b = 5
    while a != b do
        calculate a = a + 1
        write a
        if a = b then
            write a
        endif
    endwhile
"""


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(format="{levelname}: {message}", style="{")
    logging.getLogger().setLevel(logging.INFO if verbose else logging.WARNING)


def lex(text: str, log_errors: bool = True) -> List[Token]:
    """Tokenize input string."""
    with Lexer(text, log_errors=log_errors) as lexer:
        return lexer.tokenize()


def parse_text(text: str) -> ProgramNode:
    """Parse source text into an AST, raising on the first error."""
    result = parse_program(text)
    if not result.success:
        raise result.error
    return result.program


def print_match(token: Token) -> None:
    print(f"Matched: {token.type} Buffer: {token.lexeme}")


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    trace: bool = False,
    print_ast: bool = True,
    print_surface: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> bool:
    """Process a single program: lex, parse and optionally print stages.

    Returns True when the program parsed. Flags control which parts are
    printed; printing can be toggled separately.
    """
    if print_tokens:
        # The parse below scans again and reports any lexical errors.
        tokens = lex(text, log_errors=False)
        print(f"Tokens ({len(tokens)}):")
        for i, token in enumerate(tokens[:50]):
            print(f"  {i:3}: {token}")
        if len(tokens) > 50:
            print(f"  ... and {len(tokens) - 50} more")

    result: ParseResult = parse_program(text, on_match=print_match if trace else None)

    if not result.success:
        print(result.error)
        print("Parsing failed.")
        return False

    print("Parsing successful!")
    for err in result.lex_errors:
        print(f"Warning: {err}")

    ast = result.program
    if print_ast:
        print("\nAbstract Syntax Tree:")
        print(PrettyPrinter.print_ast(ast))

    if print_surface:
        print("\nSource:")
        print(PrettyPrinter.print_surface(ast))

    if dump_ast_path:
        try:
            with open(dump_ast_path, "w", encoding="utf-8") as fh:
                json.dump(ast_to_json(ast), fh, indent=2)
            print(f"Wrote AST JSON to {dump_ast_path}")
        except (OSError, RecursionError) as e:
            print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            write_and_render(ast, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    return True


def interactive_mode(**options) -> None:
    """Run interactive REPL reading one program per line from stdin."""
    print("\nInteractive Parser Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter program: ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            process_program(text, **options)

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Parse a program from a file, interactively, or the built-in demo"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    group.add_argument(
        "--demo",
        dest="demo",
        action="store_true",
        help="Parse the built-in demo program (default)",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--trace",
        dest="trace",
        action="store_true",
        help="Print every token as the parser matches it",
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--surface",
        dest="print_surface",
        action="store_true",
        help="Print the AST rendered back as source",
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--verbose", "-v", dest="verbose", action="store_true", help="Log parser progress"
    )

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    options = dict(
        print_tokens=args.print_tokens,
        trace=args.trace,
        print_ast=args.print_ast,
        print_surface=args.print_surface,
    )

    if args.interactive:
        interactive_mode(**options)
        return 0

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1
    else:
        text = DEMO_PROGRAM

    ok = process_program(
        text,
        dump_ast_path=args.dump_ast,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
        **options,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    import sys

    sys.exit(main())
