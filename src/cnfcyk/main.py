from __future__ import annotations

import sys
import time
import argparse

import cnfcyk
from cnfcyk.error import Raise
from cnfcyk.grammar import CNFGrammar, ConstructionError
from cnfcyk.config import GrammarSourceError
from cnfcyk.logging import Logger
from cnfcyk.parser import CYKAlgo
from cnfcyk.tests import TestRunner

delim = "="*28
exit_command = ":q"

def load_grammar(filename: str, alphabet: str = None) -> CNFGrammar:
    logger = Logger(file="cnfcyk", tag="main")
    try:
        grammar = cnfcyk.config.parser.run(filename=filename, alphabet=alphabet)
    except OSError as e:
        logger.log_error(f"cannot read '{filename}': {e}")
        Raise.error(f"cannot read grammar file '{filename}': {e.strerror}")
    except UnicodeDecodeError as e:
        logger.log_error(f"cannot decode '{filename}': {e}")
        Raise.error(f"grammar file '{filename}' is not valid UTF-8: {e.reason} at byte {e.start}")
    except (GrammarSourceError, ConstructionError) as e:
        logger.log_error(str(e))
        Raise.error(str(e))

    logger.log(f"loaded '{filename}': {len(grammar.terminal_productions)} terminal and "
        + f"{len(grammar.binary_productions)} binary productions, start '{grammar.start_symbol}'")
    if not grammar.terminal_productions_for(grammar.start_symbol) \
            and not grammar.binary_productions_for(grammar.start_symbol):
        logger.log(f"start symbol '{grammar.start_symbol}' has no productions; every input will be rejected")
    return grammar

def show_grammar(grammar: CNFGrammar, filename: str):
    print(f"Current grammar ('{filename}'), start symbol {grammar.start_symbol}:\n")
    print(grammar)

def check_string(algo: CYKAlgo, w: str, debug: bool) -> bool:
    if not debug:
        return algo.recognize(w)

    table = algo.fill(w)
    print(table if str(table) else "(empty table)")
    return table.accepts(algo.grammar.start_symbol)

def run_strings(grammar: CNFGrammar, strings: list[str], debug: bool) -> None:
    algo = CYKAlgo(grammar)
    for w in strings:
        verdict = "accepted" if check_string(algo, w, debug) else "rejected"
        print(f"{w}: {verdict}")

def run_interactive(grammar: CNFGrammar, debug: bool) -> None:
    algo = CYKAlgo(grammar)
    while True:
        try:
            w = input(f"Enter a string to test ('{exit_command}' to exit): ")
        except EOFError:
            print()
            break

        if w == exit_command:
            break

        if check_string(algo, w, debug):
            print("The string fits the given grammar\n")
        else:
            print("The string doesn't fit the given grammar\n")

def run_tests(name: str, verbose: bool) -> bool:
    if name:
        start = time.perf_counter()
        status, msg = TestRunner.run_test_by_name(name)
        if status:
            print(f"ran test '{name}' successfully in {round(time.perf_counter()-start, 4)}s")
        else:
            print(msg)
        return status

    return TestRunner.run_all_tests(verbose)

def make_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cnfcyk",
        description="Decide membership of strings in a Chomsky Normal Form grammar (CYK).")
    parser.add_argument("-g", "--grammar", action="store", type=str, default="grammar.txt")
    parser.add_argument("-a", "--alphabet", action="store", type=str, default=None,
        help="restrict grammar terminals to these characters")
    parser.add_argument("-s", "--string", action="append", type=str, dest="strings",
        help="string to test; may be repeated. Without it, strings are read interactively")
    parser.add_argument("-d", "--debug", action="store_true", help="print the CYK table of every string")
    parser.add_argument("-l", "--log-level",
        action="store",
        type=str,
        choices=["debug", "info", "error", "none"],
        default="error")
    parser.add_argument("--log-dir", action="store", type=str, default=Logger.log_dir)
    parser.add_argument("-t", "--test", action="store", type=str, nargs="?", const="")
    parser.add_argument("-v", "--verbose", action="store_true", default=False)
    return parser

def main(argv: list[str] = None) -> int:
    args = make_argparser().parse_args(argv)
    Logger.default_log_level = args.log_level
    Logger.log_dir = args.log_dir

    if args.test is not None:
        return 0 if run_tests(args.test, args.verbose) else 1

    grammar = load_grammar(args.grammar, args.alphabet)
    if args.strings is not None:
        run_strings(grammar, args.strings, args.debug)
        return 0

    print(delim)
    show_grammar(grammar, args.grammar)
    print(delim)
    run_interactive(grammar, args.debug)
    return 0

if __name__ == "__main__":
    sys.exit(main())
