"""
Command line front end.

    dfasim --description DFA.txt              interactive loop, "quit" to exit
    dfasim --description DFA.txt ab ba ac     evaluate the given strings
    dfasim --batch queries.txt --json out.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from dfasim.config import LOG_LEVELS, SimulatorConfig
from dfasim.core.errors import ConstructionError
from dfasim.core.evaluator import run
from dfasim.core.model import AutomatonModel
from dfasim.core.types import EvaluationResult
from dfasim.io.description import load_model
from dfasim.io.report import save_records, to_record
from dfasim.log import configure_logging
from dfasim.render import format_result

logger = logging.getLogger(__name__)

PROMPT = ">>>Please enter a string to evaluate: "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dfasim",
        description="Evaluate strings against a deterministic finite automaton.",
    )
    parser.add_argument("strings", nargs="*", help="strings to evaluate (interactive if omitted)")
    parser.add_argument("-d", "--description", default="DFA.txt", help="automaton description file")
    parser.add_argument("-b", "--batch", help="file with one string per line")
    parser.add_argument("--json", dest="json_path", help="write evaluation records to this JSON file")
    parser.add_argument("-q", "--quiet", action="store_true", help="print verdicts only")
    parser.add_argument("--quit-word", default="quit", help="sentinel that ends the interactive loop")
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS, type=str.upper)
    return parser


def _emit(result: EvaluationResult, config: SimulatorConfig, out: TextIO) -> None:
    for line in format_result(result, show_trace=config.show_trace):
        print(line, file=out)


def _evaluate_all(
    model: AutomatonModel,
    texts: Iterable[str],
    config: SimulatorConfig,
    out: TextIO,
) -> list[EvaluationResult]:
    results = []
    for text in texts:
        result = run(model, text)
        _emit(result, config, out)
        results.append(result)
    return results


def _interactive(
    model: AutomatonModel,
    config: SimulatorConfig,
    stdin: TextIO,
    out: TextIO,
) -> list[EvaluationResult]:
    results = []
    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            print(file=out)
            break
        text = line.rstrip("\r\n")
        if config.is_quit(text):
            print(">>>Goodbye!", file=out)
            break
        result = run(model, text)
        _emit(result, config, out)
        results.append(result)
    return results


def _read_batch(path: str) -> list[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f]


def main(
    argv: Optional[list[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    args = build_parser().parse_args(argv)
    config = SimulatorConfig(
        description_path=Path(args.description),
        quit_word=args.quit_word,
        log_level=args.log_level,
        show_trace=not args.quiet,
    )
    configure_logging(config.log_level)

    print(f">>>Loading {config.description_path}...", file=stdout)
    try:
        model = load_model(config.description_path)
    except (OSError, ConstructionError) as exc:
        logger.info("failed to load %s", config.description_path, exc_info=True)
        print(f"Error reading DFA file: {exc}", file=stderr)
        return 2
    logger.info(
        "loaded %s: %d states, alphabet %r",
        config.description_path,
        model.state_count,
        "".join(model.alphabet),
    )

    if args.batch or args.strings:
        texts = list(args.strings)
        if args.batch:
            try:
                texts.extend(_read_batch(args.batch))
            except (OSError, UnicodeDecodeError) as exc:
                print(f"Error reading batch file: {exc}", file=stderr)
                return 2
        results = _evaluate_all(model, texts, config, stdout)
    else:
        results = _interactive(model, config, stdin, stdout)

    if args.json_path:
        save_records([to_record(result) for result in results], args.json_path)
        logger.info("wrote %d records to %s", len(results), args.json_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
