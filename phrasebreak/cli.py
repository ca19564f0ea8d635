"""Command-line interface for phrase segmentation."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .config import DEFAULT_CONFIG_PATH, Config, load_config
from .errors import PhraseBreakError
from .io_utils import load_sentences, results_to_dict, save_results
from .languages import available_languages, load_default_parser
from .logging_utils import setup_logging
from .parser import Parser
from .validation import validate
from .writer import results_to_text

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phrasebreak",
        description="Split text written without spaces into phrases at safe line-break points.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    model_group = parser.add_mutually_exclusive_group()
    model_group.add_argument(
        "--model",
        help="Path to a model JSON file.",
    )
    model_group.add_argument(
        "--language",
        help=f"Language of a default model ({', '.join(available_languages())}).",
    )
    parser.add_argument(
        "--models-dir",
        help="Directory holding the default language models.",
    )
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "--text",
        help="A single sentence to segment.",
    )
    input_group.add_argument(
        "--input",
        help="Path to a UTF-8 text file with one sentence per line.",
    )
    parser.add_argument(
        "--output",
        help="Path to write the result to. Defaults to stdout.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write results as JSON with the phrases of every sentence.",
    )
    parser.add_argument(
        "--separator",
        help="String inserted between phrases in text output. Defaults to ZERO WIDTH SPACE.",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check that every result reconstructs its sentence and fail otherwise.",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help="Path to the configuration YAML file. A missing default file is ignored.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    return parser


def _build_parser(args: argparse.Namespace, cfg: Config) -> Parser:
    models_dir = args.models_dir or cfg.models_dir
    if args.model:
        print(f"Loading model from {args.model}...", file=sys.stderr)
        return Parser.from_file(args.model)
    if args.language:
        print(f"Loading default {args.language} model...", file=sys.stderr)
        return load_default_parser(args.language, models_dir)
    if cfg.model_path:
        print(f"Loading model from {cfg.model_path}...", file=sys.stderr)
        return Parser.from_file(cfg.model_path)
    if cfg.language:
        print(f"Loading default {cfg.language} model...", file=sys.stderr)
        return load_default_parser(cfg.language, models_dir)
    raise ValueError("No model given. Use --model or --language, or set one in the config file.")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main command-line interface for phrasebreak.

    This function orchestrates a segmentation run:
    1.  Loads the configuration file, if present.
    2.  Loads the model named on the command line or in the config.
    3.  Reads the sentence(s) from ``--text`` or ``--input``.
    4.  Parses every sentence into phrases, optionally validating them.
    5.  Writes the separator-joined text, or JSON, to ``--output`` or stdout.

    Returns:
        The process exit code.
    """
    args = build_arg_parser().parse_args(argv)

    try:
        explicit_config = args.config != DEFAULT_CONFIG_PATH
        cfg = load_config(args.config, missing_ok=not explicit_config)
        setup_logging(args.log_level or cfg.log_level, cfg.log_file)
        logger.debug("Using configuration %s", cfg)

        parser = _build_parser(args, cfg)

        if args.text is not None:
            sentences = [args.text]
        else:
            print(f"Loading sentences from {args.input}...", file=sys.stderr)
            sentences = load_sentences(args.input)

        results = []
        for sentence in tqdm(sentences, desc="Segmenting", unit="line", disable=len(sentences) < 2):
            phrases = parser.parse(sentence)
            if args.validate:
                report = validate(sentence, phrases)
                if report["issue_count"]:
                    raise ValueError(
                        f"Validation failed for {sentence!r}: "
                        + "; ".join(issue["message"] for issue in report["issues"])
                    )
            results.append((sentence, phrases))
        logger.info("Segmented %d sentences", len(results))

        separator = args.separator if args.separator is not None else cfg.separator

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            if args.json:
                save_results(output_path, results)
            else:
                text = results_to_text((phrases for _, phrases in results), separator)
                output_path.write_text(text + "\n" if results else "", encoding="utf-8")
            print(f"Successfully wrote output to {args.output}", file=sys.stderr)
        elif args.json:
            json.dump(
                results_to_dict(results),
                sys.stdout,
                ensure_ascii=False,
                indent=2,
            )
            sys.stdout.write("\n")
        elif results:
            print(results_to_text((phrases for _, phrases in results), separator))

    except (PhraseBreakError, FileNotFoundError, ValueError, TypeError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
