"""CLI entrypoint for varna."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from varna.config import load_config
from varna.core import InvalidWordError, analyze_word, homorganic_verdict
from varna.io import to_json, write_json
from varna.models import AnalyzeRequest, PratyaharaResponse, Script
from varna.phonology import classify, expand_pratyahara, tokenize
from varna.scripts import detect_script, normalize, validate

_SCRIPT_CHOICES = [Script.IAST.value, Script.DEVANAGARI.value]


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="varna",
        description="Sanskrit script detection, transliteration and phoneme classification.",
    )
    subparsers = parser.add_subparsers(dest="command")

    detect = subparsers.add_parser("detect", help="Detect the script of a word")
    detect.add_argument("word", help="Word in Devanagari or IAST")

    validate_cmd = subparsers.add_parser("validate", help="Check that a word is well formed")
    validate_cmd.add_argument("word", help="Word in Devanagari or IAST")

    normalize_cmd = subparsers.add_parser("normalize", help="Normalize or transliterate a word")
    normalize_cmd.add_argument("word", help="Word in Devanagari or IAST")
    normalize_cmd.add_argument(
        "--to",
        dest="target_script",
        choices=_SCRIPT_CHOICES,
        default=None,
        help="Target script (default: iast)",
    )

    tokenize_cmd = subparsers.add_parser("tokenize", help="Segment a word into phonemes")
    tokenize_cmd.add_argument("word", help="Word in Devanagari or IAST")

    classify_cmd = subparsers.add_parser("classify", help="Classify a single phoneme")
    classify_cmd.add_argument("phoneme", help="Phoneme in Devanagari or IAST")

    homorganic = subparsers.add_parser("homorganic", help="Test whether two phonemes are savarna")
    homorganic.add_argument("first", help="First phoneme")
    homorganic.add_argument("second", help="Second phoneme")

    analyze = subparsers.add_parser("analyze", help="Run the full word analysis pipeline")
    analyze.add_argument("word", help="Word in Devanagari or IAST")
    analyze.add_argument(
        "--to",
        dest="target_script",
        choices=_SCRIPT_CHOICES,
        default=None,
        help="Script to normalize into before tokenizing (default: iast)",
    )
    analyze.add_argument(
        "--raw",
        action="store_true",
        help="Tokenize the input as given instead of its normalized form",
    )
    analyze.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on invalid words instead of analysing them best-effort",
    )
    analyze.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON path. If omitted, prints to stdout.",
    )

    pratyahara = subparsers.add_parser("pratyahara", help="Expand a pratyahara name")
    pratyahara.add_argument("name", help="Pratyahara name, e.g. ac, hal, ik")
    pratyahara.add_argument(
        "--script",
        choices=_SCRIPT_CHOICES,
        default=Script.IAST.value,
        help="Script of the expanded phonemes (default: iast)",
    )

    serve = subparsers.add_parser("serve", help="Run the varna HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    logging.basicConfig(level=config.log_level)

    if args.command == "detect":
        _print_json({"word": args.word, "script": detect_script(args.word)})
        return 0

    if args.command == "validate":
        result = validate(args.word)
        print(to_json(result))
        return 0 if result.is_valid else 1

    if args.command == "normalize":
        target = Script(args.target_script) if args.target_script else Script.IAST
        _print_json(
            {
                "word": args.word,
                "source_script": detect_script(args.word),
                "target_script": target,
                "normalized": normalize(args.word, target),
            }
        )
        return 0

    if args.command == "tokenize":
        _print_json([phoneme.model_dump(mode="json") for phoneme in tokenize(args.word)])
        return 0

    if args.command == "classify":
        print(to_json(classify(args.phoneme)))
        return 0

    if args.command == "homorganic":
        print(to_json(homorganic_verdict(args.first, args.second)))
        return 0

    if args.command == "analyze":
        request = AnalyzeRequest(
            word=args.word,
            target_script=args.target_script,
            normalize=not args.raw,
            strict=args.strict if args.strict is not None else config.strict_validation,
        )
        try:
            analysis = analyze_word(request)
        except InvalidWordError as exc:
            print(f"Invalid word: {exc}", file=sys.stderr)
            return 1
        if args.output:
            write_json(analysis, args.output)
            print(f"Wrote analysis JSON to {args.output}")
            return 0
        print(to_json(analysis))
        return 0

    if args.command == "pratyahara":
        script = Script(args.script)
        phonemes = expand_pratyahara(args.name, script)
        if not phonemes:
            print(f"Unknown pratyahara: {args.name}", file=sys.stderr)
            return 1
        print(to_json(PratyaharaResponse(name=args.name, script=script, phonemes=list(phonemes))))
        return 0

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`varna serve` requires uvicorn. Install project dependencies first.",
                file=sys.stderr,
            )
            return 1

        host = args.host or config.api_host
        port = args.port or config.api_port
        uvicorn.run(
            "varna.api:app",
            host=host,
            port=port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            reload=False,
        )
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


def _print_json(payload: object) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    raise SystemExit(main())
