# src/seqglue/seqglue.py
from __future__ import annotations
import argparse, logging, pathlib, sys

from seqglue.assembly.overlap import find_overlap
from seqglue.errors import AssemblyCancelled, GlueError, ParseError
from seqglue.hardware import recommend_threads
from seqglue.pipeline import run_assembly
from seqglue.records import DEFAULT_DEMARCATOR, parse_file
from seqglue.utility.utils import CONF_PATH, config_section, load_config, setup_logging

# exit codes: bad input file vs broken internal invariant
EXIT_PARSE = 1
EXIT_GLUE = 2
EXIT_CANCELLED = 3


def build_parser(cfg: dict) -> argparse.ArgumentParser:
    asm_cfg = config_section(cfg, "assembly")
    ap = argparse.ArgumentParser(
        prog="seqglue",
        description="seqglue: greedy superstring assembly of overlapping reads")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v: info, -vv: debug")
    ap.add_argument("--config", default=str(CONF_PATH), help="YAML config file (default: %(default)s)")
    sp = ap.add_subparsers(dest="cmd", required=True)

    # ── assemble ----------------------------------------------------------
    p_asm = sp.add_parser("assemble", help="Glue every read of a FASTA file into one contig")
    p_asm.add_argument("-i", "--input", required=True, metavar="FASTA", help="Reads to assemble")
    p_asm.add_argument("-o", "--output", metavar="FASTA", help="Also write the contig as FASTA here")
    p_asm.add_argument("--layout", metavar="TSV", help="Write one row per junction (left, right, overlap, offset)")
    p_asm.add_argument("--demarcator", default=asm_cfg.get("demarcator", DEFAULT_DEMARCATOR),
                       help="Record header prefix (default: %(default)s)")
    p_asm.add_argument("--sequential", action="store_true", default=not asm_cfg.get("parallel", True),
                       help="Run the left and right searches one after the other")
    p_asm.add_argument("--workers", type=int, default=asm_cfg.get("workers"),
                       help="Worker threads (at most 2 are used; default: from hardware)")

    # ── overlap -----------------------------------------------------------
    p_ov = sp.add_parser("overlap", help="Score the overlap of two named reads")
    p_ov.add_argument("-i", "--input", required=True, metavar="FASTA")
    p_ov.add_argument("left", help="Name of the read whose suffix is compared")
    p_ov.add_argument("right", help="Name of the read whose prefix is compared")
    p_ov.add_argument("--demarcator", default=asm_cfg.get("demarcator", DEFAULT_DEMARCATOR))

    sp.add_parser("recommend-threads", help="Print a safe worker count for this machine")
    return ap


def _cmd_assemble(args) -> int:
    return run_assembly(
        pathlib.Path(args.input),
        args.output,
        layout_tsv=args.layout,
        demarcator=args.demarcator,
        parallel=not args.sequential,
        workers=args.workers,
        echo=True,
    )


def _cmd_overlap(args) -> int:
    by_name = {s.name: s for s in parse_file(args.input, args.demarcator)}
    missing = [n for n in (args.left, args.right) if n not in by_name]
    if missing:
        raise ParseError(f"no record named {', '.join(map(repr, missing))}", path=args.input)
    ov = find_overlap(by_name[args.left], by_name[args.right])
    print(f"{ov.left.name}\t{ov.right.name}\t{ov.length}\tgluable={ov.is_gluable}")
    return 0


def main(argv: list[str] | None = None) -> int:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", default=str(CONF_PATH))
    known, _ = pre.parse_known_args(argv)
    cfg = load_config(known.config)

    args = build_parser(cfg).parse_args(argv)

    LEVEL = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    log_cfg = config_section(cfg, "logging")
    setup_logging(
        log_cfg.get("log_dir"),          # None -> $SEQGLUE_LOG_DIR or ./logs
        level=LEVEL,
        rotate_mb=log_cfg.get("rotate_mb"),
        backup_count=log_cfg.get("backup_count", 0),
    )

    if args.cmd == "recommend-threads":
        print(recommend_threads())
        return 0

    try:
        if args.cmd == "assemble":
            return _cmd_assemble(args)
        return _cmd_overlap(args)
    except ParseError as exc:
        logging.error("Bad input: %s", exc)
        return EXIT_PARSE
    except GlueError as exc:
        logging.error("Internal chain error: %s", exc)
        return EXIT_GLUE
    except AssemblyCancelled as exc:
        logging.error(exc)
        return EXIT_CANCELLED


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
