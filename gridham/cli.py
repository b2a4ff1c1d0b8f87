"""
Command line interface for gridham.

Usage:
    gridham solve 4 4 0 0 0 1 --format matrix
    gridham exists 3 3 0 0 1 1
    gridham verify --max-rows 4 --max-cols 4
    gridham primes --write gridham/solver/prime_paths.yaml
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from .core.types import ConfigError, InvalidInput
from .pipeline.config import GlobalConfig, VerifyConfig, load_config, parse_log_level, positive
from .pipeline.prime_data import check_prime_table, write_prime_paths
from .pipeline.tasks import generate_tasks
from .pipeline.verify import run_verification
from .solver.engine import check, construct
from .solver.primes import PRIME_TABLE, PrimeTable

logger = logging.getLogger("gridham")

console = Console(highlight=False)
err_console = Console(stderr=True)

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_INVALID = 2


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _emit(text: str) -> None:
    """Print machine-readable output without markup or wrapping."""
    console.print(text, markup=False, soft_wrap=True)


def _problem_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("n", type=int, help="Number of rows")
    parser.add_argument("m", type=int, help="Number of columns")
    parser.add_argument("vr", type=int, help="Start row")
    parser.add_argument("vc", type=int, help="Start column")
    parser.add_argument("wr", type=int, help="End row")
    parser.add_argument("wc", type=int, help="End column")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridham",
        description="Hamiltonian paths in rectangular grid graphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gridham solve 4 4 0 0 0 1                 # print the path as a vertex list
  gridham solve 5 5 0 0 4 4 --format matrix # print the visit order per cell
  gridham exists 4 2 1 0 1 1                # forbidden(width_2)
  gridham verify --max-cells 12             # compare against exhaustive search
  gridham primes                            # check the shipped prime table
        """
    )
    parser.add_argument("--config", type=str, default=None, help="YAML configuration file")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default: from config)")

    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Construct a Hamiltonian path from v to w")
    _problem_args(solve)
    solve.add_argument("--format", choices=["list", "json", "matrix"], default="list",
                       help="Output format (default: list)")

    ex = sub.add_parser("exists", help="Decide whether a Hamiltonian path from v to w exists")
    _problem_args(ex)

    verify = sub.add_parser("verify", help="Check the engine against exhaustive search on small grids")
    verify.add_argument("--max-rows", type=int, default=None)
    verify.add_argument("--max-cols", type=int, default=None)
    verify.add_argument("--max-cells", type=int, default=None)
    verify.add_argument("--no-brute-force", action="store_true",
                        help="Only check path validity")

    primes = sub.add_parser("primes", help="Check the shipped prime table, or regenerate it")
    primes.add_argument("--write", type=str, default=None, metavar="PATH",
                        help="Regenerate the prime paths by exhaustive search and write them to PATH")

    return parser


# ---------- Commands ----------

def cmd_solve(args, cfg: GlobalConfig) -> int:
    v, w = (args.vr, args.vc), (args.wr, args.wc)
    result = construct(args.n, args.m, v, w, cfg.solver)

    if not result.found:
        if args.format == "json":
            _emit(json.dumps({"found": False, "verdict": str(result.verdict)}))
        else:
            _emit(f"no path: {result.verdict}")
        return EXIT_NO_PATH

    path = result.path
    if args.format == "json":
        data = path.to_dict()
        data["found"] = True
        _emit(json.dumps(data))
    elif args.format == "matrix":
        table = Table(box=box.SIMPLE, show_header=False)
        for _ in range(path.m):
            table.add_column(justify="right")
        for row in path.order_matrix():
            table.add_row(*(str(x) for x in row))
        console.print(table)
    else:
        _emit(" ".join(str(x) for x in path))
    return EXIT_FOUND


def cmd_exists(args, cfg: GlobalConfig) -> int:
    v, w = (args.vr, args.vc), (args.wr, args.wc)
    verdict = check(args.n, args.m, v, w)
    _emit(f"{'true' if verdict.acceptable else 'false'} ({verdict})")
    return EXIT_FOUND if verdict.acceptable else EXIT_NO_PATH


def _bound(value: Optional[int], default: int, key: str) -> int:
    return default if value is None else positive(key, value)


def cmd_verify(args, cfg: GlobalConfig) -> int:
    verify_cfg = VerifyConfig(
        max_rows=_bound(args.max_rows, cfg.verify.max_rows, "max_rows"),
        max_cols=_bound(args.max_cols, cfg.verify.max_cols, "max_cols"),
        max_cells=_bound(args.max_cells, cfg.verify.max_cells, "max_cells"),
        brute_force=cfg.verify.brute_force and not args.no_brute_force,
    )
    cfg = GlobalConfig(solver=cfg.solver, verify=verify_cfg, log_level=cfg.log_level)
    total = len(generate_tasks(verify_cfg))

    console.print(Panel.fit(
        "[bold cyan]gridham verify[/bold cyan]\n"
        f"Grids: up to {verify_cfg.max_rows} x {verify_cfg.max_cols}, {verify_cfg.max_cells} cells\n"
        f"Tasks: {total}\n"
        f"Exhaustive search: {'on' if verify_cfg.brute_force else 'off'}",
        border_style="cyan"
    ))

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TextColumn("•"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Verifying", total=total)
        summary = run_verification(cfg, callback=lambda _: progress.advance(task))

    table = Table(title="Verification Results", box=box.ROUNDED)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Tasks", str(summary.total))
    table.add_row("Acceptable", str(summary.acceptable))
    table.add_row("Disagreements", str(len(summary.disagreements)))
    table.add_row("Invalid paths", str(len(summary.invalid_paths)))
    table.add_row("Errors", str(len(summary.errors)))
    table.add_row("Runtime", f"{summary.runtime_sec:.2f}s")
    console.print(table)

    for task_id in summary.disagreements + summary.invalid_paths + summary.errors:
        console.print(f"  [red]FAIL[/red] {task_id}")

    if summary.ok:
        console.print("[bold green]OK[/bold green]")
        return EXIT_FOUND
    console.print("[bold red]FAILED[/bold red]")
    return EXIT_NO_PATH


def cmd_primes(args, cfg: GlobalConfig) -> int:
    table = PRIME_TABLE
    if args.write:
        try:
            count = write_prime_paths(args.write)
        except OSError as e:
            err_console.print(f"[red]Cannot write[/red] {args.write}: {e}")
            return EXIT_INVALID
        console.print(f"Wrote {count} prime paths to {args.write}")
        table = PrimeTable.from_file(args.write)

    report = check_prime_table(table)
    view = Table(title="Prime Table", box=box.ROUNDED)
    view.add_column("Metric", style="cyan")
    view.add_column("Value", style="green", justify="right")
    view.add_row("Entries", str(report.entries))
    view.add_row("Acceptable primes", str(report.required))
    view.add_row("Missing", str(len(report.missing)))
    view.add_row("Extra", str(len(report.extra)))
    console.print(view)

    for key in report.missing:
        console.print(f"  [red]MISSING[/red] {key}")
    for key in report.extra:
        console.print(f"  [red]EXTRA[/red] {key}")

    if report.ok:
        console.print("[bold green]OK[/bold green]")
        return EXIT_FOUND
    console.print("[bold red]FAILED[/bold red]")
    return EXIT_NO_PATH


COMMANDS = {
    "solve": cmd_solve,
    "exists": cmd_exists,
    "verify": cmd_verify,
    "primes": cmd_primes,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
        level = parse_log_level(args.log_level) if args.log_level else cfg.log_level
    except ConfigError as e:
        err_console.print(f"[red]Config error:[/red] {e}")
        return EXIT_INVALID
    setup_logging(level)
    logger.debug("config: %s", cfg)

    try:
        return COMMANDS[args.command](args, cfg)
    except InvalidInput as e:
        err_console.print(f"[red]Invalid input:[/red] {e}")
        return EXIT_INVALID
    except ConfigError as e:
        err_console.print(f"[red]Invalid option:[/red] {e}")
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
