from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Sequence

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .algorithms import DEFAULT_QUANTUM, Algorithm, run_algorithm
from .gantt import build_rich_gantt, render_gantt
from .models import Process, ScheduleResult
from .workload_io import load_workload

logger = logging.getLogger(__name__)

ALGORITHM_NAMES = [a.value for a in Algorithm]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scheduler-sim",
        description="CPU scheduling simulator (FCFS, SJF/SRTF, preemptive Priority, Round-robin).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run",
        help="Run scheduling algorithms on a workload file and print each schedule.",
    )
    compare_parser = subparsers.add_parser(
        "compare",
        help="Run multiple algorithms on the same workload and compare average metrics.",
    )

    for sub in (run_parser, compare_parser):
        sub.add_argument(
            "--workload",
            "-w",
            required=True,
            help="Path to JSON or CSV workload file.",
        )
        sub.add_argument(
            "--algorithms",
            "-a",
            nargs="+",
            choices=ALGORITHM_NAMES,
            default=ALGORITHM_NAMES,
            help=f"Algorithms to run (default: {' '.join(ALGORITHM_NAMES)}).",
        )
        sub.add_argument(
            "--quantum",
            "-q",
            type=int,
            default=DEFAULT_QUANTUM,
            help=f"Time quantum for round-robin (default: {DEFAULT_QUANTUM}).",
        )
        sub.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Log simulation events (arrivals, preemptions, completions).",
        )

    run_parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the Gantt chart as plain text instead of a colored panel.",
    )

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _print_result(result: ScheduleResult, console: Console, plain: bool = False) -> None:
    console.rule(f"[bold]{result.algorithm}[/bold]")
    if result.quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {result.quantum}")

    if plain:
        console.print(render_gantt(result.timeline), markup=False, highlight=False, soft_wrap=True)
    else:
        panel, time_marks = build_rich_gantt(result.timeline)
        console.print(panel)
        if time_marks:
            console.print(time_marks)

    console.print()

    system = result.system
    footers = {
        "Wait": f"Average\n{system.avg_waiting:.2f}",
        "Turnaround": f"Average\n{system.avg_turnaround:.2f}",
        "Exit": f"Throughput\n{system.throughput:.2f}/t",
    }

    proc_table = Table(title="Schedule table", box=box.SIMPLE_HEAVY, show_footer=True)
    for h in ["ID", "Priority", "Burst", "Arrival", "Wait", "Turnaround", "Exit"]:
        justify = "center" if h in {"ID", "Priority"} else "right"
        proc_table.add_column(h, justify=justify, footer=footers.get(h, ""))

    for p in result.processes:
        proc_table.add_row(
            str(p.pid),
            str(p.priority),
            str(p.burst_time),
            str(p.arrival_time),
            str(p.waiting_time),
            str(p.turnaround_time),
            str(p.completion_time),
        )

    console.print(proc_table)
    console.print()


def _print_comparison(results: List[ScheduleResult], title: str, console: Console) -> None:
    summary_table = Table(title=title, box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm", no_wrap=True)
    summary_table.add_column("Avg wait", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Throughput", justify="right")
    summary_table.add_column("CPU util", justify="right")

    for result in results:
        system = result.system
        label = result.algorithm if result.quantum is None else f"{result.algorithm} (q={result.quantum})"
        summary_table.add_row(
            label,
            f"{system.avg_waiting:.2f}",
            f"{system.avg_turnaround:.2f}",
            f"{system.throughput:.3f}",
            f"{system.cpu_utilization*100:.0f}%",
        )

    console.print(summary_table)


def _run_all(processes: Sequence[Process], algorithms: Sequence[str], quantum: int) -> List[ScheduleResult]:
    results = []
    for alg in algorithms:
        q = quantum if alg == Algorithm.RR.value else None
        results.append(run_algorithm(alg, processes, quantum=q))
    return results


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    console = Console()

    try:
        workload_path = Path(args.workload)
        processes = load_workload(workload_path)
        results = _run_all(processes, args.algorithms, args.quantum)
    except (OSError, ValueError) as exc:
        logger.debug("Run failed", exc_info=True)
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 1

    if args.command == "run":
        for result in results:
            _print_result(result, console, plain=args.plain)
        return 0

    if args.command == "compare":
        _print_comparison(results, f"Algorithm comparison: {workload_path}", console)
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
