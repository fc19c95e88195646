import json
import logging
import random
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from graphex import generators
from graphex._dot import to_dot
from graphex._errors import GraphError
from graphex._generators import GraphKind
from graphex._graph import Digraph, Graph
from graphex._orientation import orient
from graphex._report import check_orientation, describe_topological_order

from .config import ConfigError, GraphexConfig, get_config
from .render import render_orientation_report, render_unique_topo_reports

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

# Example DAG from Sedgewick & Wayne, "Algorithms" 4th ed., section 4.2
BOOK_DAG_EDGES = [(0, 5), (0, 1), (3, 5), (5, 2), (6, 0), (1, 4), (0, 2), (3, 6), (3, 4), (6, 4), (3, 2)]
BOOK_DAG_VERTICES = 7


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Graphex CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]✗ {escape(message)}[/red]")
    raise typer.Exit(code=1)


def _load_config() -> GraphexConfig:
    try:
        config = get_config()
    except ConfigError as e:
        _fail(str(e))
    if config.project_root is not None:
        logger.debug(f"Loaded configuration from {config.project_root / 'pyproject.toml'}")
    return config


def _make_rng(seed: int | None) -> random.Random:
    if seed is None:
        seed = random.SystemRandom().randrange(2**32)
    logger.debug(f"Random seed: {seed}")
    return random.Random(seed)


def _print_dot(graph: Graph | Digraph) -> None:
    out_console.print(to_dot(graph), markup=False, highlight=False)


@app.command(name="orient")
def orient_command(
    *,
    vertices: Annotated[
        int | None,
        typer.Option("-n", "--vertices", help="Number of vertices of the random graph"),
    ] = None,
    probability: Annotated[
        float | None,
        typer.Option("-p", "--probability", help="Edge probability of the random graph"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for the random graph"),
    ] = None,
    max_attempts: Annotated[
        int | None,
        typer.Option("--max-attempts", help="Random graphs to draw before giving up"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print the orientation report as JSON"),
    ] = False,
) -> None:
    """Orient a random bridgeless graph into a strongly connected digraph."""
    config = _load_config()
    vertices = config.vertices if vertices is None else vertices
    probability = config.probability if probability is None else probability
    max_attempts = config.max_attempts if max_attempts is None else max_attempts
    rng = _make_rng(config.seed if seed is None else seed)

    err_console.print()
    err_console.print(
        f"[cyan]Drawing bridgeless graph:[/cyan] {vertices} vertices, p={probability}",
    )
    try:
        graph = generators.random_bridgeless(vertices, probability, rng, max_attempts)
        digraph = orient(graph)
    except (GraphError, ValueError) as e:
        _fail(str(e))

    report = check_orientation(graph, digraph)

    if json_output:
        out_console.print_json(report.model_dump_json())
    else:
        err_console.print(f"[cyan]Graph:[/cyan] {graph.V} vertices, {graph.E} edges")
        err_console.print()
        render_orientation_report(report, err_console)
        err_console.print()
        _print_dot(graph)
        _print_dot(digraph)

    if not report.passed:
        _fail("Orientation checks failed")
    err_console.print("[green]✓ Orientation complete[/green]")


@app.command(name="unique-topo")
def unique_topo_command(
    *,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Print the reports as JSON"),
    ] = False,
) -> None:
    """Decide unique topological order for the textbook DAG, before and after adding 2->1."""
    book = Digraph.from_edges(BOOK_DAG_VERTICES, BOOK_DAG_EDGES)
    try:
        before = describe_topological_order(book)
        book.add_edge(2, 1)
        after = describe_topological_order(book)
    except GraphError as e:
        _fail(str(e))

    reports = [("textbook DAG", before), ("textbook DAG + 2->1", after)]

    if json_output:
        out_console.print_json(json.dumps({label: report.model_dump() for label, report in reports}))
        return

    err_console.print()
    render_unique_topo_reports(reports, err_console)
    err_console.print()
    for _, report in reports:
        out_console.print(str(report.unique).lower(), highlight=False)


@app.command()
def generate(
    kind: Annotated[
        GraphKind,
        typer.Argument(help="Graph family to generate"),
    ],
    *,
    vertices: Annotated[
        int | None,
        typer.Option("-n", "--vertices", help="Number of vertices"),
    ] = None,
    edges: Annotated[
        int | None,
        typer.Option("-e", "--edges", help="Number of edges (defaults to the vertex count)"),
    ] = None,
    probability: Annotated[
        float | None,
        typer.Option("-p", "--probability", help="Edge probability"),
    ] = None,
    degree: Annotated[
        int,
        typer.Option("-k", "--degree", help="Vertex degree for regular graphs"),
    ] = 2,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for the random source"),
    ] = None,
    max_attempts: Annotated[
        int | None,
        typer.Option("--max-attempts", help="Random graphs to draw before giving up (bridgeless only)"),
    ] = None,
) -> None:
    """Generate a graph and print it in Dot format."""
    config = _load_config()
    vertices = config.vertices if vertices is None else vertices
    edges = vertices if edges is None else edges
    probability = config.probability if probability is None else probability
    max_attempts = config.max_attempts if max_attempts is None else max_attempts
    rng = _make_rng(config.seed if seed is None else seed)
    left = vertices // 2
    right = vertices - left

    try:
        match kind:
            case GraphKind.SIMPLE:
                graph = generators.simple(vertices, edges, rng)
            case GraphKind.ERDOS_RENYI:
                graph = generators.erdos_renyi(vertices, probability, rng)
            case GraphKind.COMPLETE:
                graph = generators.complete(vertices)
            case GraphKind.COMPLETE_BIPARTITE:
                graph = generators.complete_bipartite(left, right, rng)
            case GraphKind.BIPARTITE:
                graph = generators.bipartite(left, right, edges, rng)
            case GraphKind.BIPARTITE_ERDOS_RENYI:
                graph = generators.bipartite_erdos_renyi(left, right, probability, rng)
            case GraphKind.PATH:
                graph = generators.path(vertices, rng)
            case GraphKind.BINARY_TREE:
                graph = generators.binary_tree(vertices, rng)
            case GraphKind.CYCLE:
                graph = generators.cycle(vertices, rng)
            case GraphKind.EULERIAN_CYCLE:
                graph = generators.eulerian_cycle(vertices, edges, rng)
            case GraphKind.EULERIAN_PATH:
                graph = generators.eulerian_path(vertices, edges, rng)
            case GraphKind.WHEEL:
                graph = generators.wheel(vertices, rng)
            case GraphKind.STAR:
                graph = generators.star(vertices, rng)
            case GraphKind.REGULAR:
                graph = generators.regular(vertices, degree, rng)
            case GraphKind.BRIDGELESS:
                graph = generators.random_bridgeless(vertices, probability, rng, max_attempts)
    except (GraphError, ValueError) as e:
        _fail(str(e))

    err_console.print(f"[cyan]{kind.__doc__}[/cyan] {graph.V} vertices, {graph.E} edges")
    _print_dot(graph)


def main() -> None:
    app()
