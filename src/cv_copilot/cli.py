"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.text import Text

from cv_copilot.analysis import CVAnalyzer, JobAnalyzer
from cv_copilot.config import AppConfig, BackendConfig, load_config
from cv_copilot.models.application import ApplicationRequest
from cv_copilot.parsers.document_parser import load_document
from cv_copilot.parsers.text_loader import load_text_file
from cv_copilot.pipeline.orchestrator import ApplicationOrchestrator, ProcessingError

app = typer.Typer(
    name="cv-copilot",
    help="Tailor a CV to a job posting and draft a cover letter.",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _require(path: Path, label: str) -> None:
    if not path.exists():
        console.print(f"[red]{label} file not found: {path}[/red]")
        raise typer.Exit(1)


def _with_backend(config: AppConfig, kind: str | None) -> AppConfig:
    if kind is None or kind == config.backend.kind:
        return config
    b = config.backend
    return AppConfig(
        analysis=config.analysis,
        report=config.report,
        upload=config.upload,
        backend=BackendConfig(kind=kind, model=b.model, timeout=b.timeout, max_tokens=b.max_tokens),
        pipeline=config.pipeline,
    )


@app.command()
def analyze(
    job: Path = typer.Option(..., "--job", help="Job posting text file"),
    cv: Path = typer.Option(..., "--cv", help="CV file (PDF/DOCX/TXT/MD)"),
    personal: str = typer.Option("", "--personal", help="Personal paragraph for the cover letter"),
    personal_file: Path = typer.Option(None, "--personal-file", help="File holding the personal paragraph"),
    output: Path = typer.Option(None, "--output", "-o", help="Directory to write suggestions.md and cover_letter.txt"),
    backend: str = typer.Option(None, "--backend", "-b", help="Generator backend: rule or llm"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Suggest CV improvements for a job posting and draft a cover letter."""
    _setup_logging(verbose)
    _require(job, "Job posting")
    _require(cv, "CV")

    try:
        config = _with_backend(load_config(), backend)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(1)

    job_text = load_text_file(job)
    parsed = load_document(cv, max_size_mb=config.upload.max_file_size_mb)
    if not parsed.success:
        console.print(f"[yellow]Could not read CV ({parsed.error}). Continuing without it.[/yellow]")

    if personal_file is not None:
        _require(personal_file, "Personal note")
        personal = personal_file.read_text(encoding="utf-8").rstrip("\n")

    if verbose:
        console.print(f"[dim]Job posting: {len(job_text)} chars[/dim]")
        console.print(f"[dim]CV: {len(parsed.text)} chars[/dim]")
        console.print(f"[dim]Backend: {config.backend.kind}[/dim]")

    request = ApplicationRequest(
        job_description=job_text, personal_touch=personal, cv_text=parsed.text
    )
    orchestrator = ApplicationOrchestrator(config=config)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Analyzing...", total=None)

        def on_phase(phase: str, detail: str) -> None:
            progress.update(task, description=detail)

        try:
            result = asyncio.run(orchestrator.run(request, on_phase=on_phase))
        except ProcessingError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    console.print(Panel(Markdown(result.results.cv_suggestions), title="CV Suggestions"))
    console.print(Panel(Text(result.results.cover_letter), title="Cover Letter"))
    console.print(
        f"[dim]{len(result.suggestions)} suggestions, backend={result.backend}, "
        f"{result.elapsed_seconds:.2f}s[/dim]"
    )
    if "input_tokens" in result.metadata:
        console.print(
            f"[dim]Tokens: {result.metadata['input_tokens']:,} in / "
            f"{result.metadata['output_tokens']:,} out "
            f"({result.metadata['llm_calls']} calls)[/dim]"
        )

    if output is not None:
        output.mkdir(parents=True, exist_ok=True)
        (output / "suggestions.md").write_text(result.results.cv_suggestions, encoding="utf-8")
        (output / "cover_letter.txt").write_text(result.results.cover_letter, encoding="utf-8")
        console.print(f"[green]Saved to {output}[/green]")


@app.command()
def inspect(
    job: Path = typer.Option(None, "--job", help="Job posting text file"),
    cv: Path = typer.Option(None, "--cv", help="CV file (PDF/DOCX/TXT/MD)"),
) -> None:
    """Print the structured analysis of a job posting or CV as JSON."""
    if (job is None) == (cv is None):
        console.print("[red]Pass exactly one of --job or --cv.[/red]")
        raise typer.Exit(1)

    config = load_config()
    if job is not None:
        _require(job, "Job posting")
        analysis = JobAnalyzer(config.analysis).analyze(load_text_file(job))
    else:
        _require(cv, "CV")
        parsed = load_document(cv, max_size_mb=config.upload.max_file_size_mb)
        if not parsed.success:
            console.print(f"[red]{parsed.error}[/red]")
            raise typer.Exit(1)
        analysis = CVAnalyzer(config.analysis).analyze(parsed.text)

    typer.echo(analysis.model_dump_json(indent=2))


@app.command("check-file")
def check_file(
    file: Path = typer.Argument(help="PDF/DOCX/TXT file to check"),
) -> None:
    """Validate and parse a file, reporting whether text could be extracted."""
    _require(file, "Input")

    config = load_config()
    parsed = load_document(file, max_size_mb=config.upload.max_file_size_mb)
    if not parsed.success:
        console.print(f"[red]{parsed.error}[/red]")
        raise typer.Exit(1)

    preview = parsed.text[:300] + ("..." if len(parsed.text) > 300 else "")
    console.print(f"[green]OK: {len(parsed.text)} chars extracted[/green]")
    console.print(Panel(Text(preview), title=file.name))


if __name__ == "__main__":
    app()
