"""Interactive CLI application."""
import argparse

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from time_matrix.config import QuizConfig
from time_matrix.content import FileContentProvider, load_repository
from time_matrix.engine import Presenter, QuizEngine
from time_matrix.log import setup_logging
from time_matrix.models import Phase, Quadrant, Tone
from time_matrix.settings import LanguageStore

console = Console()

EXIT_WORDS = ("q", "quit", "exit")


class SessionExitRequested(Exception):
    """Raised when the user asks to leave the quiz from a prompt."""


def session_prompt(prompt: str, **kwargs) -> str:
    """Prompt.ask wrapper that turns an exit word into SessionExitRequested."""
    answer = Prompt.ask(prompt, **kwargs)
    if answer.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return answer


class ConsolePresenter(Presenter):
    def __init__(self, console: Console):
        self.console = console
        self.labels = {}
        self.lang = ""

    def display_labels(self, labels: dict, lang: str) -> None:
        self.labels = labels
        self.lang = lang
        self.console.print(Panel(
            f"[bold]{labels['title']}[/bold]\n[dim]{labels['subtitle']}[/dim]",
            title=f"{labels['language_label']}: {lang}", border_style="blue",
        ))

    def display_item(self, text: str) -> None:
        self.console.print(Panel(text, border_style="cyan"))

    def display_progress(self, current: int, total: int) -> None:
        self.console.print(f"[dim]{self.labels['progress_label']}: {current} / {total}[/dim]")

    def display_score(self, score: int) -> None:
        self.console.print(f"[bold]{self.labels['score_label']}:[/bold] {score}")

    def display_feedback(self, message: str, tone: Tone) -> None:
        color = "green" if tone == Tone.SUCCESS else "red"
        self.console.print(f"[{color}]{message}[/{color}]")

    def clear_feedback(self) -> None:
        self.console.print()

    def display_completion(self, score: int, total: int, accuracy: int) -> None:
        self.console.print(Panel(
            f"[bold]{self.labels['final_score'].format(score=score, total=total)}[/bold]\n"
            f"{self.labels['accuracy'].format(accuracy=accuracy)}\n\n"
            f"[dim]{self.labels['play_again']}[/dim]",
            title=self.labels["game_complete"], border_style="green",
        ))

    def display_error(self, message: str) -> None:
        self.console.print(Panel(f"[bold red]{message}[/bold red]", border_style="red"))

    def show_matrix(self) -> None:
        table = Table(show_header=False, show_lines=True, expand=True)
        table.add_column()
        table.add_column()
        cells = []
        for number, quadrant in enumerate(Quadrant, 1):
            cells.append(
                f"[cyan]{number}[/cyan] [bold]{self.labels[f'{quadrant.value}_title']}[/bold]\n"
                f"[dim]{self.labels[f'{quadrant.value}_examples']}[/dim]"
            )
        table.add_row(cells[0], cells[1])
        table.add_row(cells[2], cells[3])
        self.console.print(table)
        self.console.print(f"[dim]{self.labels['key_help']}[/dim]")


def next_language(engine: QuizEngine) -> str:
    supported = engine.config.supported_languages
    index = supported.index(engine.language) if engine.language in supported else -1
    return supported[(index + 1) % len(supported)]


def handle_command(engine: QuizEngine, choice: str) -> None:
    choice = choice.strip().lower()
    if choice in ("1", "2", "3", "4"):
        if engine.submit(choice) is not None:
            engine.scheduler.wait_and_run()
    elif choice == "r":
        engine.reset()
    elif choice == "l" or choice.startswith("l "):
        lang = choice[2:].strip() if choice.startswith("l ") else next_language(engine)
        if not engine.set_language(lang):
            console.print(f"[red]Unsupported language: {lang}[/red]")
    else:
        console.print("[red]Unknown command. Try again.[/red]")


def run_quiz(engine: QuizEngine, presenter: ConsolePresenter) -> None:
    if not engine.start():
        return
    while True:
        try:
            # An advance interrupted by Ctrl-C is still pending.
            if engine.scheduler.has_pending():
                engine.scheduler.wait_and_run()
            if engine.phase == Phase.ACTIVE:
                presenter.show_matrix()
            choice = session_prompt("\n[bold]>[/bold]")
            handle_command(engine, choice)
        except SessionExitRequested:
            break
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'q' to exit.[/dim]")


def build_engine(config: QuizConfig, presenter: ConsolePresenter) -> QuizEngine:
    repository = load_repository(FileContentProvider(config.data_dir))
    store = LanguageStore(config.db_path, config.supported_languages, config.default_language)
    return QuizEngine(repository, presenter, config=config, language_store=store)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sort activities into the time management matrix.")
    parser.add_argument("--lang", help="Language code to play in (saved as your preference)")
    parser.add_argument("--data-dir", help="Directory with activities and translations data files")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")
    config = QuizConfig.from_env()
    if args.data_dir:
        config.data_dir = args.data_dir
    presenter = ConsolePresenter(console)
    engine = build_engine(config, presenter)
    if args.lang and not engine.set_language(args.lang):
        console.print(f"[yellow]Unsupported language {args.lang!r}, keeping {engine.language}[/yellow]")
    run_quiz(engine, presenter)
    console.print("[dim]Goodbye![/dim]")


if __name__ == "__main__":
    main()
