import logging
import random

import click

from epigram import __version__

EXIT_DICTIONARY_ERROR = 1
EXIT_UNREADABLE_INPUT = 2
EXIT_EMPTY_CLASS = 3

logger = logging.getLogger(__name__)


class _MutuallyExclusiveOption(click.Option):
    """Click option that is mutually exclusive with another option."""

    def __init__(self, *args, **kwargs):
        self.mutually_exclusive = set(kwargs.pop("mutually_exclusive", []))
        super().__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        for name in self.mutually_exclusive:
            if name in opts and self.name in opts:
                raise click.UsageError(
                    f"--{self.name} and --{name} are mutually exclusive."
                )
        return super().handle_parse_result(ctx, opts, args)


def _read_dictionary(ctx, dictionary_file, fallback_path):
    """Return (text, source name) from an open file, a preset path, or the bundled default."""
    from epigram.phrases import load_dictionary_text

    console = ctx.obj["console"]
    if dictionary_file is not None:
        name = getattr(dictionary_file, "name", "<stdin>")
        if name == "<stdin>" and dictionary_file.isatty():
            console.info("Reading dictionary from stdin, close with ^D (EOF)...")
        try:
            return dictionary_file.read(), name
        except (OSError, UnicodeDecodeError) as e:
            console.error(f"Could not read dictionary: {e}")
            ctx.exit(EXIT_UNREADABLE_INPUT)
    try:
        return load_dictionary_text(fallback_path), fallback_path or "<built-in>"
    except (OSError, UnicodeDecodeError) as e:
        console.error(f"Could not read dictionary: {e}")
        ctx.exit(EXIT_UNREADABLE_INPUT)


def _build(ctx, text, source, fmt, rng=None, substitution="segments"):
    """Parse dictionary text into a generator, exiting with status 1 on errors."""
    from epigram.dictionary import detect_format, parse_dictionary

    if fmt is None:
        fmt = detect_format(source)
    try:
        generator = parse_dictionary(text, fmt, rng=rng, substitution=substitution)
    except ValueError as e:
        ctx.obj["console"].error(str(e))
        ctx.exit(EXIT_DICTIONARY_ERROR)
    logger.info("Loaded %s dictionary from %s", fmt, source)
    return generator


@click.group()
@click.version_option(__version__, prog_name="epigram")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug output.", cls=_MutuallyExclusiveOption, mutually_exclusive=["quiet"])
@click.option("--quiet", "-q", is_flag=True, default=False, help="Suppress all output except errors.", cls=_MutuallyExclusiveOption, mutually_exclusive=["verbose"])
@click.option("--log-file", default=None, type=click.Path(), help="Write structured log to file.")
@click.pass_context
def cli(ctx, verbose, quiet, log_file):
    """Random phrase generator driven by categorized word dictionaries."""
    from epigram.ui import Console
    from epigram.logging_config import setup_logging

    ctx.ensure_object(dict)
    ctx.obj["console"] = Console(quiet=quiet, verbose=verbose)
    ctx.obj["logger"] = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)


@cli.command()
@click.argument("dictionary_file", required=False, type=click.File("r", encoding="utf-8"))
@click.option("--count", "-n", default=None, type=click.IntRange(min=0), help="Number of phrases to generate. Defaults to 1.", cls=_MutuallyExclusiveOption, mutually_exclusive=["infinite"])
@click.option("--infinite", "-i", is_flag=True, default=False, help="Generate phrases until interrupted.", cls=_MutuallyExclusiveOption, mutually_exclusive=["count"])
@click.option("--seed", default=None, type=int, help="Seed the random source for reproducible output.")
@click.option("--substitution", default=None, type=click.Choice(["segments", "textual"]), help="Placeholder substitution mode.")
@click.option("--format", "fmt", default=None, type=click.Choice(["toml", "yaml"]), help="Dictionary format. Guessed from the file extension by default.")
@click.option("--preset", default=None, help="Load defaults from a named preset (e.g. burst, legacy).")
@click.pass_context
def generate(ctx, dictionary_file, count, infinite, seed, substitution, fmt, preset):
    """Generate random phrases from DICTIONARY_FILE (or - for stdin).

    Uses the built-in dictionary when no file is given.
    """
    from epigram.config import load_preset, merge_config, unknown_keys, user_preset_dir
    from epigram.errors import EmptyClassError
    from epigram.phrases import generate_phrases, iter_phrases
    from epigram.ui import StepSummary

    console = ctx.obj["console"]

    # Apply preset config, CLI flags override
    cfg = {}
    if preset:
        try:
            cfg = load_preset(preset, search_dirs=[user_preset_dir()])
        except (FileNotFoundError, ValueError) as e:
            raise click.BadParameter(str(e), param_hint="'--preset'")
        unknown = unknown_keys(cfg)
        if unknown:
            logger.warning("Ignoring unknown preset keys: %s", ", ".join(unknown))
    if infinite:
        cfg.pop("count", None)
    elif count is not None:
        cfg["infinite"] = False
    cfg = merge_config(cfg, {
        "count": count,
        "infinite": infinite or None,
        "seed": seed,
        "substitution": substitution,
    })

    text, source = _read_dictionary(ctx, dictionary_file, cfg.get("dictionary"))
    rng = random.Random(cfg.get("seed"))
    generator = _build(ctx, text, source, fmt, rng=rng,
                       substitution=cfg.get("substitution", "segments"))

    summary = StepSummary("Generate")
    try:
        if cfg.get("infinite", False):
            phrases = iter_phrases(generator)
        else:
            phrases = generate_phrases(generator, cfg.get("count", 1))
        for phrase in phrases:
            click.echo(phrase)
            summary.record_success()
    except EmptyClassError as e:
        summary.record_failure(str(e))
        console.error(f"Could not generate phrase: {e}")
        ctx.exit(EXIT_EMPTY_CLASS)
    finally:
        console.debug(summary.render())


@cli.command()
@click.argument("dictionary_file", required=False, type=click.File("r", encoding="utf-8"))
@click.option("--format", "fmt", default=None, type=click.Choice(["toml", "yaml"]), help="Dictionary format. Guessed from the file extension by default.")
@click.pass_context
def classes(ctx, dictionary_file, fmt):
    """List the word classes in DICTIONARY_FILE with their word counts."""
    from epigram.generators import TemplateExpander

    text, source = _read_dictionary(ctx, dictionary_file, None)
    generator = _build(ctx, text, source, fmt)
    if not isinstance(generator, TemplateExpander):
        raise click.ClickException(f"'{generator.name}' generators have no word classes.")

    bank = generator.bank
    for name in bank.names():
        words = bank.get(name)
        click.echo(f"{name}: {len(words)}")
        if not words:
            ctx.obj["console"].info(f"  warning: class '{name}' is empty")


@cli.command()
def example():
    """Print an example dictionary to start from."""
    from epigram.phrases import example_dictionary_text

    click.echo(example_dictionary_text(), nl=False)


@cli.command()
def presets():
    """List available presets."""
    from epigram.config import list_presets, user_preset_dir

    for name in list_presets(search_dirs=[user_preset_dir()]):
        click.echo(name)


if __name__ == "__main__":
    cli()
