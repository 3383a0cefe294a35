"""Click CLI for SrtStudio — show, edit, copy, find, replace, insert, delete, export, clear."""

import sys
from pathlib import Path

import click

from srtstudio.log import setup_logging, get_logger
from srtstudio.exceptions import SrtStudioError
from srtstudio.models import DEFAULT_STORAGE_DIR, EditorConfig, SearchStatus

logger = get_logger(__name__)


def _open_session(ctx, srt_file):
    from srtstudio.session import EditorSession

    session = EditorSession.open(Path(srt_file), config=ctx.obj['config'])
    if session.restore_autosave():
        click.echo(session.save_status)
    return session


def _position(session, sequence):
    """Map a 1-based line number from the command line to a document position."""
    if not 1 <= sequence <= len(session.document):
        raise click.BadParameter(
            f"line #{sequence} does not exist (file has {len(session.document)} lines)",
            param_hint='SEQUENCE',
        )
    return sequence - 1


def _output_dir(srt_file, output_dir):
    return Path(output_dir) if output_dir else Path(srt_file).parent


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging.')
@click.option('--storage-dir', type=click.Path(file_okay=False), envvar='SRTSTUDIO_STORAGE_DIR',
              default=str(DEFAULT_STORAGE_DIR), show_default=True,
              help='Directory holding auto-saved translations.')
@click.pass_context
def cli(ctx, verbose, storage_dir):
    """SrtStudio — translate SubRip (.srt) subtitle files line by line."""
    setup_logging('DEBUG' if verbose else 'WARNING')
    ctx.ensure_object(dict)
    ctx.obj['config'] = EditorConfig(storage_dir=Path(storage_dir))


@cli.command()
@click.argument('srt_file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def show(ctx, srt_file):
    """List every line with its timing, original text and translation."""
    try:
        session = _open_session(ctx, srt_file)
        doc = session.document
        for pos, entry in enumerate(doc):
            click.echo(f"#{entry.index}  {entry.time_range}")
            click.echo(f"  original:    {entry.original_text}".replace('\n', '\n               '))
            if entry.translated_text:
                click.echo(f"  translation: {entry.translated_text}".replace('\n', '\n               '))
                overlong = doc.overlong_lines(pos)
                if overlong:
                    click.echo(f"  ! {len(overlong)} line(s) over {doc.char_limit_per_line} characters")
        translated = sum(1 for entry in doc if entry.is_translated)
        click.echo(f"{translated}/{len(doc)} lines translated")
    except SrtStudioError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('srt_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('sequence', type=int)
@click.argument('text')
@click.option('--literal', is_flag=True, help='Keep backslash-n in TEXT as typed instead of a line break.')
@click.pass_context
def edit(ctx, srt_file, sequence, text, literal):
    """Set the translation of line SEQUENCE (auto-saved).

    A backslash-n in TEXT starts a new subtitle line unless --literal is given.
    """
    if not literal:
        text = text.replace('\\n', '\n')
    try:
        session = _open_session(ctx, srt_file)
        pos = _position(session, sequence)
        ok = session.edit(pos, text)
        click.echo(session.save_status)
        if not ok:
            sys.exit(1)
    except SrtStudioError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('srt_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('sequence', type=int)
@click.pass_context
def copy(ctx, srt_file, sequence):
    """Copy the original text of line SEQUENCE into its translation."""
    try:
        session = _open_session(ctx, srt_file)
        pos = _position(session, sequence)
        session.copy_original(pos)
        click.echo(session.save_status)
    except SrtStudioError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('srt_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('term')
@click.option('--repeat', '-n', default=1, type=click.IntRange(min=1),
              help='Number of consecutive "find next" steps.')
@click.pass_context
def find(ctx, srt_file, term, repeat):
    """Find TERM in the translations (case-insensitive, wraps around)."""
    try:
        session = _open_session(ctx, srt_file)
        for _ in range(repeat):
            outcome = session.find_next(term)
            click.echo(outcome.message)
            if outcome.status == SearchStatus.EMPTY_TERM:
                sys.exit(1)
    except SrtStudioError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('srt_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('term')
@click.argument('replacement')
@click.option('--all', 'replace_all', is_flag=True, help='Replace every occurrence in the file.')
@click.pass_context
def replace(ctx, srt_file, term, replacement, replace_all):
    """Replace TERM with REPLACEMENT in the translations.

    Without --all only the first match is replaced. TERM is a regular
    expression.
    """
    try:
        session = _open_session(ctx, srt_file)
        if replace_all:
            outcome = session.replace_all(term, replacement)
        else:
            found = session.find_next(term)
            if not found.found:
                click.echo(found.message)
                sys.exit(1)
            click.echo(found.message)
            outcome = session.replace_current(term, replacement)
            if outcome.replaced:
                click.echo("Replaced one occurrence.")
        click.echo(outcome.message)
        if outcome.changed:
            click.echo(session.save_status)
        if outcome.status in (SearchStatus.EMPTY_TERM, SearchStatus.MUST_FIND_FIRST):
            sys.exit(1)
    except SrtStudioError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('srt_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('sequence', type=int)
@click.option('--output-dir', '-o', default=None, type=click.Path(file_okay=False),
              help='Output directory (default: next to the input file).')
@click.pass_context
def insert(ctx, srt_file, sequence, output_dir):
    """Insert an empty line before line SEQUENCE and write the result."""
    try:
        session = _open_session(ctx, srt_file)
        pos = _position(session, sequence)
        session.document.select(pos)
        entry = session.insert_before(pos)
        out_path = session.export(_output_dir(srt_file, output_dir))
        click.echo(f"Inserted line #{entry.index} ({entry.time_range}) -> {out_path}")
    except SrtStudioError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('srt_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('sequences', nargs=-1, type=int, required=True)
@click.option('--output-dir', '-o', default=None, type=click.Path(file_okay=False),
              help='Output directory (default: next to the input file).')
@click.pass_context
def delete(ctx, srt_file, sequences, output_dir):
    """Delete lines SEQUENCES... and write the renumbered result."""
    try:
        session = _open_session(ctx, srt_file)
        for sequence in sequences:
            session.document.select(_position(session, sequence))
        removed = session.delete_selected()
        out_path = session.export(_output_dir(srt_file, output_dir))
        click.echo(f"Deleted {removed} line(s) -> {out_path}")
    except SrtStudioError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('srt_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--output-dir', '-o', default=None, type=click.Path(file_okay=False),
              help='Output directory (default: next to the input file).')
@click.option('--clear-autosave', is_flag=True, help='Remove the auto-saved session after export.')
@click.pass_context
def export(ctx, srt_file, output_dir, clear_autosave):
    """Write the translated subtitle file."""
    try:
        session = _open_session(ctx, srt_file)
        out_path = session.export(_output_dir(srt_file, output_dir))
        click.echo(f"Exported {len(session.document)} lines -> {out_path}")
        if clear_autosave:
            session.clear_autosave()
            click.echo(session.save_status)
    except SrtStudioError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('srt_file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def clear(ctx, srt_file):
    """Remove the auto-saved translations for a file."""
    from srtstudio.session import EditorSession

    try:
        session = EditorSession.open(Path(srt_file), config=ctx.obj['config'])
        ok = session.clear_autosave()
        click.echo(session.save_status)
        if not ok:
            sys.exit(1)
    except SrtStudioError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
