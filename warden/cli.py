"""
Warden CLI
===========

Click-based command-line interface for the Warden password toolkit.
Provides subcommands for policy checks, Argon2id hashing and
verification, batch hashing, SHA-1 breach digests and a hashing
benchmark.

Usage::

    python -m warden check "MyP@ssw0rd!"
    python -m warden check --store "correct-Horse-battery-9"
    python -m warden hash "MyP@ssw0rd!"
    python -m warden verify "MyP@ssw0rd!" '$argon2id$v=19$...'
    python -m warden batch passwords.txt
    python -m warden sha1 password
    python -m warden breach-key password
    python -m warden benchmark --count 10

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import click

from shared.config import WardenConfig
from shared.console import WardenConsole
from shared.errors import WardenError
from shared.models import ScanResult

from warden.core.engine import WardenEngine
from warden.core.models import PasswordAnalysis
from warden.output.console import WardenConsoleOutput
from warden.output.report import WardenReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a Warden configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """Warden -- Password Policy & Hashing Toolkit.

    Check passwords against policy, hash and verify them with Argon2id,
    and derive SHA-1 keys for breach lookups.
    """
    ctx.ensure_object(dict)
    console = WardenConsole(quiet=quiet)
    ctx.obj["console"] = console

    try:
        warden_config = WardenConfig.load(config)
        engine = WardenEngine(warden_config)
    except WardenError as exc:
        console.error(str(exc))
        ctx.exit(1)

    ctx.obj["config"] = warden_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["engine"] = engine
    ctx.obj["display"] = WardenConsoleOutput(
        console, mask_passwords=warden_config.report.mask_passwords
    )
    ctx.obj["reporter"] = WardenReportGenerator(
        version=warden_config.global_settings.version
    )

    if not quiet and output == "console":
        console.banner(version=warden_config.global_settings.version)


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Write *result* as JSON or HTML according to the selected format."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: WardenReportGenerator = ctx.obj["reporter"]
    console: WardenConsole = ctx.obj["console"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(json.dumps(
                reporter.build_json(result),
                indent=2,
                ensure_ascii=False,
                default=str,
            ))
    elif output_format == "html":
        if output_file:
            path = Path(output_file)
        else:
            output_dir = Path(ctx.obj["config"].global_settings.output_dir)
            path = output_dir / f"warden_report_{result.start_time:%Y%m%d_%H%M%S}.html"
        path = reporter.generate_html(result, path)
        console.success(f"HTML report saved to: {path}")


def _emit_json(ctx: click.Context, payload: Any) -> bool:
    """Echo *payload* as JSON when JSON output was requested.

    Returns ``True`` when the payload was handled, so the caller can
    skip console rendering.
    """
    if ctx.obj["output_format"] != "json":
        return False
    text = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    output_file = ctx.obj["output_file"]
    if output_file:
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        ctx.obj["console"].success(f"JSON saved to: {path}")
    else:
        click.echo(text)
    return True


def _fail(ctx: click.Context, exc: WardenError) -> None:
    ctx.obj["console"].error(str(exc))
    ctx.exit(1)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password")
@click.option(
    "--store", "-s",
    is_flag=True,
    default=False,
    help="Also hash the password if it is compliant.",
)
@click.pass_context
def check(ctx: click.Context, password: str, store: bool) -> None:
    """Check a password against the policy.

    Scores strength, estimates entropy, detects repeats and common
    sequences, and lists feedback in a fixed order.
    """
    engine: WardenEngine = ctx.obj["engine"]
    display: WardenConsoleOutput = ctx.obj["display"]

    try:
        result = engine.assess_password(password, store=store)
    except WardenError as exc:
        _fail(ctx, exc)

    analysis = PasswordAnalysis.model_validate(result.metadata)
    if ctx.obj["output_format"] == "console":
        display.display_analysis(analysis)
        ctx.obj["console"].findings_table(result.findings)
        if "hash" in result.metadata:
            display.display_hash(result.metadata["hash"])
    else:
        _handle_output(ctx, result)


@cli.command("hash")
@click.argument("password")
@click.pass_context
def hash_command(ctx: click.Context, password: str) -> None:
    """Hash a password with Argon2id and a fresh random salt."""
    engine: WardenEngine = ctx.obj["engine"]

    try:
        hashed = engine.hash(password)
    except WardenError as exc:
        _fail(ctx, exc)

    if not _emit_json(ctx, {"hash": hashed}):
        ctx.obj["display"].display_hash(hashed)


@cli.command()
@click.argument("password")
@click.argument("hash_string", metavar="HASH")
@click.pass_context
def verify(ctx: click.Context, password: str, hash_string: str) -> None:
    """Verify a password against a stored Argon2 hash.

    Exits with status 1 on a mismatch or an unusable hash.
    """
    engine: WardenEngine = ctx.obj["engine"]
    matches = engine.verify(password, hash_string)
    needs_rehash = matches and engine.hasher.needs_rehash(hash_string)

    if not _emit_json(ctx, {"valid": matches, "needsRehash": needs_rehash}):
        ctx.obj["display"].display_verification(matches)
        if needs_rehash:
            ctx.obj["console"].warning(
                "Hash parameters differ from the current configuration; rehash on next login."
            )

    if not matches:
        ctx.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def batch(ctx: click.Context, file: str) -> None:
    """Hash every password in FILE, one per line, in parallel.

    Blank lines are skipped and duplicates are hashed once. A password
    that fails to hash is reported without aborting the batch.
    """
    engine: WardenEngine = ctx.obj["engine"]
    console: WardenConsole = ctx.obj["console"]

    lines = Path(file).read_text(encoding="utf-8").splitlines()
    passwords = [line for line in lines if line]
    if not passwords:
        console.warning(f"No passwords found in {file}")
        return

    console.info(f"Read {len(passwords)} passwords from {file}")
    with console.status(f"Hashing {len(passwords)} passwords..."):
        outcomes = engine.batch_hash(passwords)

    sentinel = ctx.obj["config"].hashing.error_sentinel
    payload = {
        password: outcome.hash if outcome.ok else sentinel
        for password, outcome in outcomes.items()
    }
    if not _emit_json(ctx, payload):
        ctx.obj["display"].display_batch(outcomes)


@cli.command()
@click.argument("password")
@click.pass_context
def sha1(ctx: click.Context, password: str) -> None:
    """Print the uppercase SHA-1 digest used for breach lookups."""
    digest = ctx.obj["engine"].digest(password)
    if not _emit_json(ctx, {"sha1": digest}):
        ctx.obj["display"].display_digest(digest)


@cli.command("breach-key")
@click.argument("password")
@click.pass_context
def breach_key(ctx: click.Context, password: str) -> None:
    """Split the SHA-1 digest into a range-query prefix and suffix.

    Only the five-character prefix is ever sent to a breach service.
    """
    key = ctx.obj["engine"].breach_key(password)
    if not _emit_json(ctx, key.to_wire()):
        ctx.obj["display"].display_breach_key(key)


@cli.command()
@click.option(
    "--count", "-n",
    type=click.IntRange(min=1),
    multiple=True,
    help="Number of passwords per run; repeat for several runs (default 10 and 100).",
)
@click.pass_context
def benchmark(ctx: click.Context, count: tuple[int, ...]) -> None:
    """Compare sequential hashing against the parallel batch path."""
    engine: WardenEngine = ctx.obj["engine"]
    console: WardenConsole = ctx.obj["console"]

    try:
        with console.status("Benchmarking Argon2id..."):
            results = engine.benchmark(count) if count else engine.benchmark()
    except WardenError as exc:
        _fail(ctx, exc)

    if not _emit_json(ctx, [r.to_wire() for r in results]):
        ctx.obj["display"].display_benchmark(results)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Warden CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
