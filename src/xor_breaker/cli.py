import click
import requests
from rich.console import Console

from xor_breaker.config import DEFAULT_TOP, SolverConfig
from xor_breaker.demo import DEMO_KEY, SAMPLE_PLAINTEXT, demo_ciphertext_b64
from xor_breaker.errors import XorBreakerError
from xor_breaker.keysize import DEFAULT_MAX_KEY_SIZE, DEFAULT_MIN_KEY_SIZE
from xor_breaker.logs import configure_logging
from xor_breaker.solver import break_repeating_key_xor
from xor_breaker.ui import emit
from xor_breaker.utils import (
    b64_decode,
    b64_encode,
    load_ciphertext,
    read_bytes,
    CIPHERTEXT_FORMATS,
    CiphertextFormat,
)
from xor_breaker.xor import encrypt


@click.group()
@click.option("--verbose", "-v", count=True, help="Log progress to stderr (-vv for debug).")
def cli(verbose: int):
    configure_logging(verbose)


def solver(ciphertext: bytes, config: SolverConfig, show_plaintext: bool = True):
    """Break the ciphertext and print the result."""
    try:
        result = break_repeating_key_xor(ciphertext, config)
    except XorBreakerError as e:
        raise click.ClickException(str(e))

    emit(result, Console(), show_plaintext=show_plaintext)
    if not result.reliable:
        click.echo("Warning: ciphertext too short, the recovered key is a guess.", err=True)
    return result


@cli.command()
@click.option("--ciphertext-path", "-c", type=click.Path(exists=True, dir_okay=False))
@click.option("--ciphertext-url", "-u", help="Fetch the ciphertext over HTTP(S) instead.")
@click.option(
    "--ciphertext-format",
    "-f",
    type=click.Choice(CIPHERTEXT_FORMATS),
    default="b64",
)
@click.option("--min-key-size", type=click.IntRange(min=1), default=DEFAULT_MIN_KEY_SIZE,
              envvar="XOR_BREAKER_MIN_KEY_SIZE", show_default=True)
@click.option("--max-key-size", type=click.IntRange(min=1), default=DEFAULT_MAX_KEY_SIZE,
              envvar="XOR_BREAKER_MAX_KEY_SIZE", show_default=True)
@click.option("--workers", type=click.IntRange(min=1), default=1,
              envvar="XOR_BREAKER_WORKERS", show_default=True)
@click.option("--top", type=click.IntRange(min=0), default=DEFAULT_TOP, show_default=True,
              help="Number of ranked key size candidates to show.")
@click.option("--strict", is_flag=True, help="Fail instead of guessing on short ciphertext.")
@click.option("--output", "-o", type=click.Path(dir_okay=False, writable=True),
              help="Write the plaintext bytes to this file.")
def solve(
    ciphertext_path: str | None,
    ciphertext_url: str | None,
    ciphertext_format: CiphertextFormat,
    min_key_size: int,
    max_key_size: int,
    workers: int,
    top: int,
    strict: bool,
    output: str | None,
):
    """Recover the key and plaintext of a repeating-key XOR ciphertext."""
    source = ciphertext_path or ciphertext_url
    if source is None or (ciphertext_path and ciphertext_url):
        raise click.UsageError("Give exactly one of --ciphertext-path or --ciphertext-url.")

    try:
        config = SolverConfig(
            min_key_size=min_key_size,
            max_key_size=max_key_size,
            workers=workers,
            strict=strict,
            top=top,
        )
        ciphertext = load_ciphertext(source, ciphertext_format)
    except (XorBreakerError, ValueError, OSError, requests.RequestException) as e:
        raise click.ClickException(str(e))

    result = solver(ciphertext, config, show_plaintext=output is None)

    if output:
        with open(output, "wb") as f:
            f.write(result.plaintext)
        click.echo(f"Plaintext written to {output}", err=True)


@cli.command("encrypt")
@click.option("--plaintext-path", "-p", required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--key", "-k", required=True, help="Repeating key (text).")
@click.option("--urlsafe", is_flag=True, help="Use the URL-safe base64 alphabet.")
def encrypt_command(plaintext_path: str, key: str, urlsafe: bool):
    """Encrypt a file with repeating-key XOR and print it as base64."""
    try:
        ciphertext = encrypt(read_bytes(plaintext_path), key.encode("utf-8"))
    except (XorBreakerError, OSError) as e:
        raise click.ClickException(str(e))
    click.echo(b64_encode(ciphertext, urlsafe=urlsafe))


@cli.command()
@click.option("--workers", type=click.IntRange(min=1), default=1, envvar="XOR_BREAKER_WORKERS")
def demo(workers: int):
    """Encrypt the built-in sample with the key "ICE" and break it again."""
    ciphertext = b64_decode(demo_ciphertext_b64())
    result = solver(ciphertext, SolverConfig(workers=workers))
    if result.key != DEMO_KEY or result.plaintext != SAMPLE_PLAINTEXT:
        raise click.ClickException("Demo failed to recover the sample key")


if __name__ == "__main__":
    cli()
