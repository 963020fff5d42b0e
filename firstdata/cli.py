"""Command line entry point: ``firstdata charge`` and ``firstdata code``."""

import json
import logging

import click

from .config import Config
from .models import TransactionType
from .payment_service import GatewayClient
from .response_codes import get_response_code

TRANSACTION_TYPES = {t.name.lower().replace("_", "-"): t for t in TransactionType}


def _parse_extra(ctx, param, values):
    extra = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        extra[key] = value
    return extra


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log the request pipeline to stderr.")
def cli(verbose):
    """First Data Global Gateway e4 client."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command("charge")
@click.option("--type", "transaction_type", type=click.Choice(sorted(TRANSACTION_TYPES)),
              default="purchase", show_default=True)
@click.option("--amount", required=True)
@click.option("--card-number")
@click.option("--expiry", help="Card expiry as MMYY.")
@click.option("--name", "cardholder_name")
@click.option("--cvv")
@click.option("--currency")
@click.option("--transaction-tag")
@click.option("--auth-number")
@click.option("--field", "extra", multiple=True, callback=_parse_extra,
              help="Additional request field as KEY=VALUE (repeatable).")
@click.option("--test/--live", "test_mode", default=None,
              help="Use the demo endpoint (default from FIRSTDATA_TEST_MODE).")
@click.option("--api-version")
def charge(transaction_type, amount, card_number, expiry, cardholder_name, cvv,
           currency, transaction_tag, auth_number, extra, test_mode, api_version):
    """Submit one transaction and print its outcome."""
    settings = Config.from_env()
    client = GatewayClient(settings=settings, test_mode=test_mode)
    if api_version:
        client.set_api_version(api_version)

    client.set_transaction_type(TRANSACTION_TYPES[transaction_type]).set_amount(amount)
    if card_number:
        client.set_credit_card_number(card_number)
    if expiry:
        client.set_credit_card_expiration(expiry)
    if cardholder_name:
        client.set_credit_card_name(cardholder_name)
    if cvv:
        client.set_credit_card_verification(cvv)
    if currency:
        client.set_currency(currency)
    if transaction_tag:
        client.set_transaction_tag(transaction_tag)
    if auth_number:
        client.set_auth_number(auth_number)
    if extra:
        client.set_post_data(extra)

    client.process()

    if client.is_error():
        click.echo(f"Error {client.error_code}: {client.error_message}", err=True)
        raise SystemExit(1)

    click.echo(json.dumps({
        "approved": client.is_approved(),
        "transaction_tag": client.get_transaction_tag(),
        "authorization_num": client.get_auth_number(),
        "bank_resp_code": client.get_bank_response_code(),
        "bank_message": client.get_bank_response_message(),
        "avs": client.get_avs(),
    }, indent=2))


@cli.command("code")
@click.argument("code", type=int)
def code(code):
    """Describe a bank response code."""
    entry = get_response_code(code)
    if entry is None:
        raise click.ClickException(f"Unknown response code {code}")
    click.echo(f"{entry.code} [{entry.response}] {entry.name}")
    click.echo(f"Action: {entry.action}")
    click.echo(entry.comments)


def main():
    cli()
