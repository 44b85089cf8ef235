import logging

import click
from graphql import GraphQLSyntaxError

from .analyzer import ResolutionSession
from .config import CodeGenConfig, load_config
from .errors import ConfigurationError
from .schema_ast import parse_type_expression


@click.command()
@click.option("--type", "-t", "type_expression", required=True, type=str, help="Type expression to resolve, e.g. '[Show!]!'")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--interface", is_flag=True, default=False, help="Reference the generated interface of object types")
@click.option("--wildcard", is_flag=True, default=False, help="Use '? extends' elements for lists of interfaces")
@click.option("--boxed", is_flag=True, default=False, help="Keep boxed types for non-null fields")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("schemas", nargs=-1, type=click.Path(exists=True, resolve_path=True))
def graphql_java_types(type_expression, config, interface, wildcard, boxed, verbose, schemas):
    """Print the Java type a GraphQL type expression resolves to."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    config = load_config(config) if config is not None else CodeGenConfig()
    config.schema_files = [*config.schema_files, *schemas]

    # Apply CLI flag (overrides config file if set)
    if boxed:
        config.generate_boxed_types = True

    try:
        session = ResolutionSession.from_config(config)
        java_type = session.resolve(parse_type_expression(type_expression), interface, wildcard)
    except (ConfigurationError, GraphQLSyntaxError, FileNotFoundError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(str(java_type))
    click.echo(f"string input: {'yes' if session.is_string_input(java_type) else 'no'}")
