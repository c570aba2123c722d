"""Command line entry point for running the greeter server."""
import click

from .. import create_app
from ..config import DEFAULT_HOST, DEFAULT_PORT
from ..server import ServerBindError, serve


@click.command()
@click.option('--host', envvar='HOST', default=DEFAULT_HOST, show_default=True,
              help='Address to bind (env: HOST)')
@click.option('--port', envvar='PORT', type=click.IntRange(0, 65535), default=DEFAULT_PORT,
              show_default=True, help='TCP port to listen on (env: PORT)')
@click.option('--config', 'config_name', envvar='GREETER_CONFIG', default='production',
              type=click.Choice(['development', 'testing', 'production']),
              show_default=True, help='Configuration profile (env: GREETER_CONFIG)')
def serve_command(host, port, config_name):
    """Serve the greeting endpoints over HTTP."""
    app = create_app(config_name)

    try:
        serve(app, host, port)
    except ServerBindError as e:
        raise click.ClickException(str(e))


def main():
    serve_command(prog_name='greeter-web')
