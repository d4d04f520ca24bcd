#!/usr/bin/env python3
"""
Main CLI entry point for the socialgraph server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from socialgraph import __version__
from socialgraph.config import settings
from socialgraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="socialgraph")
def cli() -> None:
    """socialgraph CLI - run the server and manage the document store."""
    pass


@cli.command()
@click.option(
    "--host",
    default=lambda: settings.api_host,
    help="Host to bind to (default: SOCIALGRAPH_API_HOST)",
)
@click.option(
    "--port",
    default=lambda: settings.api_port,
    type=int,
    help="Port to bind to (default: SOCIALGRAPH_API_PORT)",
)
@click.option(
    "--reload/--no-reload",
    default=lambda: settings.api_reload,
    help="Enable auto-reload for development (default: SOCIALGRAPH_API_RELOAD)",
)
@click.option(
    "--log-level",
    default=lambda: settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error", "critical"], case_sensitive=False),
    help="Log level (default: SOCIALGRAPH_LOG_LEVEL)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the socialgraph API server."""
    log_level = log_level.lower()
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info("Starting socialgraph API server", host=host, port=port, reload=reload)

    # The app module reads settings at import time
    if log_level == "debug":
        os.environ["SOCIALGRAPH_DEBUG"] = "true"
        os.environ["SOCIALGRAPH_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("SOCIALGRAPH_DEBUG", "false")
        os.environ.setdefault("SOCIALGRAPH_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "socialgraph.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("check-store")
def check_store() -> None:
    """Check that the configured document store is reachable."""
    from socialgraph.store.connection import check_store_connection, close_store, init_store

    configure_logging()

    async def do_check() -> tuple[bool, str | None]:
        init_store()
        try:
            return await check_store_connection()
        finally:
            await close_store()

    success, error_message = asyncio.run(do_check())
    if not success:
        click.echo(f"✗ {error_message}", err=True)
        sys.exit(1)
    click.echo("✓ Document store reachable")


SEED_USER = """
mutation SeedUser($name: String!, $email: String!, $password: String!) {
  createUser(name: $name, email: $email, password: $password) { id }
}
"""

SEED_POST = """
mutation SeedPost($content: String!, $author: ID!) {
  createPost(content: $content, author: $author) { id }
}
"""

SEED_COMMENT = """
mutation SeedComment($text: String!, $author: ID!, $post: ID!) {
  createComment(text: $text, author: $author, post: $post) { id }
}
"""


@cli.command()
@click.option("--email", default="a@x.com", help="Email of the sample user")
@click.option("--password", default="changeme", help="Password of the sample user")
def seed(email: str, password: str) -> None:
    """Create a sample user, post and comment through the GraphQL mutations."""
    from socialgraph.graphql.context import build_context
    from socialgraph.graphql.schema import schema
    from socialgraph.store.connection import close_store, init_store

    configure_logging()

    async def run(query: str, **variables: str) -> dict:
        result = await schema.execute(query, variable_values=variables, context_value=build_context())
        if result.errors:
            raise click.ClickException(result.errors[0].message)
        return result.data or {}

    async def do_seed() -> dict[str, str]:
        init_store()
        try:
            user = await run(SEED_USER, name="Sample User", email=email, password=password)
            user_id = user["createUser"]["id"]
            post = await run(SEED_POST, content="Hello, world", author=user_id)
            post_id = post["createPost"]["id"]
            comment = await run(SEED_COMMENT, text="First!", author=user_id, post=post_id)
            return {"user": user_id, "post": post_id, "comment": comment["createComment"]["id"]}
        finally:
            await close_store()

    ids = asyncio.run(do_seed())
    logger.info("Sample data created", **ids)
    click.echo(f"✓ User created: {ids['user']}")
    click.echo(f"  Post: {ids['post']}")
    click.echo(f"  Comment: {ids['comment']}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
