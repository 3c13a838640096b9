import sys
import typer
from personinfo.config import settings
from personinfo.logging import configure_logging, logger

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    Person Info service CLI.
    """
    configure_logging(settings.LOG_LEVEL)

@app.command(name="serve")
def serve(
    host: str = typer.Option(None, help="Listen host (default: SERVER_HOST)"),
    port: int = typer.Option(None, help="Listen port (default: SERVER_PORT)"),
):
    """
    Run the HTTP API.
    """
    import uvicorn
    from personinfo.api.app import create_app

    listen_host = host or settings.SERVER_HOST
    listen_port = port or settings.SERVER_PORT
    logger.info("starting server on %s:%s", listen_host, listen_port)
    uvicorn.run(
        create_app(),
        host=listen_host,
        port=listen_port,
        timeout_keep_alive=settings.SERVER_IDLE_TIMEOUT_SECONDS,
        timeout_graceful_shutdown=int(settings.SHUTDOWN_TIMEOUT_SECONDS),
        log_level=settings.LOG_LEVEL.lower(),
    )

@app.command(name="doctor")
def doctor():
    """
    Check configuration and database connectivity.
    """
    from personinfo.infra.db import engine as db_engine

    logger.info("Running doctor check...")
    print("\nPerson Info Doctor\n")

    print("[Environment]")
    print(f"  Python: {sys.version.split()[0]}")

    print("\n[Configuration]")
    print(f"  DATABASE_URL:              {db_engine.engine.url.render_as_string(hide_password=True)}")
    print(f"  AGIFY_URL:                 {settings.AGIFY_URL}")
    print(f"  GENDERIZE_URL:             {settings.GENDERIZE_URL}")
    print(f"  NATIONALIZE_URL:           {settings.NATIONALIZE_URL}")
    print(f"  PROVIDER_TIMEOUT_SECONDS:  {settings.PROVIDER_TIMEOUT_SECONDS:g}")

    print("\n[Database]")
    try:
        db_engine.ping(db_engine.engine, settings.HEALTHCHECK_TIMEOUT_SECONDS)
    except Exception as e:
        logger.error(f"Database ping failed: {e}")
        print(f"  connection                 ❌ {e}")
        raise typer.Exit(code=1)
    print("  connection                 ✅ OK\n")


db_app = typer.Typer(help="Database management commands.")
app.add_typer(db_app, name="db")

@db_app.command("init")
def init():
    """Initialize the database tables."""
    from personinfo.db import init_db
    try:
        init_db()
        logger.info("Database initialized successfully.")
        print("✅ Database initialized.")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)

if __name__ == "__main__":
    app()
