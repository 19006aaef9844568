from port_provider.cli.commands import cli_start


def cli() -> None:
    cli_start(obj={})


if __name__ == "__main__":
    cli()
