from timefield.cli import cli

cli()
