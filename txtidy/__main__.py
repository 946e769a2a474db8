from txtidy.cli.main import run

run()
