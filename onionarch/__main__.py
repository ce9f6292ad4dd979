from onionarch.cli.main import run

run()
