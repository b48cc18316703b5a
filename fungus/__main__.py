from .cli.run import run

run()
