from mkgo.cli import app

app()
