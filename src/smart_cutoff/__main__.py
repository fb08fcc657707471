from smart_cutoff.cli import app

app()
