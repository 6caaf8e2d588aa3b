from adventure.main import app

app()
