from fifteen.main import app

app()
