from reverie.presentation.api import create_app

app = create_app()
